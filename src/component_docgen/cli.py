"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from component_docgen.config_splitting import SplitStructuralMismatchError
from component_docgen.configuration import (
    DEFAULT_DEFINITION_FILENAME,
    ComponentDefinitionError,
    load_component_definition,
    write_placeholder_definition,
)
from component_docgen.document_synthesis import UnrecognizedFieldError, render_component
from component_docgen.structured_data import SerializationError, normalize_example
from component_docgen.tree_reconciliation import SchemaMismatchError, require_reconciled
from component_docgen.type_inference import TypeInferenceError

_LOGGER = logging.getLogger(__name__)

_RENDER_ERRORS = (
    ComponentDefinitionError,
    SerializationError,
    SplitStructuralMismatchError,
    SchemaMismatchError,
    UnrecognizedFieldError,
    TypeInferenceError,
)

_DEFINITION_OPTION = click.option(
    "--definition",
    "definition_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML component definition (spec and full example)",
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="component-docgen")
@click.option("--verbose", is_flag=True, default=False, help="Log debug details to stderr.")
def cli(verbose: bool) -> None:
    """Component configuration documentation generator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command(name="generate-definition")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_DEFINITION_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML component definition template to write",
)
def generate_definition(output_path: str) -> None:
    """Generate a placeholder component definition with guidance comments."""
    try:
        resolved_output = write_placeholder_definition(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="check")
@_DEFINITION_OPTION
def check(definition_path: str) -> None:
    """Check that the declared fields and the full example agree."""
    try:
        definition = load_component_definition(definition_path)
        if definition.spec.fields:
            result = require_reconciled(
                definition.spec.fields, normalize_example(definition.example)
            )
            _LOGGER.info("%d declared fields reconciled", len(result.fields))
    except _RENDER_ERRORS as exc:
        raise CliError(str(exc)) from exc
    click.echo("ok")


@cli.command(name="render")
@_DEFINITION_OPTION
@click.option(
    "--nest",
    is_flag=True,
    default=False,
    help="Nest the configuration examples under the component type.",
)
def render(definition_path: str, nest: bool) -> None:
    """Render the markdown document of a component to stdout."""
    try:
        definition = load_component_definition(definition_path)
        document = render_component(definition.spec, definition.example, nest=nest)
    except _RENDER_ERRORS as exc:
        raise CliError(str(exc)) from exc
    click.echo(document.decode("utf-8"), nl=False)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
