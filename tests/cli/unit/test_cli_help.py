"""CLI smoke tests."""

from click.testing import CliRunner
from component_docgen.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "render" in result.output
    assert "check" in result.output
    assert "generate-definition" in result.output
