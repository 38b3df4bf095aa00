"""Component template rendering tests."""

from __future__ import annotations

from component_docgen.document_synthesis import (
    ComponentContext,
    FieldContext,
    render_component,
    render_component_template,
)
from component_docgen.field_schema import ComponentSpec, FieldInterpolation, FieldSpec

_TIERED_DOCUMENT = """---
title: http_client
type: output
---

<!--
     THIS FILE IS AUTOGENERATED!

     To make changes please edit the field declarations of the output `http_client`.
-->

Sends messages.

import Tabs from '@theme/Tabs';

<Tabs defaultValue="common" values={[
  { label: 'Common', value: 'common', },
  { label: 'Advanced', value: 'advanced', },
]}>

import TabItem from '@theme/TabItem';

<TabItem value="common">

```yaml
http_client:
  timeout: 5s
```

</TabItem>
<TabItem value="advanced">

```yaml
http_client:
  retries: 3
  timeout: 5s
```

</TabItem>
</Tabs>

Long form.

## Fields

### `retries`

`number` Sorry! This field is missing documentation.

### `timeout`

`string` Request timeout.

```yaml
# Examples

timeout: 5s

timeout: 1m
```
"""


def _field_context(**overrides: object) -> FieldContext:
    values: dict[str, object] = {
        "name": "verb",
        "type": "string",
        "description": "HTTP verb.",
        "advanced": False,
        "interpolation": FieldInterpolation.NONE,
        "examples": (),
        "options": (),
    }
    values.update(overrides)
    return FieldContext(**values)  # type: ignore[arg-type]


def _component_context(*fields: FieldContext, advanced_config: str = "a: 1\n") -> ComponentContext:
    return ComponentContext(
        name="http_client",
        type="output",
        summary="",
        description="",
        fields=fields,
        common_config="a: 1\n",
        advanced_config=advanced_config,
    )


def test_tiered_component_renders_tabs_and_field_sections() -> None:
    spec = ComponentSpec(
        name="http_client",
        type="output",
        summary="Sends messages.",
        description="\nLong form.",
        fields=(
            FieldSpec(name="retries", advanced=True),
            FieldSpec(name="timeout", description="Request timeout.", examples=("5s", "1m")),
        ),
    )

    document = render_component(spec, {"retries": 3, "timeout": "5s"})

    assert document.decode("utf-8") == _TIERED_DOCUMENT


def test_identical_tiers_render_single_yaml_block() -> None:
    text = render_component_template(_component_context())

    assert "```yaml\na: 1\n```\n" in text
    assert "<Tabs" not in text
    assert "## Fields" not in text


def test_options_are_listed_in_declaration_order() -> None:
    text = render_component_template(_component_context(_field_context(options=("GET", "POST"))))

    assert "Options are: `GET`, `POST`.\n" in text


def test_interpolation_notes() -> None:
    batch_text = render_component_template(
        _component_context(_field_context(interpolation=FieldInterpolation.BATCH_WIDE))
    )
    item_text = render_component_template(
        _component_context(_field_context(interpolation=FieldInterpolation.PER_ITEM))
    )
    none_text = render_component_template(_component_context(_field_context()))

    assert "that are resolved batch wide." in batch_text
    assert "[interpolation functions](/docs/configuration/interpolation#functions).\n" in item_text
    assert "interpolation functions" not in none_text


def test_different_tiers_render_both_blocks() -> None:
    text = render_component_template(_component_context(advanced_config="a: 1\nb: 2\n"))

    assert '<TabItem value="common">\n\n```yaml\na: 1\n```' in text
    assert '<TabItem value="advanced">\n\n```yaml\na: 1\nb: 2\n```' in text
