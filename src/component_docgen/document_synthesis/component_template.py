"""Markdown template for component documents."""

from __future__ import annotations

import dataclasses

from jinja2 import Environment, StrictUndefined

from .render_context import ComponentContext

COMPONENT_TEMPLATE_TEXT = """---
title: {{ name }}
type: {{ type }}
---

<!--
     THIS FILE IS AUTOGENERATED!

     To make changes please edit the field declarations of the {{ type }} `{{ name }}`.
-->

{% if summary %}
{{ summary }}

{% endif %}
{% if common_config == advanced_config %}
```yaml
{{ common_config }}```
{% else %}
import Tabs from '@theme/Tabs';

<Tabs defaultValue="common" values={[
  { label: 'Common', value: 'common', },
  { label: 'Advanced', value: 'advanced', },
]}>

import TabItem from '@theme/TabItem';

<TabItem value="common">

```yaml
{{ common_config }}```

</TabItem>
<TabItem value="advanced">

```yaml
{{ advanced_config }}```

</TabItem>
</Tabs>
{% endif %}
{% if description %}

{{ description }}
{% endif %}
{% if fields %}

## Fields
{% endif %}
{% for field in fields %}

### `{{ field.name }}`

`{{ field.type }}` {{ field.description }}
{% if field.options %}

Options are: `{{ field.options | join("`, `") }}`.
{% endif %}
{% if field.interpolation.value == "batch-wide" %}

This field supports [interpolation functions](/docs/configuration/interpolation#functions) \
that are resolved batch wide.
{% elif field.interpolation.value == "per-item" %}

This field supports [interpolation functions](/docs/configuration/interpolation#functions).
{% endif %}
{% if field.examples %}

```yaml
# Examples

{% for example in field.examples %}
{% if not loop.first %}

{% endif %}
{{ example }}{% endfor %}```
{% endif %}
{% endfor %}
"""

_ENVIRONMENT = Environment(
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)
_COMPONENT_TEMPLATE = _ENVIRONMENT.from_string(COMPONENT_TEMPLATE_TEXT)


def render_component_template(context: ComponentContext) -> str:
    """Execute the component template against a render context."""
    return _COMPONENT_TEMPLATE.render(dataclasses.asdict(context))
