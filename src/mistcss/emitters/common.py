"""Building blocks shared by every emitter.

``class_list`` is the one place the class resolution order is rendered to
JavaScript, so all targets reproduce :func:`mistcss.resolver.resolve`.
"""

from __future__ import annotations

import json
from typing import Callable

from mistcss.model.schema import ComponentSchema

HEADER = "Generated by mistcss. Do not edit."

VARIANT_TABLE = "variantClasses"


def js(value: str) -> str:
    """JavaScript string literal for *value*."""
    return json.dumps(value)


def prop_type(schema: ComponentSchema, prop: str) -> str:
    """TypeScript type of *prop*: ``boolean`` or a union of variant values."""
    if prop in schema.boolean_modifiers:
        return "boolean"
    return " | ".join(js(v) for v in schema.variant_groups[prop])


def omitted_attributes(schema: ComponentSchema) -> str:
    """Union of prop names to drop from the element's own attribute type."""
    return " | ".join(js(p) for p in schema.prop_order)


def variant_table(schema: ComponentSchema, indent: str = "") -> str | None:
    """``const variantClasses = {...} as const`` or None without groups."""
    if not schema.variant_groups:
        return None
    lines = [f"{indent}const {VARIANT_TABLE} = {{"]
    for prop, values in schema.variant_groups.items():
        pairs = ", ".join(f"{js(v)}: {js(t)}" for v, t in values.items())
        lines.append(f"{indent}  {prop}: {{ {pairs} }},")
    lines.append(f"{indent}}} as const")
    return "\n".join(lines)


def class_list(schema: ComponentSchema, ref: Callable[[str], str] = str) -> str:
    """JavaScript expression evaluating to the resolved class string.

    *ref* maps a prop name to the expression reading it (``color`` or
    ``props.color``).
    """
    parts = [js(" ".join(schema.base_classes))]
    for prop in schema.prop_order:
        read = ref(prop)
        if prop in schema.boolean_modifiers:
            parts.append(f"{read} && {js(schema.boolean_modifiers[prop])}")
        else:
            parts.append(f"{read} && {VARIANT_TABLE}.{prop}[{read}]")
    return f"[{', '.join(parts)}].filter(Boolean).join(' ')"


def states_comment(schema: ComponentSchema, indent: str = "") -> str | None:
    """JSDoc block listing the pseudo-class states styled on the component."""
    if not schema.state_modifiers:
        return None
    states = ", ".join(f":{s.pseudo} ({s.token})" for s in schema.state_modifiers)
    return f"{indent}/**\n{indent} * States: {states}\n{indent} */"


def join_blocks(*blocks: str | None) -> str:
    """Join non-empty blocks with a blank line and end with a newline."""
    return "\n\n".join(b for b in blocks if b) + "\n"
