"""Class resolution: the props -> class string contract every emitter honors."""

from __future__ import annotations

from typing import Any, Mapping

from mistcss.model.schema import ComponentSchema

__all__ = ["resolve", "resolve_tokens"]


def resolve_tokens(
    schema: ComponentSchema, props: Mapping[str, Any] | None = None
) -> list[str]:
    """Return the class tokens *props* select on *schema*, in render order.

    Base classes come first, then modifiers in declaration order.  A boolean
    modifier contributes its token when its prop is truthy; a variant group
    contributes the token of the selected value.  Unknown props and unknown
    variant values contribute nothing.
    """
    props = props or {}
    tokens: list[str] = []
    seen: set[str] = set()

    def add(token: str) -> None:
        if token not in seen:
            seen.add(token)
            tokens.append(token)

    for token in schema.base_classes:
        add(token)
    for prop in schema.prop_order:
        value = props.get(prop)
        if prop in schema.boolean_modifiers:
            if value:
                add(schema.boolean_modifiers[prop])
        elif isinstance(value, str):
            token = schema.variant_groups.get(prop, {}).get(value)
            if token is not None:
                add(token)
    return tokens


def resolve(schema: ComponentSchema, props: Mapping[str, Any] | None = None) -> str:
    """Space-joined class string for *props* on *schema*."""
    return " ".join(resolve_tokens(schema, props))
