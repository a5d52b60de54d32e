"""React function-component emitter (``.tsx``); the alternate flavor targets Hono JSX."""

from __future__ import annotations

from mistcss.emitters.common import (
    HEADER,
    class_list,
    join_blocks,
    omitted_attributes,
    prop_type,
    states_comment,
    variant_table,
)
from mistcss.model.schema import ComponentSchema


class ReactEmitter:
    """Render a typed function component whose props select CSS classes.

    With ``flavor=True`` the component imports its JSX types from
    ``hono/jsx`` and sets ``class`` instead of ``className``.
    """

    def emit(self, name: str, schema: ComponentSchema, flavor: bool = False) -> str:
        if flavor:
            imports = "import type { Child, JSX } from 'hono/jsx'"
            children_type = "Child"
            class_attr = "class"
        else:
            imports = "import type { JSX, ReactNode } from 'react'"
            children_type = "ReactNode"
            class_attr = "className"

        attributes = "JSX.IntrinsicElements['div']"
        if schema.prop_order:
            attributes = f"Omit<{attributes}, {omitted_attributes(schema)}>"
        fields = [f"  children?: {children_type}"]
        fields += [f"  {p}?: {prop_type(schema, p)}" for p in schema.prop_order]
        props_type = "\n".join(
            [f"type {name}Props = {{", *fields, f"}} & {attributes}"]
        )

        params = ", ".join(["children", *schema.prop_order, "...props"])
        component = "\n".join(
            [
                f"export function {name}({{ {params} }}: {name}Props) {{",
                f"  const classes = {class_list(schema)}",
                "  return (",
                f"    <div {{...props}} {class_attr}={{classes}}>",
                "      {children}",
                "    </div>",
                "  )",
                "}",
            ]
        )
        return join_blocks(
            f"// {HEADER}",
            imports,
            props_type,
            variant_table(schema),
            "\n".join(b for b in (states_comment(schema), component) if b),
        )
