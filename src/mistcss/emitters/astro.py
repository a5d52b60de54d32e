"""Astro component emitter (``.astro``)."""

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


class AstroEmitter:
    """Render an Astro component: typed frontmatter plus a slotted ``div``."""

    def emit(self, name: str, schema: ComponentSchema, flavor: bool = False) -> str:
        attributes = "HTMLAttributes<'div'>"
        if schema.prop_order:
            attributes = f"Omit<{attributes}, {omitted_attributes(schema)}>"
        fields = [f"  {p}?: {prop_type(schema, p)}" for p in schema.prop_order]
        interface = "\n".join(
            [f"interface Props extends {attributes} {{", *fields, "}"]
        )
        params = ", ".join([*schema.prop_order, "...props"])
        script = "\n".join(
            [
                f"const {{ {params} }} = Astro.props",
                f"const classes = {class_list(schema)}",
            ]
        )
        frontmatter = join_blocks(
            f"// {HEADER} ({name})",
            "import type { HTMLAttributes } from 'astro/types'",
            "\n".join(b for b in (states_comment(schema), interface) if b),
            variant_table(schema),
            script,
        )
        return f"---\n{frontmatter}---\n\n<div {{...props}} class={{classes}}><slot /></div>\n"
