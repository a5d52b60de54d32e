"""Svelte component emitter (``.svelte``)."""

from __future__ import annotations

from mistcss.emitters.common import (
    HEADER,
    class_list,
    join_blocks,
    prop_type,
    states_comment,
    variant_table,
)
from mistcss.model.schema import ComponentSchema


class SvelteEmitter:
    """Render a Svelte component with one exported prop per modifier."""

    def emit(self, name: str, schema: ComponentSchema, flavor: bool = False) -> str:
        exports = []
        for prop in schema.prop_order:
            if prop in schema.boolean_modifiers:
                exports.append(f"  export let {prop}: boolean = false")
            else:
                exports.append(
                    f"  export let {prop}: {prop_type(schema, prop)} | undefined = undefined"
                )
        script = join_blocks(
            f"  // {HEADER} ({name})",
            states_comment(schema, indent="  "),
            "\n".join(exports),
            variant_table(schema, indent="  "),
            f"  $: classes = {class_list(schema)}",
        )
        return (
            f'<script lang="ts">\n{script}</script>\n\n'
            "<div {...$$restProps} class={classes}><slot /></div>\n"
        )
