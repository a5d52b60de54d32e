"""Vue component emitter (``defineComponent`` with a TSX render function)."""

from __future__ import annotations

from mistcss.emitters.common import (
    HEADER,
    class_list,
    join_blocks,
    js,
    prop_type,
    states_comment,
    variant_table,
)
from mistcss.model.schema import ComponentSchema


class VueEmitter:
    """Render a Vue component; props are read from the reactive ``props`` object."""

    def emit(self, name: str, schema: ComponentSchema, flavor: bool = False) -> str:
        declarations = []
        for prop in schema.prop_order:
            if prop in schema.boolean_modifiers:
                declarations.append(f"    {prop}: {{ type: Boolean, default: false }},")
            else:
                declarations.append(
                    f"    {prop}: {{ type: String as PropType<{prop_type(schema, prop)}>,"
                    " default: undefined },"
                )
        component = "\n".join(
            [
                f"export const {name} = defineComponent({{",
                f"  name: {js(name)},",
                "  props: {",
                *declarations,
                "  },",
                "  setup(props, { slots }) {",
                "    return () => {",
                f"      const classes = {class_list(schema, lambda p: f'props.{p}')}",
                "      return <div class={classes}>{slots.default?.()}</div>",
                "    }",
                "  },",
                "})",
            ]
        )
        return join_blocks(
            f"// {HEADER}",
            "import { defineComponent, type PropType } from 'vue'",
            variant_table(schema),
            "\n".join(b for b in (states_comment(schema), component) if b),
        )
