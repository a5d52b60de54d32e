"""Target emitters: turn a ComponentSchema into component source text."""

from __future__ import annotations

from mistcss.emitters.astro import AstroEmitter
from mistcss.emitters.base import Emitter, EmitterRegistry, Target
from mistcss.emitters.react import ReactEmitter
from mistcss.emitters.svelte import SvelteEmitter
from mistcss.emitters.vue import VueEmitter
from mistcss.model.schema import ComponentSchema

__all__ = [
    "Target",
    "Emitter",
    "EmitterRegistry",
    "ReactEmitter",
    "AstroEmitter",
    "VueEmitter",
    "SvelteEmitter",
    "create_default_registry",
    "render",
]


def create_default_registry() -> EmitterRegistry:
    """Create an EmitterRegistry with every built-in target registered.

    Hono shares the React emitter; its target flavor switches the runtime
    bindings.
    """
    registry = EmitterRegistry()
    react = ReactEmitter()
    registry.register(Target.REACT, react)
    registry.register(Target.HONO, react)
    registry.register(Target.ASTRO, AstroEmitter())
    registry.register(Target.VUE, VueEmitter())
    registry.register(Target.SVELTE, SvelteEmitter())
    return registry


_DEFAULT_REGISTRY = create_default_registry()


def render(target: Target, name: str, schema: ComponentSchema) -> str:
    """Render *schema* as component *name* for *target* with the built-in emitters."""
    return _DEFAULT_REGISTRY.render(target, name, schema)
