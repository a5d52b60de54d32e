"""Emitter protocol, render targets and the target -> emitter registry."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from mistcss.model.schema import ComponentSchema


class Target(Enum):
    """Component formats mistcss can render."""

    REACT = "react"
    HONO = "hono"
    ASTRO = "astro"
    VUE = "vue"
    SVELTE = "svelte"

    @property
    def extension(self) -> str:
        """Suffix replacing ``.css`` on the generated file."""
        return _EXTENSIONS[self]

    @property
    def flavor(self) -> bool:
        """True for targets rendered by another target's emitter in its alternate flavor."""
        return self is Target.HONO

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, value: str) -> Target:
        """Look up a target by its CLI name; raises ValueError for unknown names."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(
                f"Invalid target {value!r}; expected one of: "
                + ", ".join(t.value for t in cls)
            ) from None


_EXTENSIONS: dict[Target, str] = {
    Target.REACT: ".tsx",
    Target.HONO: ".tsx",
    Target.ASTRO: ".astro",
    Target.VUE: ".tsx",
    Target.SVELTE: ".svelte",
}

_LABELS: dict[Target, str] = {
    Target.REACT: "React",
    Target.HONO: "Hono",
    Target.ASTRO: "Astro",
    Target.VUE: "Vue",
    Target.SVELTE: "Svelte",
}


class Emitter(Protocol):
    """Renders one component schema into source text for a target format.

    Implementations must not mutate *schema* and must reproduce
    :func:`mistcss.resolver.resolve` in the generated runtime.
    """

    def emit(self, name: str, schema: ComponentSchema, flavor: bool = False) -> str: ...


class EmitterRegistry:
    """Maps render targets to emitter implementations."""

    def __init__(self) -> None:
        self._emitters: dict[Target, Emitter] = {}

    def register(self, target: Target, emitter: Emitter) -> None:
        """Register an emitter for *target*."""
        self._emitters[target] = emitter

    def resolve(self, target: Target) -> Emitter:
        if target not in self._emitters:
            raise ValueError(f"No emitter registered for target {target.value!r}")
        return self._emitters[target]

    def render(self, target: Target, name: str, schema: ComponentSchema) -> str:
        """Emit *schema* for *target*, passing the target's flavor flag."""
        return self.resolve(target).emit(name, schema, target.flavor)

    def __contains__(self, target: object) -> bool:
        return target in self._emitters
