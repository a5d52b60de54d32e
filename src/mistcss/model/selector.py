"""Selector model: rules, parsed selectors, and recognized class chains."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SimpleSelector:
    """One simple selector inside a compound.

    Kinds:
        type, universal, class, id, attribute, pseudo_class,
        pseudo_function, pseudo_element
    """

    kind: str
    value: str


@dataclass(frozen=True)
class Compound:
    """A run of simple selectors with no combinator between them."""

    parts: tuple[SimpleSelector, ...]

    def of_kind(self, kind: str) -> list[SimpleSelector]:
        return [p for p in self.parts if p.kind == kind]


@dataclass(frozen=True)
class Selector:
    """One branch of a selector list: compounds joined by combinators."""

    compounds: tuple[Compound, ...]
    combinators: tuple[str, ...] = ()
    text: str = ""


@dataclass(frozen=True)
class ClassChain:
    """A selector the dialect understands: ``.base.mod1.mod2:state``.

    ``classes[0]`` is the owning component's base class, the rest are
    modifier candidates.  ``states`` pairs each pseudo-class with the class
    token it follows.
    """

    classes: tuple[str, ...]
    states: tuple[tuple[str, str], ...] = ()
    text: str = ""
    line: int = 0

    @property
    def base(self) -> str:
        return self.classes[0]

    @property
    def modifiers(self) -> tuple[str, ...]:
        return self.classes[1:]


@dataclass(frozen=True)
class Rule:
    """A top-level ``prelude { body }`` block from the source text."""

    prelude: str
    body: str
    line: int
