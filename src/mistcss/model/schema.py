"""Component schema: the renderer-agnostic description of one component."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from mistcss.model.diagnostic import Diagnostic


@dataclass(frozen=True)
class StateModifier:
    """A pseudo-class gating styles on ``token`` (e.g. ``hover`` on ``button``).

    Recorded for documentation only; states never become props.
    """

    pseudo: str
    token: str


@dataclass(frozen=True)
class ComponentSchema:
    """Base classes, modifiers and variant groups of one component.

    ``boolean_modifiers`` maps prop -> class token.  ``variant_groups`` maps
    prop -> {variant value -> class token}.  ``prop_order`` lists every prop
    of both kinds in declaration order; it drives the class resolution order.
    """

    name: str
    base_classes: tuple[str, ...]
    boolean_modifiers: dict[str, str] = field(default_factory=dict)
    variant_groups: dict[str, dict[str, str]] = field(default_factory=dict)
    state_modifiers: tuple[StateModifier, ...] = ()
    prop_order: tuple[str, ...] = ()
    order: int = 0

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("ComponentSchema name must be a non-empty string")
        if not self.base_classes:
            raise ValueError(f"ComponentSchema {self.name!r} has no base class")

    def class_tokens(self) -> list[str]:
        """Every class token the schema can emit, base classes first."""
        tokens = list(self.base_classes)
        for prop in self.prop_order:
            if prop in self.boolean_modifiers:
                tokens.append(self.boolean_modifiers[prop])
            else:
                tokens.extend(self.variant_groups[prop].values())
        return tokens

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "order": self.order,
            "base_classes": list(self.base_classes),
            "boolean_modifiers": dict(self.boolean_modifiers),
            "variant_groups": {k: dict(v) for k, v in self.variant_groups.items()},
            "state_modifiers": [
                {"pseudo": s.pseudo, "token": s.token} for s in self.state_modifiers
            ],
            "prop_order": list(self.prop_order),
        }


@dataclass(frozen=True)
class ParseResult:
    """Schemas found in one stylesheet plus the warnings collected on the way."""

    schemas: tuple[ComponentSchema, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def primary(self) -> ComponentSchema | None:
        """The schema handed to emitters: the first one declared, if any."""
        return self.schemas[0] if self.schemas else None

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_warning]
