"""Schema builder: aggregates class chains into ComponentSchema records."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from mistcss.model.diagnostic import Diagnostic, Severity
from mistcss.model.schema import ComponentSchema, ParseResult, StateModifier
from mistcss.model.selector import ClassChain
from mistcss.parser import extract_chains
from mistcss.schema.grouping import GroupingPolicy, VariantGroup, default_policy
from mistcss.schema.naming import camel_case, is_valid_prop, pascal_case

__all__ = ["SchemaBuilder", "parse"]

logger = logging.getLogger(__name__)


@dataclass
class _Draft:
    """Mutable accumulator for one base class while chains are consumed."""

    base: str
    order: int
    modifiers: list[str] = field(default_factory=list)
    lines: dict[str, int] = field(default_factory=dict)
    states: list[StateModifier] = field(default_factory=list)


def _conflict(message: str, line: int | None, selector: str | None = None) -> Diagnostic:
    return Diagnostic(
        rule="category-conflict",
        severity=Severity.WARNING,
        message=message,
        selector=selector,
        line=line,
    )


class SchemaBuilder:
    """Turns class chains into component schemas.

    Chains are consumed in source order.  The first class of a chain names
    the owning component; the remaining classes are modifier candidates that
    the grouping policy sorts into variant groups and boolean modifiers.
    When two declarations claim the same class token or prop name, the
    earlier one wins and the later one is reported as a conflict.
    """

    def __init__(self, policy: GroupingPolicy | None = None) -> None:
        self.policy = policy or default_policy()

    def build(
        self, chains: Iterable[ClassChain], name: str | None = None
    ) -> tuple[list[ComponentSchema], list[Diagnostic]]:
        drafts: dict[str, _Draft] = {}
        diagnostics: list[Diagnostic] = []

        for chain in chains:
            draft = drafts.get(chain.base)
            if draft is None:
                draft = drafts[chain.base] = _Draft(base=chain.base, order=len(drafts))
            for token in chain.modifiers:
                if token == draft.base:
                    diagnostics.append(
                        _conflict(
                            f"Class {token!r} is the base class of this component "
                            "and cannot also be a modifier",
                            chain.line,
                            chain.text,
                        )
                    )
                    continue
                if token not in draft.lines:
                    draft.modifiers.append(token)
                    draft.lines[token] = chain.line
            for pseudo, token in chain.states:
                state = StateModifier(pseudo=pseudo, token=token)
                if state not in draft.states:
                    draft.states.append(state)

        schemas: list[ComponentSchema] = []
        for draft in drafts.values():
            if draft.order == 0 and name:
                schema_name = name
            else:
                schema_name = pascal_case(draft.base) or draft.base
            schema, found = self._finish(draft, schema_name)
            schemas.append(schema)
            diagnostics.extend(found)
        return schemas, diagnostics

    def _finish(
        self, draft: _Draft, name: str
    ) -> tuple[ComponentSchema, list[Diagnostic]]:
        diagnostics: list[Diagnostic] = []
        position = {token: i for i, token in enumerate(draft.modifiers)}
        grouping = self.policy.group(tuple(draft.modifiers))

        # Each entry is positioned at its first member's declaration.
        entries: list[tuple[int, str | VariantGroup]] = []
        for group in grouping.groups:
            known = [t for t in group.tokens if t in position]
            if known:
                entries.append((min(position[t] for t in known), group))
        for token in grouping.booleans:
            if token in position:
                entries.append((position[token], token))
        entries.sort(key=lambda e: e[0])

        claimed: set[str] = set()
        boolean_modifiers: dict[str, str] = {}
        variant_groups: dict[str, dict[str, str]] = {}
        prop_order: list[str] = []

        for _, entry in entries:
            if isinstance(entry, VariantGroup):
                prop = entry.name
                members = entry.members
            else:
                prop = camel_case(entry)
                members = ((entry, entry),)
            first_line = draft.lines.get(members[0][1])

            if not is_valid_prop(prop):
                diagnostics.append(
                    Diagnostic(
                        rule="invalid-prop-name",
                        severity=Severity.WARNING,
                        message=f"Cannot derive a usable prop name from {prop!r}; "
                        f"{', '.join(t for _, t in members)} skipped",
                        line=first_line,
                    )
                )
                continue
            if prop in boolean_modifiers or prop in variant_groups:
                diagnostics.append(
                    _conflict(
                        f"Prop {prop!r} is already declared on {name}; "
                        f"{', '.join(t for _, t in members)} skipped",
                        first_line,
                    )
                )
                continue

            values: dict[str, str] = {}
            for value, token in members:
                if token not in position:
                    continue
                if token in claimed or value in values:
                    diagnostics.append(
                        _conflict(
                            f"Class {token!r} is already declared on {name}; "
                            f"later declaration in {prop!r} skipped",
                            draft.lines.get(token),
                        )
                    )
                    continue
                claimed.add(token)
                values[value] = token
            if not values:
                continue

            if isinstance(entry, VariantGroup):
                variant_groups[prop] = values
            else:
                boolean_modifiers[prop] = entry
            prop_order.append(prop)

        schema = ComponentSchema(
            name=name,
            base_classes=(draft.base,),
            boolean_modifiers=boolean_modifiers,
            variant_groups=variant_groups,
            state_modifiers=tuple(draft.states),
            prop_order=tuple(prop_order),
            order=draft.order,
        )
        return schema, diagnostics


def parse(
    source: str, name: str | None = None, policy: GroupingPolicy | None = None
) -> ParseResult:
    """Parse stylesheet text into component schemas.

    *name* is given to the first schema (normally derived from the file
    name); later schemas are named after their base class.  Recoverable
    problems are returned as diagnostics; only structurally broken input
    raises :class:`~mistcss.parser.ParseError`.
    """
    chains, diagnostics = extract_chains(source)
    schemas, found = SchemaBuilder(policy).build(chains, name=name)
    diagnostics.extend(found)
    diagnostics.sort(key=lambda d: d.line or 0)
    logger.debug(
        "Parsed %d chain(s) into %d schema(s) with %d diagnostic(s)",
        len(chains),
        len(schemas),
        len(diagnostics),
    )
    return ParseResult(schemas=tuple(schemas), diagnostics=tuple(diagnostics))
