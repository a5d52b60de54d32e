"""Variant-group detection policies.

A policy receives a component's modifier tokens in declaration order and
decides which of them form mutually exclusive variant groups.  Tokens left
out of every group become independent boolean modifiers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from mistcss.schema.naming import camel_case


@dataclass(frozen=True)
class VariantGroup:
    """A named set of exclusive ``(value, token)`` pairs."""

    name: str
    members: tuple[tuple[str, str], ...]

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(token for _, token in self.members)


@dataclass(frozen=True)
class Grouping:
    """Outcome of a policy: the groups it formed and the tokens it left alone."""

    groups: tuple[VariantGroup, ...] = ()
    booleans: tuple[str, ...] = ()


class GroupingPolicy(Protocol):
    """Splits modifier tokens into variant groups and boolean modifiers."""

    def group(self, tokens: Sequence[str]) -> Grouping: ...


class NoGrouping:
    """Every modifier is an independent boolean."""

    def group(self, tokens: Sequence[str]) -> Grouping:
        return Grouping(booleans=tuple(tokens))


class DashPrefixGrouping:
    """Group tokens sharing the prefix before their last dash.

    ``size-sm``, ``size-lg`` -> group ``size`` with values ``sm`` and ``lg``.
    Prefixes starting with a flag word (``is-active``, ``has-icon``) never
    group because each such token names its own on/off state.
    """

    FLAG_WORDS = frozenset({"is", "has", "can", "with", "no"})

    def __init__(self, min_members: int = 2) -> None:
        self.min_members = min_members

    def group(self, tokens: Sequence[str]) -> Grouping:
        by_prefix: dict[str, list[str]] = {}
        for token in tokens:
            prefix, _, suffix = token.rpartition("-")
            if not prefix.strip("-") or not suffix:
                continue
            if prefix.split("-")[0] in self.FLAG_WORDS:
                continue
            by_prefix.setdefault(prefix, []).append(token)

        groups: list[VariantGroup] = []
        grouped: set[str] = set()
        for prefix, members in by_prefix.items():
            if len(members) < self.min_members:
                continue
            groups.append(
                VariantGroup(
                    name=camel_case(prefix),
                    members=tuple((m.rpartition("-")[2], m) for m in members),
                )
            )
            grouped.update(members)
        return Grouping(
            groups=tuple(groups),
            booleans=tuple(t for t in tokens if t not in grouped),
        )


DEFAULT_FAMILIES: dict[str, frozenset[str]] = {
    "color": frozenset({
        "primary", "secondary", "tertiary", "success", "danger", "warning",
        "info", "error", "neutral", "accent", "light", "dark",
    }),
    "size": frozenset({
        "xs", "sm", "md", "lg", "xl", "tiny", "small", "medium", "large", "huge",
    }),
    "variant": frozenset({
        "solid", "outline", "outlined", "ghost", "soft", "filled", "link", "plain",
    }),
    "shape": frozenset({"rounded", "pill", "square", "circle"}),
    "orientation": frozenset({"horizontal", "vertical"}),
    "align": frozenset({"start", "end", "left", "right", "center", "justify"}),
}


class VocabularyGrouping:
    """Group tokens that belong to a well-known family of design variants.

    ``primary`` and ``secondary`` -> group ``color``.  A family only forms a
    group when at least ``min_members`` of its words are present; a lone
    ``primary`` stays a boolean.
    """

    def __init__(
        self,
        families: dict[str, frozenset[str]] | None = None,
        min_members: int = 2,
    ) -> None:
        self.families = DEFAULT_FAMILIES if families is None else families
        self.min_members = min_members

    def group(self, tokens: Sequence[str]) -> Grouping:
        groups: list[VariantGroup] = []
        grouped: set[str] = set()
        for family, words in self.families.items():
            members = [t for t in tokens if t in words and t not in grouped]
            if len(members) < self.min_members:
                continue
            groups.append(VariantGroup(name=family, members=tuple((m, m) for m in members)))
            grouped.update(members)
        return Grouping(
            groups=tuple(groups),
            booleans=tuple(t for t in tokens if t not in grouped),
        )


class ChainedGrouping:
    """Run policies in order; each sees only the tokens earlier ones left."""

    def __init__(self, *policies: GroupingPolicy) -> None:
        self.policies = policies

    def group(self, tokens: Sequence[str]) -> Grouping:
        groups: list[VariantGroup] = []
        remaining = tuple(tokens)
        for policy in self.policies:
            result = policy.group(remaining)
            groups.extend(result.groups)
            remaining = result.booleans
        return Grouping(groups=tuple(groups), booleans=remaining)


def default_policy() -> GroupingPolicy:
    return ChainedGrouping(DashPrefixGrouping(), VocabularyGrouping())
