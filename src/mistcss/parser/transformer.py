"""Lark Transformer that converts a selector parse tree into Selector models."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from mistcss.model.selector import ClassChain, Compound, Selector, SimpleSelector
from mistcss.parser.errors import UnsupportedSelector

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Single-colon spellings that CSS2 allowed for pseudo-elements.
LEGACY_PSEUDO_ELEMENTS = frozenset({"before", "after", "first-line", "first-letter"})

_COMBINATOR_SPACE_RE = re.compile(r"\s*([>+~])\s*")

_COMBINATOR_NAMES = {
    " ": "descendant combinator",
    ">": "child combinator '>'",
    "+": "adjacent sibling combinator '+'",
    "~": "general sibling combinator '~'",
}


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into a :class:`Selector`."""

    def class_selector(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind="class", value=str(items[0]))

    def id_selector(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind="id", value=str(items[0]))

    def attribute_selector(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind="attribute", value=str(items[0]).strip())

    def pseudo_class(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind="pseudo_class", value=str(items[0]))

    def pseudo_element(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind="pseudo_element", value=str(items[0]))

    def pseudo_function(self, items: list[Token]) -> SimpleSelector:
        name = str(items[0])  # includes the opening parenthesis
        args = str(items[1]).strip() if len(items) > 1 else ""
        return SimpleSelector(kind="pseudo_function", value=f"{name}{args})")

    def type_selector(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind="type", value=str(items[0]))

    def universal_selector(self, items: list[Token]) -> SimpleSelector:
        return SimpleSelector(kind="universal", value="*")

    def compound(self, items: list[SimpleSelector]) -> Compound:
        return Compound(parts=tuple(items))

    def combinator(self, items: list[Token]) -> str:
        return str(items[0])

    def start(self, items: list[object]) -> Selector:
        compounds = tuple(i for i in items if isinstance(i, Compound))
        combinators = tuple(i for i in items if isinstance(i, str))
        return Selector(compounds=compounds, combinators=combinators)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def normalize_selector(raw: str) -> str:
    """Collapse whitespace so only descendant combinators remain as spaces."""
    return _COMBINATOR_SPACE_RE.sub(r"\1", " ".join(raw.split()))


def parse_selector(raw: str) -> Selector:
    """Parse one selector (no top-level commas) into a :class:`Selector`.

    Raises :class:`UnsupportedSelector` when the text is outside the grammar.
    """
    text = normalize_selector(raw)
    if not text:
        raise UnsupportedSelector(raw, "empty selector")
    try:
        tree = _parser().parse(text)
    except LarkError as e:
        raise UnsupportedSelector(text, "unrecognized selector syntax") from e
    selector = SelectorTransformer().transform(tree)
    return Selector(
        compounds=selector.compounds, combinators=selector.combinators, text=text
    )


def classify(selector: Selector, line: int = 0) -> ClassChain:
    """Reduce *selector* to a :class:`ClassChain` or raise UnsupportedSelector.

    The dialect accepts a single compound made only of classes, plain
    pseudo-classes and pseudo-elements.  Each pseudo-class is recorded
    against the class token right before it.
    """
    if selector.combinators:
        name = _COMBINATOR_NAMES.get(selector.combinators[0], "combinator")
        raise UnsupportedSelector(selector.text, name)

    classes: list[str] = []
    states: list[tuple[str, str]] = []
    for part in selector.compounds[0].parts:
        if part.kind == "class":
            classes.append(part.value)
        elif part.kind == "pseudo_element":
            continue
        elif part.kind == "pseudo_class":
            if part.value in LEGACY_PSEUDO_ELEMENTS:
                continue
            if not classes:
                raise UnsupportedSelector(
                    selector.text, f"pseudo-class :{part.value} without a class"
                )
            states.append((part.value, classes[-1]))
        elif part.kind == "pseudo_function":
            raise UnsupportedSelector(
                selector.text, f"functional pseudo-class :{part.value}"
            )
        else:
            raise UnsupportedSelector(selector.text, f"{part.kind} selector")

    if not classes:
        raise UnsupportedSelector(selector.text, "no class selector")
    return ClassChain(
        classes=tuple(classes), states=tuple(states), text=selector.text, line=line
    )
