"""MistCSS model layer -- public type re-exports."""

from mistcss.model.diagnostic import Diagnostic, Severity
from mistcss.model.schema import ComponentSchema, ParseResult, StateModifier
from mistcss.model.selector import ClassChain, Compound, Rule, Selector, SimpleSelector

__all__ = [
    # diagnostic
    "Severity",
    "Diagnostic",
    # selector
    "Rule",
    "SimpleSelector",
    "Compound",
    "Selector",
    "ClassChain",
    # schema
    "StateModifier",
    "ComponentSchema",
    "ParseResult",
]
