"""Stylesheet parsing: rule scanning, selector grammar and chain extraction."""

from __future__ import annotations

from mistcss.model.diagnostic import Diagnostic, Severity
from mistcss.model.selector import ClassChain
from mistcss.parser.errors import ParseError, UnsupportedSelector
from mistcss.parser.scanner import scan_rules, split_selector_list
from mistcss.parser.transformer import classify, parse_selector

__all__ = [
    "ParseError",
    "UnsupportedSelector",
    "scan_rules",
    "split_selector_list",
    "parse_selector",
    "classify",
    "extract_chains",
]


def extract_chains(source: str) -> tuple[list[ClassChain], list[Diagnostic]]:
    """Return every class chain in *source*, in source order.

    Each branch of a selector list is handled on its own; branches outside
    the dialect become ``unsupported-selector`` warnings.
    """
    rules, diagnostics = scan_rules(source)
    chains: list[ClassChain] = []
    for rule in rules:
        for branch in split_selector_list(rule.prelude):
            try:
                chains.append(classify(parse_selector(branch), line=rule.line))
            except UnsupportedSelector as exc:
                diagnostics.append(
                    Diagnostic(
                        rule="unsupported-selector",
                        severity=Severity.WARNING,
                        message=f"Skipped: {exc.reason}",
                        selector=exc.selector or branch,
                        line=rule.line,
                    )
                )
    return chains, diagnostics
