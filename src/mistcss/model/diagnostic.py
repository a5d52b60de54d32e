"""Diagnostic model: recoverable findings reported while parsing a stylesheet."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    WARNING = "WARNING"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about the stylesheet being parsed.

    Attributes:
        rule: Identifier for the check that produced this diagnostic
            (``unsupported-selector``, ``category-conflict``, ...).
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        selector: The selector text involved, if applicable.
        line: 1-based source line of the offending rule, if known.
    """

    rule: str
    severity: Severity
    message: str
    selector: str | None = None
    line: int | None = None

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.line is not None:
            location = f" [line={self.line}]"
        if self.selector:
            location += f" [{self.selector}]"
        return f"{self.severity.value}{location}: {self.message}"
