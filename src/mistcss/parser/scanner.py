"""Hand-written scanner splitting a stylesheet into top-level rules.

Syntax example:
    /* base */
    .button { padding: 0 1rem; }
    .button.primary, .button.secondary { color: white; }
    @media (min-width: 40rem) { .button { padding: 0 2rem; } }

Declaration bodies are kept as raw text and never interpreted.  At-rules are
skipped with a warning.  Unterminated comments, strings and blocks raise
:class:`ParseError`.
"""

from __future__ import annotations

from mistcss.model.diagnostic import Diagnostic, Severity
from mistcss.model.selector import Rule
from mistcss.parser.errors import ParseError

__all__ = ["scan_rules", "split_selector_list"]

_QUOTES = "\"'"


def _position(text: str, index: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of *index* in *text*."""
    line = text.count("\n", 0, index) + 1
    column = index - (text.rfind("\n", 0, index) + 1) + 1
    return line, column


def _skip_string(text: str, start: int) -> int:
    """Return the index just past the string literal opening at *start*."""
    quote = text[start]
    pos = start + 1
    while pos < len(text):
        ch = text[pos]
        if ch == "\\":
            pos += 2
            continue
        if ch == quote:
            return pos + 1
        if ch == "\n":
            break
        pos += 1
    line, column = _position(text, start)
    raise ParseError("Unterminated string", line=line, column=column)


def _strip_comments(text: str) -> str:
    """Blank out ``/* ... */`` comments, keeping newlines so lines stay put."""
    out: list[str] = []
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if ch in _QUOTES:
            end = _skip_string(text, pos)
            out.append(text[pos:end])
            pos = end
        elif text.startswith("/*", pos):
            end = text.find("*/", pos + 2)
            if end == -1:
                line, column = _position(text, pos)
                raise ParseError("Unterminated comment", line=line, column=column)
            comment = text[pos : end + 2]
            out.append("".join("\n" if c == "\n" else " " for c in comment))
            pos = end + 2
        else:
            out.append(ch)
            pos += 1
    return "".join(out)


def _find_block_end(text: str, open_index: int) -> int:
    """Return the index of the ``}`` matching the ``{`` at *open_index*."""
    depth = 0
    pos = open_index
    while pos < len(text):
        ch = text[pos]
        if ch in _QUOTES:
            pos = _skip_string(text, pos)
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return pos
        pos += 1
    line, column = _position(text, open_index)
    raise ParseError("Unterminated block", line=line, column=column)


def _first_visible(text: str, start: int, end: int) -> int:
    pos = start
    while pos < end and text[pos].isspace():
        pos += 1
    return pos


def scan_rules(source: str) -> tuple[list[Rule], list[Diagnostic]]:
    """Split *source* into rules in source order.

    Returns the rules together with warnings for skipped at-rules and empty
    selectors.
    """
    text = _strip_comments(source)
    rules: list[Rule] = []
    diagnostics: list[Diagnostic] = []

    start = 0
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if ch in _QUOTES:
            pos = _skip_string(text, pos)
            continue

        if ch == "{":
            line, _ = _position(text, _first_visible(text, start, pos))
            prelude = " ".join(text[start:pos].split())
            end = _find_block_end(text, pos)
            if prelude.startswith("@"):
                diagnostics.append(
                    Diagnostic(
                        rule="unsupported-at-rule",
                        severity=Severity.WARNING,
                        message=f"At-rule {prelude.split()[0]} is not supported; block skipped",
                        selector=prelude,
                        line=line,
                    )
                )
            elif not prelude:
                diagnostics.append(
                    Diagnostic(
                        rule="empty-selector",
                        severity=Severity.WARNING,
                        message="Block without a selector skipped",
                        line=line,
                    )
                )
            else:
                rules.append(Rule(prelude=prelude, body=text[pos + 1 : end].strip(), line=line))
            pos = end + 1
            start = pos
            continue

        if ch == "}":
            line, column = _position(text, pos)
            raise ParseError("Unexpected '}'", line=line, column=column)

        if ch == ";":
            statement = " ".join(text[start:pos].split())
            line, column = _position(text, _first_visible(text, start, pos))
            if statement.startswith("@"):
                diagnostics.append(
                    Diagnostic(
                        rule="unsupported-at-rule",
                        severity=Severity.WARNING,
                        message=f"At-rule {statement.split()[0]} is not supported; statement skipped",
                        selector=statement,
                        line=line,
                    )
                )
            elif statement:
                raise ParseError(
                    f"Expected '{{' after {statement!r}", line=line, column=column
                )
            pos += 1
            start = pos
            continue

        pos += 1

    trailing = text[start:].strip()
    if trailing:
        line, column = _position(text, _first_visible(text, start, len(text)))
        raise ParseError(
            f"Unexpected end of input after {trailing!r}", line=line, column=column
        )
    return rules, diagnostics


def split_selector_list(prelude: str) -> list[str]:
    """Split a selector list on top-level commas.

    Commas nested in parentheses, brackets or strings (``:is(.a, .b)``,
    ``[data-x="a,b"]``) do not split.
    """
    branches: list[str] = []
    depth = 0
    start = 0
    pos = 0
    while pos < len(prelude):
        ch = prelude[pos]
        if ch in _QUOTES:
            pos = _skip_string(prelude, pos)
            continue
        if ch in "([":
            depth += 1
        elif ch in ")]":
            depth = max(depth - 1, 0)
        elif ch == "," and depth == 0:
            branches.append(prelude[start:pos].strip())
            start = pos + 1
        pos += 1
    branches.append(prelude[start:].strip())
    return branches
