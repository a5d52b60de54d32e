"""Parser error types."""


class ParseError(Exception):
    """Raised when stylesheet source is structurally unrecoverable."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)


class UnsupportedSelector(Exception):
    """Raised when a selector falls outside the component-authoring dialect."""

    def __init__(self, selector: str, reason: str):
        self.selector = selector
        self.reason = reason
        super().__init__(f"Unsupported selector {selector!r}: {reason}")
