"""MistCSS: generate typed UI components from ``.mist.css`` stylesheets."""

__version__ = "0.1.0"

from mistcss.emitters import Target, render  # noqa: E402
from mistcss.model import ComponentSchema, Diagnostic, ParseResult, Severity  # noqa: E402
from mistcss.parser import ParseError  # noqa: E402
from mistcss.resolver import resolve  # noqa: E402
from mistcss.schema import parse  # noqa: E402

__all__ = [
    "__version__",
    "parse",
    "resolve",
    "render",
    "Target",
    "ComponentSchema",
    "ParseResult",
    "Diagnostic",
    "Severity",
    "ParseError",
]
