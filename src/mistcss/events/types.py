"""Event types emitted while building and watching stylesheets."""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from mistcss.model.diagnostic import Diagnostic


@dataclass(frozen=True)
class FileRendered:
    source: Path
    outputs: tuple[Path, ...]


@dataclass(frozen=True)
class FileSkipped:
    source: Path
    reason: str


@dataclass(frozen=True)
class FileFailed:
    source: Path
    error: str


@dataclass(frozen=True)
class ParseWarning:
    source: Path
    diagnostic: Diagnostic


@dataclass(frozen=True)
class OutputRemoved:
    path: Path
    source: Path


Event = Union[FileRendered, FileSkipped, FileFailed, ParseWarning, OutputRemoved]
