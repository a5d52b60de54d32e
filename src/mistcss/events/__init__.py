"""Event system: bus and event types for build and watch lifecycle."""

from mistcss.events.bus import EventBus
from mistcss.events.types import (
    Event,
    FileFailed,
    FileRendered,
    FileSkipped,
    OutputRemoved,
    ParseWarning,
)

__all__ = [
    "Event",
    "EventBus",
    "FileFailed",
    "FileRendered",
    "FileSkipped",
    "OutputRemoved",
    "ParseWarning",
]
