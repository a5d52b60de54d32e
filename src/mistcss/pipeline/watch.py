"""Watch mode: turn stylesheet changes into a stream of file events.

Uses mtime polling, so no platform-specific file notification backend is
required.  Events are consumed one at a time by a single dispatcher; each
event re-runs the full parse-render cycle for its file.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator

from mistcss.emitters import EmitterRegistry, create_default_registry
from mistcss.events import types as events
from mistcss.events.bus import EventBus
from mistcss.pipeline.config import MistConfig
from mistcss.pipeline.driver import find_sources, process_file, publish, remove_outputs

logger = logging.getLogger(__name__)


class EventKind(Enum):
    CREATED = "created"
    MODIFIED = "modified"
    DELETED = "deleted"


@dataclass(frozen=True)
class FileEvent:
    kind: EventKind
    path: Path


Snapshot = dict[Path, float]


def diff_snapshots(before: Snapshot, after: Snapshot) -> list[FileEvent]:
    """Events turning *before* into *after*, ordered by path."""
    found: list[FileEvent] = []
    for path in sorted(set(before) | set(after)):
        if path not in after:
            found.append(FileEvent(EventKind.DELETED, path))
        elif path not in before:
            found.append(FileEvent(EventKind.CREATED, path))
        elif after[path] != before[path]:
            found.append(FileEvent(EventKind.MODIFIED, path))
    return found


class FileWatcher:
    """Polls ``*.mist.css`` files under a root directory for changes."""

    def __init__(self, root: Path, poll_interval: float = 0.5) -> None:
        self.root = Path(root)
        self.poll_interval = poll_interval
        self._mtimes: Snapshot = self.scan()

    def scan(self) -> Snapshot:
        """Current mtime of every stylesheet under the root."""
        mtimes: Snapshot = {}
        for path in find_sources(self.root):
            try:
                mtimes[path] = path.stat().st_mtime
            except OSError:
                # Deleted between listing and stat; the next scan reports it.
                continue
        return mtimes

    def poll(self) -> list[FileEvent]:
        """Scan once and return what changed since the previous scan."""
        current = self.scan()
        changes = diff_snapshots(self._mtimes, current)
        self._mtimes = current
        return changes

    def events(self, stop: threading.Event) -> Iterator[FileEvent]:
        """Yield events until *stop* is set."""
        while not stop.is_set():
            yield from self.poll()
            stop.wait(self.poll_interval)


def handle_event(
    event: FileEvent,
    config: MistConfig,
    bus: EventBus,
    registry: EmitterRegistry | None = None,
) -> None:
    """Re-render a created/modified stylesheet or drop a deleted one's outputs."""
    if event.kind is EventKind.DELETED:
        for out in remove_outputs(event.path, config.targets):
            bus.emit(events.OutputRemoved(path=out, source=event.path))
        return
    publish(process_file(event.path, config.targets, registry), bus)


def watch(
    config: MistConfig,
    bus: EventBus | None = None,
    stop: threading.Event | None = None,
    registry: EmitterRegistry | None = None,
) -> None:
    """Dispatch file events until *stop* is set (forever when not given)."""
    bus = bus or EventBus()
    stop = stop or threading.Event()
    registry = registry or create_default_registry()
    watcher = FileWatcher(config.root, poll_interval=config.poll_interval)
    logger.info("Watching %s for changes", config.root)
    for event in watcher.events(stop):
        logger.debug("%s %s", event.kind.value, event.path)
        handle_event(event, config, bus, registry)
