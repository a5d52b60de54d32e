"""Orchestration: batch build, orphan cleanup and watch mode."""

from mistcss.pipeline.config import MistConfig
from mistcss.pipeline.driver import (
    BuildReport,
    FileResult,
    build,
    cleanup_orphans,
    find_sources,
    output_path,
    process_file,
    remove_outputs,
    source_path,
)
from mistcss.pipeline.watch import EventKind, FileEvent, FileWatcher, handle_event, watch

__all__ = [
    "MistConfig",
    "BuildReport",
    "FileResult",
    "build",
    "cleanup_orphans",
    "find_sources",
    "output_path",
    "process_file",
    "remove_outputs",
    "source_path",
    "EventKind",
    "FileEvent",
    "FileWatcher",
    "handle_event",
    "watch",
]
