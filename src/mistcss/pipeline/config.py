from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from mistcss.emitters.base import Target


@dataclass(frozen=True)
class MistConfig:
    root: Path = Path(".")
    targets: tuple[Target, ...] = (Target.REACT,)
    watch: bool = False
    poll_interval: float = 0.5  # seconds between watch scans
    max_workers: int | None = None  # None lets the thread pool decide
