"""Pipeline driver: parse stylesheets, render every target, write and clean outputs."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from mistcss.emitters import EmitterRegistry, Target, create_default_registry
from mistcss.events import types as events
from mistcss.events.bus import EventBus
from mistcss.model.diagnostic import Diagnostic
from mistcss.parser import ParseError
from mistcss.pipeline.config import MistConfig
from mistcss.schema import parse
from mistcss.schema.naming import DIALECT_SUFFIX, component_name

logger = logging.getLogger(__name__)

SOURCE_GLOB = f"**/*{DIALECT_SUFFIX}"


@dataclass
class FileResult:
    """What happened to one stylesheet during a parse-render cycle."""

    source: Path
    outputs: list[Path] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    error: str = ""
    skipped: bool = False

    @property
    def failed(self) -> bool:
        return bool(self.error)


@dataclass
class BuildReport:
    """Results of a batch build, in source path order, plus removed orphans."""

    results: list[FileResult] = field(default_factory=list)
    removed: list[Path] = field(default_factory=list)

    @property
    def failed(self) -> list[FileResult]:
        return [r for r in self.results if r.failed]

    @property
    def rendered(self) -> list[FileResult]:
        return [r for r in self.results if r.outputs and not r.failed]

    @property
    def skipped(self) -> list[FileResult]:
        return [r for r in self.results if r.skipped]


def find_sources(root: Path) -> list[Path]:
    """All ``*.mist.css`` files under *root*, sorted."""
    return sorted(p for p in Path(root).glob(SOURCE_GLOB) if p.is_file())


def output_path(source: Path, target: Target) -> Path:
    """``card.mist.css`` -> ``card.mist.tsx`` (or the target's extension)."""
    return source.with_suffix(target.extension)


def source_path(output: Path, extension: str) -> Path:
    """Inverse of :func:`output_path` for a generated file with *extension*."""
    return output.with_name(output.name[: -len(extension)] + ".css")


def _extensions(targets: Iterable[Target]) -> list[str]:
    return list(dict.fromkeys(t.extension for t in targets))


def process_file(
    source: Path,
    targets: Iterable[Target],
    registry: EmitterRegistry | None = None,
) -> FileResult:
    """Run one full parse-render cycle for *source*.

    Errors are captured on the returned result rather than raised, so one
    bad file never stops the others.
    """
    result = FileResult(source=source)
    try:
        text = source.read_text(encoding="utf-8")
        parsed = parse(text, name=component_name(source.name) or None)
    except (OSError, UnicodeDecodeError, ParseError) as exc:
        result.error = str(exc)
        logger.error("Error %s: %s", source, exc)
        return result

    result.diagnostics = list(parsed.diagnostics)
    for diagnostic in parsed.diagnostics:
        logger.warning("%s: %s", source, diagnostic)

    schema = parsed.primary
    if schema is None:
        result.skipped = True
        logger.debug("%s: no component selectors, nothing to render", source)
        return result
    if len(parsed.schemas) > 1:
        logger.debug(
            "%s: rendering %s; %d further schema(s) not rendered",
            source,
            schema.name,
            len(parsed.schemas) - 1,
        )

    registry = registry or create_default_registry()
    for target in targets:
        out = output_path(source, target)
        try:
            out.write_text(registry.render(target, schema.name, schema), encoding="utf-8")
        except OSError as exc:
            result.error = str(exc)
            logger.error("Error %s: %s", out, exc)
            return result
        if out not in result.outputs:
            result.outputs.append(out)
    return result


def remove_outputs(source: Path, targets: Iterable[Target]) -> list[Path]:
    """Delete the generated files of *source*; returns the paths removed."""
    removed: list[Path] = []
    for extension in _extensions(targets):
        out = source.with_suffix(extension)
        try:
            if out.exists():
                out.unlink()
                removed.append(out)
        except OSError as exc:
            logger.error("Error removing %s: %s", out, exc)
    return removed


def cleanup_orphans(root: Path, targets: Iterable[Target]) -> list[Path]:
    """Delete generated files under *root* whose ``.mist.css`` source is gone."""
    removed: list[Path] = []
    for extension in _extensions(targets):
        for out in sorted(Path(root).glob(f"**/*.mist{extension}")):
            if source_path(out, extension).exists():
                continue
            try:
                out.unlink()
            except OSError as exc:
                logger.error("Error removing %s: %s", out, exc)
                continue
            logger.info("Removed orphaned %s", out)
            removed.append(out)
    return removed


def publish(result: FileResult, bus: EventBus) -> None:
    """Emit the events describing *result*."""
    for diagnostic in result.diagnostics:
        bus.emit(events.ParseWarning(source=result.source, diagnostic=diagnostic))
    if result.failed:
        bus.emit(events.FileFailed(source=result.source, error=result.error))
    elif result.skipped:
        bus.emit(events.FileSkipped(source=result.source, reason="no component selectors"))
    else:
        bus.emit(events.FileRendered(source=result.source, outputs=tuple(result.outputs)))


def build(
    config: MistConfig,
    bus: EventBus | None = None,
    registry: EmitterRegistry | None = None,
) -> BuildReport:
    """Parse and render every stylesheet under ``config.root``, then clean orphans.

    Files are processed concurrently; results and events are reported from
    the calling thread in source path order.
    """
    bus = bus or EventBus()
    registry = registry or create_default_registry()
    sources = find_sources(config.root)
    report = BuildReport()

    def _run(source: Path) -> FileResult:
        try:
            return process_file(source, config.targets, registry)
        except Exception as exc:
            logger.exception("Unexpected error processing %s", source)
            return FileResult(source=source, error=str(exc) or type(exc).__name__)

    with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
        futures = [pool.submit(_run, source) for source in sources]
        for future in futures:
            result = future.result()
            report.results.append(result)
            publish(result, bus)

    for out in cleanup_orphans(config.root, config.targets):
        report.removed.append(out)
        bus.emit(events.OutputRemoved(path=out, source=source_path(out, out.suffix)))
    return report
