"""CLI command: mistcss build -- render components for every stylesheet."""

from __future__ import annotations

import logging
import sys
import threading
from pathlib import Path

import click

from mistcss.emitters import Target
from mistcss.events import types as events
from mistcss.events.bus import EventBus
from mistcss.pipeline import MistConfig, build as run_build, watch as run_watch


def _subscribe_reporters(bus: EventBus) -> None:
    """Echo pipeline events to the terminal."""
    bus.subscribe(
        events.ParseWarning,
        lambda e: click.echo(f"Warning {e.source}: {e.diagnostic}", err=True),
    )
    bus.subscribe(
        events.FileFailed,
        lambda e: click.echo(f"Error {e.source}: {e.error}", err=True),
    )
    bus.subscribe(
        events.FileRendered,
        lambda e: click.echo(
            f"{e.source} -> {', '.join(str(o) for o in e.outputs)}"
        ),
    )
    bus.subscribe(
        events.OutputRemoved,
        lambda e: click.echo(f"Removed {e.path}"),
    )


@click.command()
@click.argument(
    "directory", type=click.Path(exists=True, file_okay=False, path_type=Path)
)
@click.option(
    "--target",
    "-t",
    "targets",
    type=click.Choice([t.value for t in Target]),
    multiple=True,
    default=("react",),
    show_default=True,
    help="Render target (repeatable)",
)
@click.option("--watch", "-w", is_flag=True, help="Watch for changes")
@click.option(
    "--poll-interval",
    default=0.5,
    type=float,
    show_default=True,
    help="Seconds between watch scans",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output")
def build(
    directory: Path,
    targets: tuple[str, ...],
    watch: bool,
    poll_interval: float,
    verbose: bool,
) -> None:
    """Render components for every .mist.css file under DIRECTORY.

    Generated files sit next to their stylesheet.  Generated files whose
    stylesheet no longer exists are removed after the build.
    """
    # Per-file outcomes reach the terminal through the event reporters.
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.CRITICAL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = MistConfig(
        root=directory,
        targets=tuple(dict.fromkeys(Target.parse(t) for t in targets)),
        watch=watch,
        poll_interval=poll_interval,
    )
    for target in config.targets:
        click.echo(f"Rendering {target.label} components")

    bus = EventBus()
    _subscribe_reporters(bus)

    report = run_build(config, bus)
    click.echo(
        f"Summary: {len(report.rendered)} rendered, {len(report.skipped)} skipped, "
        f"{len(report.failed)} failed, {len(report.removed)} removed"
    )

    if config.watch:
        click.echo("Watching for changes")
        stop = threading.Event()
        try:
            run_watch(config, bus, stop)
        except KeyboardInterrupt:
            stop.set()
        return

    if report.failed:
        sys.exit(1)
