"""Tests for watch mode polling and event dispatch."""

import os
import threading
from pathlib import Path

from mistcss.emitters import Target
from mistcss.events import EventBus, FileRendered, OutputRemoved
from mistcss.pipeline import EventKind, FileEvent, FileWatcher, MistConfig, handle_event, watch
from mistcss.pipeline.watch import diff_snapshots


def _bump_mtime(path: Path) -> None:
    stat = path.stat()
    os.utime(path, (stat.st_atime, stat.st_mtime + 5))


class TestDiffSnapshots:
    def test_no_change(self):
        snap = {Path("a.mist.css"): 1.0}
        assert diff_snapshots(snap, dict(snap)) == []

    def test_created_modified_deleted(self):
        before = {Path("a.mist.css"): 1.0, Path("b.mist.css"): 1.0}
        after = {Path("a.mist.css"): 2.0, Path("c.mist.css"): 1.0}
        assert diff_snapshots(before, after) == [
            FileEvent(EventKind.MODIFIED, Path("a.mist.css")),
            FileEvent(EventKind.DELETED, Path("b.mist.css")),
            FileEvent(EventKind.CREATED, Path("c.mist.css")),
        ]


class TestFileWatcher:
    def test_existing_files_are_baseline(self, tmp_path: Path):
        (tmp_path / "a.mist.css").write_text(".a {}")
        watcher = FileWatcher(tmp_path)
        assert watcher.poll() == []

    def test_detects_create_modify_delete(self, tmp_path: Path):
        src = tmp_path / "a.mist.css"
        watcher = FileWatcher(tmp_path)

        src.write_text(".a {}")
        assert watcher.poll() == [FileEvent(EventKind.CREATED, src)]

        _bump_mtime(src)
        assert watcher.poll() == [FileEvent(EventKind.MODIFIED, src)]

        src.unlink()
        assert watcher.poll() == [FileEvent(EventKind.DELETED, src)]

    def test_ignores_other_files(self, tmp_path: Path):
        watcher = FileWatcher(tmp_path)
        (tmp_path / "a.css").write_text(".a {}")
        (tmp_path / "a.mist.tsx").write_text("x")
        assert watcher.poll() == []

    def test_events_stop_when_set(self, tmp_path: Path):
        stop = threading.Event()
        stop.set()
        assert list(FileWatcher(tmp_path).events(stop)) == []


class TestHandleEvent:
    def test_created_file_is_rendered(self, tmp_path: Path):
        src = tmp_path / "card.mist.css"
        src.write_text(".card {}\n.card.flat {}")
        bus = EventBus()
        received = []
        bus.on_all(received.append)
        config = MistConfig(root=tmp_path, targets=(Target.REACT,))

        handle_event(FileEvent(EventKind.CREATED, src), config, bus)

        assert received == [FileRendered(source=src, outputs=(tmp_path / "card.mist.tsx",))]
        assert "flat?: boolean" in (tmp_path / "card.mist.tsx").read_text()

    def test_deleted_file_removes_generated_outputs(self, tmp_path: Path):
        src = tmp_path / "card.mist.css"
        out = tmp_path / "card.mist.svelte"
        out.write_text("x")
        bus = EventBus()
        received = []
        bus.on_all(received.append)
        config = MistConfig(root=tmp_path, targets=(Target.SVELTE,))

        handle_event(FileEvent(EventKind.DELETED, src), config, bus)

        assert not out.exists()
        assert received == [OutputRemoved(path=out, source=src)]

    def test_modified_broken_file_keeps_previous_output(self, tmp_path: Path):
        src = tmp_path / "card.mist.css"
        out = tmp_path / "card.mist.tsx"
        src.write_text(".card { color: red;")
        out.write_text("previous")
        config = MistConfig(root=tmp_path)

        handle_event(FileEvent(EventKind.MODIFIED, src), config, EventBus())

        assert out.read_text() == "previous"


class TestWatch:
    def test_returns_when_stop_already_set(self, tmp_path: Path):
        stop = threading.Event()
        stop.set()
        watch(MistConfig(root=tmp_path), stop=stop)

    def test_dispatches_changes_until_stopped(self, tmp_path: Path):
        src = tmp_path / "tag.mist.css"
        src.write_text(".tag {}")
        stop = threading.Event()
        bus = EventBus()
        rendered = []

        def on_rendered(event):
            rendered.append(event)
            stop.set()

        bus.subscribe(FileRendered, on_rendered)
        config = MistConfig(root=tmp_path, poll_interval=0.01)
        thread = threading.Thread(target=watch, args=(config, bus, stop))
        thread.start()
        try:
            # keep touching the file until the loop has picked up a change
            for _ in range(200):
                _bump_mtime(src)
                if stop.wait(0.05):
                    break
        finally:
            stop.set()
            thread.join(timeout=5)

        assert [e.source for e in rendered] == [src]
        assert (tmp_path / "tag.mist.tsx").exists()
