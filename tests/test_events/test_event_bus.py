"""Tests for the synchronous event bus."""

from pathlib import Path

from mistcss.events import EventBus, FileFailed, FileRendered, FileSkipped


class TestEventBus:
    def test_subscribe_receives_matching_type_only(self):
        bus = EventBus()
        received = []
        bus.subscribe(FileFailed, received.append)

        bus.emit(FileRendered(source=Path("a.mist.css"), outputs=()))
        bus.emit(FileFailed(source=Path("b.mist.css"), error="boom"))

        assert received == [FileFailed(source=Path("b.mist.css"), error="boom")]

    def test_on_all_receives_everything(self):
        bus = EventBus()
        received = []
        bus.on_all(received.append)

        bus.emit(FileSkipped(source=Path("a.mist.css"), reason="empty"))
        bus.emit(FileFailed(source=Path("b.mist.css"), error="boom"))

        assert len(received) == 2

    def test_global_listeners_run_first(self):
        bus = EventBus()
        order = []
        bus.subscribe(FileSkipped, lambda e: order.append("typed"))
        bus.on_all(lambda e: order.append("global"))

        bus.emit(FileSkipped(source=Path("a.mist.css"), reason="empty"))

        assert order == ["global", "typed"]

    def test_registration_order(self):
        bus = EventBus()
        order = []
        bus.subscribe(FileSkipped, lambda e: order.append(1))
        bus.subscribe(FileSkipped, lambda e: order.append(2))

        bus.emit(FileSkipped(source=Path("a.mist.css"), reason="empty"))

        assert order == [1, 2]

    def test_emit_without_listeners(self):
        EventBus().emit(FileSkipped(source=Path("a.mist.css"), reason="empty"))
