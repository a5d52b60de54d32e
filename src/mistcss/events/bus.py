"""Synchronous event bus connecting the build pipeline to its reporters."""

from __future__ import annotations

from typing import Callable, TypeVar

from mistcss.events.types import Event

E = TypeVar("E", bound=Event)

Listener = Callable[[Event], None]


class EventBus:
    """Delivers pipeline events to listeners on the emitting thread.

    A listener subscribes to one event class or, through :meth:`on_all`, to
    every event.  Catch-all listeners run before typed ones; within each kind
    listeners run in the order they were added.
    """

    def __init__(self) -> None:
        self._by_type: dict[type[Event], list[Listener]] = {}
        self._catch_all: list[Listener] = []

    def subscribe(self, event_type: type[E], callback: Callable[[E], None]) -> None:
        self._by_type.setdefault(event_type, []).append(callback)  # type: ignore[arg-type]

    def on_all(self, callback: Listener) -> None:
        self._catch_all.append(callback)

    def emit(self, event: Event) -> None:
        for listener in (*self._catch_all, *self._by_type.get(type(event), ())):
            listener(event)
