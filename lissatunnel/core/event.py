"""Regeneration notifications for hosts that hold GPU copies of the tunnel."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Event(Generic[T]):
    """
    Handlers called with a freshly built value, e.g. a TunnelMesh.

    TunnelDriver emits on_regenerated only when mesh() actually rebuilt the
    geometry, so a handler is the place to re-upload vertex and index buffers:

        driver.on_regenerated += lambda mesh: upload(mesh.interleaved_buffer(), mesh.triangles)

    Subscribing the same handler twice keeps one entry.
    """

    def __init__(self):
        self._handlers: list[Callable[[T], None]] = []

    def __iadd__(self, handler: Callable[[T], None]) -> "Event[T]":
        if handler not in self._handlers:
            self._handlers.append(handler)
        return self

    def __isub__(self, handler: Callable[[T], None]) -> "Event[T]":
        if handler in self._handlers:
            self._handlers.remove(handler)
        return self

    def emit(self, value: T) -> None:
        """Call every handler; a handler may unsubscribe itself while running."""
        for handler in tuple(self._handlers):
            handler(value)

    def clear(self) -> None:
        self._handlers.clear()

    @property
    def handler_count(self) -> int:
        return len(self._handlers)
