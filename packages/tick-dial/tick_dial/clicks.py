"""Single/double click disambiguation."""
from __future__ import annotations

from tick_dial.vector import Vector2

DOUBLE = "double"
PENDING = "pending"


class ClickDebouncer:
    """Holds a click back for ``window_ms`` in case a second one follows.

    A press inside the window of a pending click turns both into a double
    click and the single click is dropped.
    """

    def __init__(self, window_ms: float) -> None:
        if window_ms < 0:
            raise ValueError("window_ms must not be negative")
        self._window_ms = window_ms
        self._pending: Vector2 | None = None
        self._pressed_at = 0.0
        self._ready: Vector2 | None = None

    @property
    def pending(self) -> Vector2 | None:
        return self._pending

    def press(self, pos: Vector2, now_ms: float) -> str:
        if self._pending is not None:
            if now_ms - self._pressed_at <= self._window_ms:
                self._pending = None
                return DOUBLE
            # Expired but not yet polled: it is a single click after all.
            self._ready = self._pending
        self._pending = pos
        self._pressed_at = now_ms
        return PENDING

    def poll(self, now_ms: float) -> Vector2 | None:
        """Release a single click whose window has passed, if any."""
        if self._ready is not None:
            pos, self._ready = self._ready, None
            return pos
        if self._pending is None or now_ms - self._pressed_at <= self._window_ms:
            return None
        pos, self._pending = self._pending, None
        return pos
