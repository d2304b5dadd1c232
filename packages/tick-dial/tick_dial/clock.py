"""Frame clock turning host timestamps into per-frame deltas."""
from __future__ import annotations

from datetime import datetime

from tick_dial.types import FrameContext


class FrameClock:
    """Tracks the previous frame timestamp.

    The first frame has no predecessor and gets a delta of 0. A timestamp
    that runs backwards also yields 0 rather than a negative delta.
    """

    def __init__(self) -> None:
        self._previous: float | None = None
        self._frame_number = 0
        self._dt = 0.0

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def previous(self) -> float | None:
        return self._previous

    @property
    def dt(self) -> float:
        return self._dt

    def advance(self, timestamp: float) -> float:
        if self._previous is None:
            dt = 0.0
        else:
            dt = max(timestamp - self._previous, 0.0)
        self._previous = timestamp
        self._frame_number += 1
        self._dt = dt
        return dt

    def context(self, now: datetime) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            timestamp=self._previous if self._previous is not None else 0.0,
            dt=self._dt,
            now=now,
        )

    def reset(self) -> None:
        self._previous = None
        self._frame_number = 0
        self._dt = 0.0
