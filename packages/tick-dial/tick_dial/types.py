"""Shared types for the frame loop."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from tick_dial.canvas import Canvas


@dataclass(frozen=True, slots=True)
class FrameContext:
    """What a step sees of the current frame. Times are in milliseconds."""

    frame_number: int
    timestamp: float
    dt: float
    now: datetime


FrameCallback = Callable[[float], None]


class FrameScheduler(Protocol):
    """Host hook that calls ``callback(timestamp_ms)`` on the next refresh."""

    def request_frame(self, callback: FrameCallback) -> None: ...


Step = Callable[["Canvas", FrameContext], None]
