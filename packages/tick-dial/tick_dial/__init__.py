"""tick-dial - Analog clock face with a radial countdown timer."""
from __future__ import annotations

from tick_dial.canvas import Canvas, RecordingCanvas
from tick_dial.clicks import ClickDebouncer
from tick_dial.clock import FrameClock
from tick_dial.config import DialConfig
from tick_dial.driver import FrameDriver, build_dial_driver
from tick_dial.markers import hit_marker, marker_limit_ms, marker_minutes
from tick_dial.styles import DEFAULT_STYLES, FaceStyle, HandStyle, StyleTable, TickStyle, WedgeStyle
from tick_dial.timer import COMPLETED, IDLE, RUNNING, TimerState
from tick_dial.types import FrameContext, FrameScheduler, Step
from tick_dial.vector import Vector2
from tick_dial.viewport import Viewport

__all__ = [
    "Canvas",
    "RecordingCanvas",
    "ClickDebouncer",
    "FrameClock",
    "DialConfig",
    "FrameDriver",
    "build_dial_driver",
    "hit_marker",
    "marker_limit_ms",
    "marker_minutes",
    "DEFAULT_STYLES",
    "FaceStyle",
    "HandStyle",
    "StyleTable",
    "TickStyle",
    "WedgeStyle",
    "IDLE",
    "RUNNING",
    "COMPLETED",
    "TimerState",
    "FrameContext",
    "FrameScheduler",
    "Step",
    "Vector2",
    "Viewport",
]
