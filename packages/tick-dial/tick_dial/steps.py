"""Step factories for the dial's frame pipeline."""
from __future__ import annotations

from typing import Callable

from tick_dial.canvas import Canvas
from tick_dial.config import DialConfig
from tick_dial.render import draw_face, draw_hands, draw_tick_marks, draw_timer_wedge
from tick_dial.timer import TimerState
from tick_dial.types import FrameContext, Step


def make_face_step(config: DialConfig) -> Step:
    def face_step(canvas: Canvas, ctx: FrameContext) -> None:
        draw_face(canvas, config.clock_center, config.clock_radius, config.styles.face)

    return face_step


def make_timer_step(
    config: DialConfig,
    timer: TimerState,
    on_complete: Callable[[TimerState], None] | None = None,
) -> Step:
    """Return a step that advances the timer by the frame delta, then draws it."""

    def timer_step(canvas: Canvas, ctx: FrameContext) -> None:
        if timer.advance(ctx.dt) and on_complete is not None:
            on_complete(timer)
        draw_timer_wedge(
            canvas,
            config.clock_center,
            config.wedge_radius,
            timer,
            config.timer_start_angle,
            config.styles.timer,
        )

    return timer_step


def make_ticks_step(config: DialConfig) -> Step:
    def ticks_step(canvas: Canvas, ctx: FrameContext) -> None:
        draw_tick_marks(canvas, config)

    return ticks_step


def make_hands_step(config: DialConfig) -> Step:
    def hands_step(canvas: Canvas, ctx: FrameContext) -> None:
        draw_hands(canvas, ctx.now, config)

    return hands_step
