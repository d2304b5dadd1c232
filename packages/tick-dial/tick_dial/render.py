"""Draw calls for the face, timer wedge, ticks and hands.

Nothing here keeps state between frames; every function paints onto the
given canvas with the style it is handed.
"""
from __future__ import annotations

import math
from contextlib import contextmanager
from typing import Iterator

from tick_dial.canvas import Canvas
from tick_dial.config import DialConfig
from tick_dial.geometry import (
    TimeOfDay,
    hand_angle,
    hand_vectors,
    is_major_tick,
    tick_endpoints,
    tick_vector,
)
from tick_dial.styles import (
    DEFAULT_LINE_WIDTH,
    DEFAULT_SHADOW_BLUR,
    DEFAULT_SHADOW_COLOR,
    DEFAULT_SHADOW_OFFSET,
    DEFAULT_STROKE_STYLE,
    FaceStyle,
    HandStyle,
    TickStyle,
    WedgeStyle,
)
from tick_dial.timer import TimerState
from tick_dial.vector import Vector2


@contextmanager
def rotated(canvas: Canvas, center: Vector2, angle: float) -> Iterator[Canvas]:
    """Rotate the context around ``center`` for the duration of the block."""
    canvas.save()
    try:
        canvas.translate(center.x, center.y)
        canvas.rotate(angle)
        canvas.translate(-center.x, -center.y)
        yield canvas
    finally:
        canvas.restore()


def set_drop_shadow(canvas: Canvas, style: HandStyle | None) -> None:
    """Apply the style's shadow, or switch shadows off for ``None``."""
    color = style.shadow_color if style is not None else None
    blur = style.shadow_blur if style is not None else None
    offset = style.shadow_offset if style is not None else None
    canvas.shadow_color = color if color is not None else DEFAULT_SHADOW_COLOR
    canvas.shadow_blur = blur if blur is not None else DEFAULT_SHADOW_BLUR
    offset = offset if offset is not None else DEFAULT_SHADOW_OFFSET
    canvas.shadow_offset_x = offset.x
    canvas.shadow_offset_y = offset.y


def draw_line(
    canvas: Canvas, start: Vector2, end: Vector2, style: TickStyle | HandStyle,
) -> None:
    canvas.begin_path()
    canvas.move_to(start.x, start.y)
    canvas.line_to(end.x, end.y)
    canvas.line_width = (
        style.line_width if style.line_width is not None else DEFAULT_LINE_WIDTH
    )
    canvas.stroke_style = (
        style.stroke_style if style.stroke_style is not None else DEFAULT_STROKE_STYLE
    )
    canvas.stroke()


def draw_circle(
    canvas: Canvas,
    center: Vector2,
    radius: float,
    style: HandStyle | FaceStyle | WedgeStyle,
) -> None:
    """Fill and/or outline a circle; unset style attributes are skipped."""
    canvas.begin_path()
    canvas.arc(center.x, center.y, radius, 0.0, 2 * math.pi, False)
    _paint(canvas, style)


def _paint(canvas: Canvas, style: HandStyle | FaceStyle | WedgeStyle) -> None:
    if style.fill_style is not None:
        canvas.fill_style = style.fill_style
        canvas.fill()
    if style.line_width is not None and style.stroke_style is not None:
        canvas.line_width = style.line_width
        canvas.stroke_style = style.stroke_style
        canvas.stroke()


def draw_face(canvas: Canvas, center: Vector2, radius: float, style: FaceStyle) -> None:
    draw_circle(canvas, center, radius, style)


def draw_timer_wedge(
    canvas: Canvas,
    center: Vector2,
    radius: float,
    timer: TimerState,
    start_angle: float,
    style: WedgeStyle,
) -> None:
    """Fill the pie slice swept so far. Nothing is drawn while idle."""
    if not timer.started or timer.limit_ms <= 0:
        return
    canvas.begin_path()
    canvas.move_to(center.x, center.y)
    canvas.arc(
        center.x, center.y, radius, start_angle, start_angle + timer.wedge_angle, False,
    )
    canvas.close_path()
    _paint(canvas, style)


def draw_tick_marks(canvas: Canvas, config: DialConfig) -> None:
    """Draw ``config.tick_count`` ticks, every ``major_every``-th one major."""
    center = config.clock_center
    styles = config.styles
    with rotated(canvas, center, config.dial_rotation):
        for index in range(config.tick_count):
            style = (
                styles.major_tick
                if is_major_tick(index, config.major_every)
                else styles.minor_tick
            )
            direction = tick_vector(index, config.tick_count)
            start, end = tick_endpoints(center, direction, config.dial_radius, style.length)
            draw_line(canvas, start, end, style)


def draw_hands(canvas: Canvas, now: TimeOfDay, config: DialConfig) -> None:
    center = config.clock_center
    styles = config.styles
    smooth = config.smooth_movement

    hour = hand_vectors(
        center,
        hand_angle("hour", now, smooth),
        styles.hour_hand.offset,
        styles.hour_hand.length,
    )
    minute = hand_vectors(
        center,
        hand_angle("minute", now, smooth),
        styles.minute_hand.offset,
        styles.minute_hand.length,
    )
    second = hand_vectors(
        center,
        hand_angle("second", now, smooth),
        styles.second_hand.offset,
        styles.second_hand.length,
    )

    with rotated(canvas, center, config.dial_rotation):
        set_drop_shadow(canvas, styles.hour_hand)
        draw_line(canvas, *hour, styles.hour_hand)

        set_drop_shadow(canvas, styles.minute_hand)
        draw_line(canvas, *minute, styles.minute_hand)

        # The second hand overlaps itself (line, tip cap, hub). A shadowed
        # pass alone would cast shadows of each part onto the others, so
        # the same shapes are painted again without shadow on top.
        set_drop_shadow(canvas, styles.second_hand)
        _draw_second_hand(canvas, center, second, config)
        set_drop_shadow(canvas, None)
        _draw_second_hand(canvas, center, second, config)


def _draw_second_hand(
    canvas: Canvas,
    center: Vector2,
    hand: tuple[Vector2, Vector2],
    config: DialConfig,
) -> None:
    style = config.styles.second_hand
    start, end = hand
    draw_line(canvas, start, end, style)
    draw_circle(canvas, end, config.second_cap_radius, style)
    draw_circle(canvas, center, config.hub_radius, style)
