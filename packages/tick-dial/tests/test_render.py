"""Tests for the render pipeline against a recording canvas."""
from __future__ import annotations

import math
from datetime import time

import pytest

from tick_dial import DialConfig, FaceStyle, RecordingCanvas, TickStyle, TimerState, Vector2, WedgeStyle
from tick_dial.render import (
    draw_circle,
    draw_face,
    draw_hands,
    draw_line,
    draw_tick_marks,
    draw_timer_wedge,
    rotated,
    set_drop_shadow,
)
from tick_dial.styles import DEFAULT_STYLES

CONFIG = DialConfig()
CENTER = CONFIG.clock_center
RED = (204, 0, 0)
NO_SHADOW = (0, 0, 0, 0)


class TestRotated:
    def test_bracket_order(self):
        canvas = RecordingCanvas()
        with rotated(canvas, Vector2(10, 20), 1.5):
            pass
        assert [(c.name, c.args) for c in canvas.calls] == [
            ("save", ()),
            ("translate", (10, 20)),
            ("rotate", (1.5,)),
            ("translate", (-10, -20)),
            ("restore", ()),
        ]

    def test_restores_on_error(self):
        canvas = RecordingCanvas()
        with pytest.raises(RuntimeError):
            with rotated(canvas, CENTER, 1.0):
                raise RuntimeError("boom")
        assert canvas.depth == 0
        assert canvas.names()[-1] == "restore"


class TestPrimitives:
    def test_line_defaults_when_unset(self):
        canvas = RecordingCanvas()
        canvas.line_width = 7
        canvas.stroke_style = RED
        draw_line(canvas, Vector2(0), Vector2(10), TickStyle(length=10))
        (stroke,) = canvas.find("stroke")
        assert stroke.paint["line_width"] == 1.0
        assert stroke.paint["stroke_style"] == (0, 0, 0)

    def test_line_uses_style(self):
        canvas = RecordingCanvas()
        draw_line(canvas, Vector2(1, 2), Vector2(3, 4), DEFAULT_STYLES.major_tick)
        assert canvas.names() == ["begin_path", "move_to", "line_to", "stroke"]
        assert canvas.find("move_to")[0].args == (1, 2)
        assert canvas.find("stroke")[0].paint["line_width"] == 24

    def test_circle_without_paint_draws_nothing(self):
        canvas = RecordingCanvas()
        draw_circle(canvas, CENTER, 50, FaceStyle())
        assert "fill" not in canvas.names()
        assert "stroke" not in canvas.names()

    def test_circle_needs_width_and_color_to_stroke(self):
        canvas = RecordingCanvas()
        draw_circle(canvas, CENTER, 50, FaceStyle(line_width=3))
        assert "stroke" not in canvas.names()
        draw_circle(canvas, CENTER, 50, FaceStyle(line_width=3, stroke_style=RED))
        (stroke,) = canvas.find("stroke")
        assert stroke.paint["line_width"] == 3

    def test_face_is_a_filled_disc(self):
        canvas = RecordingCanvas()
        draw_face(canvas, CENTER, CONFIG.clock_radius, CONFIG.styles.face)
        (arc,) = canvas.find("arc")
        assert arc.args[:3] == (500, 500, 420)
        assert arc.args[4] == pytest.approx(2 * math.pi)
        (fill,) = canvas.find("fill")
        assert fill.paint["fill_style"] == (255, 255, 255)

    def test_drop_shadow_set_and_cleared(self):
        canvas = RecordingCanvas()
        set_drop_shadow(canvas, DEFAULT_STYLES.hour_hand)
        assert canvas.shadow_color == (80, 0, 0, 64)
        assert canvas.shadow_blur == 12
        assert (canvas.shadow_offset_x, canvas.shadow_offset_y) == (4, 4)
        set_drop_shadow(canvas, None)
        assert canvas.shadow_color == NO_SHADOW
        assert canvas.shadow_blur == 0
        assert (canvas.shadow_offset_x, canvas.shadow_offset_y) == (0, 0)


class TestTimerWedge:
    def _draw(self, timer: TimerState, style: WedgeStyle = DEFAULT_STYLES.timer) -> RecordingCanvas:
        canvas = RecordingCanvas()
        draw_timer_wedge(canvas, CENTER, CONFIG.wedge_radius, timer, CONFIG.timer_start_angle, style)
        return canvas

    def test_idle_draws_nothing(self):
        assert self._draw(TimerState()).calls == []

    def test_zero_limit_draws_nothing(self):
        assert self._draw(TimerState(started=True, limit_ms=0.0)).calls == []

    def test_running_wedge(self):
        timer = TimerState()
        timer.start(4000)
        timer.advance(1000)
        canvas = self._draw(timer)
        assert canvas.names() == ["begin_path", "move_to", "arc", "close_path", "fill"]
        (arc,) = canvas.find("arc")
        x, y, radius, start, end, anticlockwise = arc.args
        assert (x, y, radius) == (500, 500, 412.5)
        assert start == pytest.approx(-math.pi / 2)
        assert end == pytest.approx(0.0, abs=1e-12)
        assert anticlockwise is False
        assert canvas.find("fill")[0].paint["fill_style"] == RED

    def test_completed_wedge_is_full_disc(self):
        timer = TimerState()
        timer.start(1000)
        timer.advance(1000)
        (arc,) = self._draw(timer).find("arc")
        assert arc.args[4] - arc.args[3] == pytest.approx(2 * math.pi)

    def test_stroke_only_wedge(self):
        timer = TimerState()
        timer.start(1000)
        canvas = self._draw(timer, WedgeStyle(stroke_style=RED, line_width=2))
        assert "fill" not in canvas.names()
        assert len(canvas.find("stroke")) == 1


class TestTickMarks:
    def test_sixty_ticks_inside_rotation(self):
        canvas = RecordingCanvas()
        draw_tick_marks(canvas, CONFIG)
        names = canvas.names()
        assert names[:4] == ["save", "translate", "rotate", "translate"]
        assert names[-1] == "restore"
        assert canvas.find("rotate")[0].args == (-math.pi / 2,)
        assert canvas.depth == 0

        strokes = canvas.find("stroke")
        assert len(strokes) == 60
        widths = [s.paint["line_width"] for s in strokes]
        assert widths.count(24) == 12
        assert widths.count(12) == 48
        assert widths[0] == 24 and widths[1] == 12

    def test_first_tick_runs_inward_on_x_axis(self):
        canvas = RecordingCanvas()
        draw_tick_marks(canvas, CONFIG)
        assert canvas.find("move_to")[0].args == (900, 500)
        assert canvas.find("line_to")[0].args == (820, 500)


class TestHands:
    def _draw(self, now=time(10, 10, 30)) -> RecordingCanvas:
        canvas = RecordingCanvas()
        draw_hands(canvas, now, CONFIG)
        return canvas

    def test_rotation_bracket_is_balanced(self):
        canvas = self._draw()
        assert canvas.names()[0] == "save"
        assert canvas.names()[-1] == "restore"
        assert canvas.depth == 0

    def test_paint_order_and_counts(self):
        canvas = self._draw()
        strokes = canvas.find("stroke")
        fills = canvas.find("fill")
        # hour, minute, then the second hand twice (line, cap, hub each)
        assert [s.paint["line_width"] for s in strokes] == [48, 32, 12, 12, 12, 12, 12, 12]
        assert len(fills) == 4

    def test_second_hand_shadow_pass_then_plain_pass(self):
        canvas = self._draw()
        strokes = canvas.find("stroke")
        assert strokes[0].paint["shadow_color"] == (80, 0, 0, 64)
        assert [s.paint["shadow_color"] for s in strokes[2:5]] == [(80, 0, 0, 64)] * 3
        assert [s.paint["shadow_color"] for s in strokes[5:]] == [NO_SHADOW] * 3
        fills = canvas.find("fill")
        assert [f.paint["shadow_blur"] for f in fills] == [12, 12, 0, 0]

    def test_shadow_does_not_leak_past_bracket(self):
        canvas = self._draw()
        assert canvas.shadow_color == NO_SHADOW

    def test_second_hand_geometry(self):
        canvas = self._draw(time(0, 0, 15))
        moves = canvas.find("move_to")
        lines = canvas.find("line_to")
        # Third line drawn is the second hand; 15 s is a quarter turn.
        sx, sy = moves[2].args
        ex, ey = lines[2].args
        assert (sx, sy) == (pytest.approx(500), pytest.approx(420))
        assert (ex, ey) == (pytest.approx(500), pytest.approx(770))
        caps = [a.args for a in canvas.find("arc")[:2]]
        assert caps[0][:3] == (pytest.approx(500), pytest.approx(770), 40)
        assert caps[1][:3] == (500, 500, 10)
