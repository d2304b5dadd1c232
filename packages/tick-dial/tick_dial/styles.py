"""Style records for every drawable on the dial.

Each drawable kind gets its own frozen record. Attributes are optional:
``None`` means the aspect is not drawn at all, which is different from an
explicit zero (a ``line_width`` of 0 is still "present").

Colors follow pygame's convention of RGB or RGBA int tuples.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tick_dial.vector import Vector2

Color = tuple[int, ...]

# Fallbacks applied only where a primitive needs a value to draw at all.
DEFAULT_LINE_WIDTH = 1.0
DEFAULT_STROKE_STYLE: Color = (0, 0, 0)
DEFAULT_SHADOW_COLOR: Color = (0, 0, 0, 0)
DEFAULT_SHADOW_BLUR = 0.0
DEFAULT_SHADOW_OFFSET = Vector2(0)


@dataclass(frozen=True)
class TickStyle:
    """A radial tick mark. ``length`` runs inward from the dial edge."""

    length: float
    line_width: float | None = None
    stroke_style: Color | None = None


@dataclass(frozen=True)
class HandStyle:
    """A clock hand.

    ``offset`` displaces the near end from the center along the hand's
    direction; a negative offset gives the counterweight tail.
    """

    length: float
    offset: float = 0.0
    line_width: float | None = None
    stroke_style: Color | None = None
    fill_style: Color | None = None
    shadow_color: Color | None = None
    shadow_blur: float | None = None
    shadow_offset: Vector2 | None = None


@dataclass(frozen=True)
class WedgeStyle:
    fill_style: Color | None = None
    stroke_style: Color | None = None
    line_width: float | None = None


@dataclass(frozen=True)
class FaceStyle:
    fill_style: Color | None = None
    stroke_style: Color | None = None
    line_width: float | None = None


@dataclass(frozen=True)
class StyleTable:
    minor_tick: TickStyle
    major_tick: TickStyle
    hour_hand: HandStyle
    minute_hand: HandStyle
    second_hand: HandStyle
    timer: WedgeStyle
    face: FaceStyle


INK: Color = (17, 17, 17)
HAND_INK: Color = (34, 34, 34)
SIGNAL_RED: Color = (204, 0, 0)
WHITE: Color = (255, 255, 255)

_BASE_HAND: dict[str, Any] = {
    "stroke_style": HAND_INK,
    "shadow_color": (80, 0, 0, 64),
    "shadow_blur": 12.0,
    "shadow_offset": Vector2(4),
}

DEFAULT_STYLES = StyleTable(
    minor_tick=TickStyle(length=80 / 3, line_width=12.0, stroke_style=INK),
    major_tick=TickStyle(length=80.0, line_width=24.0, stroke_style=INK),
    hour_hand=HandStyle(**_BASE_HAND, length=300.0, offset=-40.0, line_width=48.0),
    minute_hand=HandStyle(**_BASE_HAND, length=390.0, offset=-60.0, line_width=32.0),
    second_hand=HandStyle(
        **{**_BASE_HAND, "stroke_style": SIGNAL_RED},
        length=270.0,
        offset=-80.0,
        line_width=12.0,
        fill_style=SIGNAL_RED,
    ),
    timer=WedgeStyle(fill_style=SIGNAL_RED),
    face=FaceStyle(fill_style=WHITE),
)
