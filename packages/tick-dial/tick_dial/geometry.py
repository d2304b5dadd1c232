"""Pure dial geometry: hand angles, hand and tick endpoints, wedge angle.

Angles are in radians measured clockwise on a y-down surface, with 0 on
the positive x axis. The renderer rotates the context so that angle 0
lands on 12 o'clock.
"""
from __future__ import annotations

import math
from typing import Literal, Protocol

from tick_dial.vector import Vector2

TAU = math.pi * 2

HandKind = Literal["hour", "minute", "second"]


class TimeOfDay(Protocol):
    """Anything with clock fields, e.g. ``datetime.datetime`` or ``datetime.time``."""

    @property
    def hour(self) -> int: ...

    @property
    def minute(self) -> int: ...

    @property
    def second(self) -> int: ...

    @property
    def microsecond(self) -> int: ...


def hand_angle(kind: HandKind, now: TimeOfDay, smooth: bool = True) -> float:
    """Angle of a hand at ``now``.

    In smooth mode every finer component contributes its fraction, so
    hands sweep instead of jumping at unit boundaries.
    """
    hours = now.hour
    minutes = now.minute
    seconds = now.second
    millis = now.microsecond / 1000
    if kind == "hour":
        fraction = minutes / 60 + seconds / 3600 + millis / 3_600_000 if smooth else 0.0
        return TAU / 12 * (hours + fraction)
    if kind == "minute":
        fraction = seconds / 60 + millis / 60_000 if smooth else 0.0
        return TAU / 60 * (minutes + fraction)
    if kind == "second":
        fraction = millis / 1000 if smooth else 0.0
        return TAU / 60 * (seconds + fraction)
    raise ValueError(f"Unknown hand kind {kind!r}")


def hand_vectors(
    center: Vector2, angle: float, offset: float, length: float,
) -> tuple[Vector2, Vector2]:
    """Start and end of a hand. A negative offset puts the start behind center."""
    direction = Vector2.from_angle(angle)
    start = center.add(direction.multiply(offset))
    end = center.add(direction.multiply(length))
    return start, end


def tick_vector(index: int, total: int) -> Vector2:
    """Unit direction of tick ``index``; index 0 lies on the positive x axis."""
    return Vector2.from_angle(TAU * index / total)


def tick_endpoints(
    center: Vector2, direction: Vector2, radius: float, tick_length: float,
) -> tuple[Vector2, Vector2]:
    start = center.add(direction.multiply(radius))
    end = center.add(direction.multiply(radius - tick_length))
    return start, end


def is_major_tick(index: int, period: int) -> bool:
    return index % period == 0


def marker_position(
    center: Vector2,
    index: int,
    radius: float,
    tick_length: float,
    total: int,
    rotation: float = 0.0,
) -> Vector2:
    """Midpoint of a tick's stroke in unrotated space.

    ``rotation`` is the context rotation the renderer applies around
    ``center`` when drawing ticks.
    """
    direction = Vector2.from_angle(TAU * index / total + rotation)
    return center.add(direction.multiply(radius - tick_length / 2))


def timer_wedge_angle(elapsed: float, limit: float) -> float:
    """Sweep of the timer wedge. A non-positive limit means no wedge."""
    if limit <= 0:
        return 0.0
    ratio = min(max(elapsed / limit, 0.0), 1.0)
    return ratio * TAU
