"""Tick markers as timer-duration selectors."""
from __future__ import annotations

from tick_dial.config import DialConfig
from tick_dial.geometry import is_major_tick, marker_position
from tick_dial.vector import Vector2

MINUTE_MS = 60_000


def marker_minutes(index: int, total: int = 60) -> int:
    """Minutes selected by the marker at ``index``.

    Index 0 sits at 12 o'clock and selects the full ``total``; indices
    count clockwise, so the marker one step counter-clockwise from 12
    (``total - 1``) selects one minute.
    """
    return total - index % total


def marker_limit_ms(index: int, total: int = 60) -> float:
    return float(marker_minutes(index, total) * MINUTE_MS)


def hit_marker(point: Vector2, config: DialConfig) -> int | None:
    """Index of the first marker under ``point`` (logical units), if any.

    Markers are scanned clockwise from 12 o'clock. A marker is hit when
    the point is closer to the middle of its stroke than half the
    stroke's length.
    """
    styles = config.styles
    for index in range(config.tick_count):
        style = (
            styles.major_tick
            if is_major_tick(index, config.major_every)
            else styles.minor_tick
        )
        position = marker_position(
            config.clock_center,
            index,
            config.dial_radius,
            style.length,
            config.tick_count,
            config.dial_rotation,
        )
        if point.distance_from(position) < style.length / 2:
            return index
    return None
