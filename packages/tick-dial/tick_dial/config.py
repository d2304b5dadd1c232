"""Static dial configuration."""
from __future__ import annotations

import math
from dataclasses import dataclass, field

from tick_dial.styles import DEFAULT_STYLES, StyleTable
from tick_dial.vector import Vector2


@dataclass(frozen=True)
class DialConfig:
    """Immutable configuration for the dial, fixed at startup.

    All lengths are in logical units; the viewport maps them onto
    physical pixels.

    Attributes:
        logical_size: Fixed drawing space the geometry is computed in.
        clock_radius: Radius of the face disc.
        clock_padding: Gap between the face edge and the outer end of ticks.
        smooth_movement: Sweep hands continuously instead of stepping.
        tick_count: Number of tick marks around the dial.
        major_every: Every n-th tick is a major (hour) tick.
        dial_rotation: Rotation applied to ticks and hands so that angle 0
            points at 12 o'clock.
        timer_start_angle: Where the timer wedge begins, in canvas radians.
        wedge_inset: How far inside the face edge the wedge stops.
        second_cap_radius: Radius of the disc at the tip of the second hand.
        hub_radius: Radius of the center hub.
        click_debounce_ms: Window in which a second press turns a click
            into a double click.
        styles: The style table.
    """

    logical_size: Vector2 = Vector2(1000)
    clock_radius: float = 420.0
    clock_padding: float = 20.0
    smooth_movement: bool = True
    tick_count: int = 60
    major_every: int = 5
    dial_rotation: float = -math.pi / 2
    timer_start_angle: float = -math.pi / 2
    wedge_inset: float = 7.5
    second_cap_radius: float = 40.0
    hub_radius: float = 10.0
    click_debounce_ms: float = 250.0
    styles: StyleTable = field(default=DEFAULT_STYLES)

    def __post_init__(self) -> None:
        if self.logical_size.x <= 0 or self.logical_size.y <= 0:
            raise ValueError("logical_size must be positive")
        if self.clock_radius <= 0:
            raise ValueError("clock_radius must be positive")
        if self.clock_padding < 0 or self.clock_padding >= self.clock_radius:
            raise ValueError("clock_padding must be within [0, clock_radius)")
        if self.tick_count <= 0:
            raise ValueError("tick_count must be positive")
        if self.major_every <= 0 or self.tick_count % self.major_every:
            raise ValueError("tick_count must be a multiple of major_every")
        if self.click_debounce_ms < 0:
            raise ValueError("click_debounce_ms must not be negative")

    @property
    def clock_center(self) -> Vector2:
        return self.logical_size.divide(2)

    @property
    def dial_radius(self) -> float:
        """Radius at which ticks start and hands are measured from."""
        return self.clock_radius - self.clock_padding

    @property
    def wedge_radius(self) -> float:
        return self.clock_radius - self.wedge_inset
