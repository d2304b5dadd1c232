"""Countdown timer state machine driven by frames and marker clicks."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from tick_dial.config import DialConfig
from tick_dial.geometry import timer_wedge_angle
from tick_dial.markers import hit_marker, marker_limit_ms
from tick_dial.vector import Vector2

logger = logging.getLogger(__name__)

IDLE = "idle"
RUNNING = "running"
COMPLETED = "completed"


@dataclass
class TimerState:
    """Radial timer. ``elapsed_ms`` never exceeds ``limit_ms``.

    ``wedge_angle`` follows ``elapsed_ms / limit_ms`` of a full turn and
    is 0 whenever no limit is set.
    """

    started: bool = False
    elapsed_ms: float = 0.0
    limit_ms: float = 0.0
    wedge_angle: float = 0.0

    @property
    def phase(self) -> str:
        if not self.started:
            return IDLE
        if self.elapsed_ms >= self.limit_ms:
            return COMPLETED
        return RUNNING

    @property
    def remaining_ms(self) -> float:
        return max(self.limit_ms - self.elapsed_ms, 0.0)

    def start(self, limit_ms: float) -> None:
        if limit_ms <= 0:
            raise ValueError("limit_ms must be positive")
        self.started = True
        self.elapsed_ms = 0.0
        self.limit_ms = limit_ms
        self.wedge_angle = 0.0
        logger.info("Timer started for %.0f s", limit_ms / 1000)

    def advance(self, dt_ms: float) -> bool:
        """Add ``dt_ms`` of elapsed time. Returns True on the completing call."""
        if self.phase != RUNNING or dt_ms <= 0:
            return False
        self.elapsed_ms = min(self.elapsed_ms + dt_ms, self.limit_ms)
        self.wedge_angle = timer_wedge_angle(self.elapsed_ms, self.limit_ms)
        if self.elapsed_ms >= self.limit_ms:
            logger.info("Timer completed after %.0f s", self.limit_ms / 1000)
            return True
        return False

    def reset(self) -> None:
        self.started = False
        self.elapsed_ms = 0.0
        self.limit_ms = 0.0
        self.wedge_angle = 0.0
        logger.info("Timer reset")

    def handle_click(self, point: Vector2, config: DialConfig) -> str:
        """Apply a single click at ``point`` (logical units); return the new phase.

        A marker hit always (re)starts the timer with that marker's
        duration. Otherwise a completed timer is reset, and anything else
        is ignored.
        """
        index = hit_marker(point, config)
        if index is not None:
            self.start(marker_limit_ms(index, config.tick_count))
        elif self.phase == COMPLETED:
            self.reset()
        else:
            logger.debug("Click at (%.1f, %.1f) ignored", point.x, point.y)
        return self.phase
