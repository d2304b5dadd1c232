"""Resolution-independent scaling between logical and physical space."""
from __future__ import annotations

import logging

from tick_dial.canvas import Canvas
from tick_dial.vector import Vector2

logger = logging.getLogger(__name__)


class Viewport:
    """Keeps the canvas square and scaled so drawing stays in logical units.

    ``physical_size`` is the backing-store resolution, ``display_size``
    the on-screen footprint (they differ by the pixel ratio), and
    ``scale`` maps logical units onto the backing store.
    """

    def __init__(self, logical_size: Vector2) -> None:
        if logical_size.x <= 0 or logical_size.y <= 0:
            raise ValueError("logical_size must be positive")
        self._logical_size = logical_size
        self._physical_size = logical_size
        self._display_size = logical_size
        self._scale = Vector2(1)

    @property
    def logical_size(self) -> Vector2:
        return self._logical_size

    @property
    def physical_size(self) -> Vector2:
        return self._physical_size

    @property
    def display_size(self) -> Vector2:
        return self._display_size

    @property
    def scale(self) -> Vector2:
        return self._scale

    def resize(
        self, canvas: Canvas, width: float, height: float, pixel_ratio: float = 1.0,
    ) -> bool:
        """Fit the canvas to the shorter window side. Returns False if ignored."""
        side = min(width, height)
        if side <= 0 or pixel_ratio <= 0:
            logger.debug("Ignoring resize to %sx%s @%s", width, height, pixel_ratio)
            return False

        physical = int(side * pixel_ratio)
        self._display_size = Vector2(side)
        self._physical_size = Vector2(physical)
        self._scale = self._physical_size.divide(self._logical_size)

        # Resizing the backing store resets its transform.
        canvas.resize(physical, physical)
        canvas.scale(self._scale.x, self._scale.y)
        logger.debug(
            "Viewport %dx%d (display %s, scale %.4f)",
            physical, physical, side, self._scale.x,
        )
        return True

    def to_logical(self, pointer: Vector2, element_offset: Vector2 = Vector2(0)) -> Vector2:
        """Map a pointer position in display pixels to logical units."""
        display_scale = self._display_size.divide(self._logical_size)
        return pointer.subtract(element_offset).divide(display_scale)
