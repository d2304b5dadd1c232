"""Immutable 2D vector with component-wise and scalar arithmetic."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

Operand = Union["Vector2", float]


@dataclass(frozen=True, slots=True)
class Vector2:
    """2D point/direction. ``Vector2(5)`` broadcasts to ``(5, 5)``.

    Every operation returns a new instance. Operands may be another
    Vector2 (component-wise) or a single number (applied to both).
    """

    x: float
    y: float = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.y is None:
            object.__setattr__(self, "y", self.x)

    @classmethod
    def from_angle(cls, angle: float) -> Vector2:
        return cls(math.cos(angle), math.sin(angle))

    def add(self, other: Operand) -> Vector2:
        ox, oy = _components(other)
        return Vector2(self.x + ox, self.y + oy)

    def subtract(self, other: Operand) -> Vector2:
        ox, oy = _components(other)
        return Vector2(self.x - ox, self.y - oy)

    def multiply(self, other: Operand) -> Vector2:
        ox, oy = _components(other)
        return Vector2(self.x * ox, self.y * oy)

    def divide(self, other: Operand) -> Vector2:
        """Component-wise division. Zero divisors follow IEEE semantics."""
        ox, oy = _components(other)
        return Vector2(_div(self.x, ox), _div(self.y, oy))

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance_from(self, other: Vector2) -> float:
        return self.subtract(other).length()

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __truediv__ = divide

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


def _components(value: Operand) -> tuple[float, float]:
    if isinstance(value, Vector2):
        return value.x, value.y
    return value, value


def _div(a: float, b: float) -> float:
    # Python raises on float division by zero; keep canvas-style inf/nan.
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b
