"""Tests for the immutable 2D vector."""
from __future__ import annotations

import dataclasses
import math

import pytest

from tick_dial import Vector2


class TestConstruction:
    def test_two_components(self) -> None:
        v = Vector2(3, 4)
        assert (v.x, v.y) == (3, 4)

    def test_single_scalar_broadcasts(self) -> None:
        assert Vector2(5) == Vector2(5, 5)

    def test_is_frozen(self) -> None:
        v = Vector2(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.x = 10  # type: ignore[misc]

    def test_unpacks_like_a_tuple(self) -> None:
        x, y = Vector2(1.5, -2.0)
        assert (x, y) == (1.5, -2.0)

    def test_from_angle(self) -> None:
        v = Vector2.from_angle(math.pi / 2)
        assert v.x == pytest.approx(0.0, abs=1e-12)
        assert v.y == pytest.approx(1.0)


class TestArithmetic:
    def test_add_vector(self) -> None:
        assert Vector2(5).add(Vector2(1, 2)) == Vector2(6, 7)

    def test_add_scalar(self) -> None:
        assert Vector2(1, 2).add(3) == Vector2(4, 5)

    def test_subtract(self) -> None:
        assert Vector2(5, 3).subtract(Vector2(1, 2)) == Vector2(4, 1)
        assert Vector2(5, 3).subtract(1) == Vector2(4, 2)

    def test_multiply(self) -> None:
        assert Vector2(1, -2).multiply(3) == Vector2(3, -6)
        assert Vector2(2, 3).multiply(Vector2(4, 5)) == Vector2(8, 15)

    def test_divide(self) -> None:
        assert Vector2(2, 2).divide(2) == Vector2(1, 1)
        assert Vector2(600).divide(Vector2(1000, 300)) == Vector2(0.6, 2)

    def test_operators_delegate(self) -> None:
        a, b = Vector2(1, 2), Vector2(3, 4)
        assert a + b == a.add(b)
        assert b - a == b.subtract(a)
        assert a * 2 == a.multiply(2)
        assert b / 2 == b.divide(2)

    def test_operands_are_not_mutated(self) -> None:
        a, b = Vector2(1, 2), Vector2(3, 4)
        result = a.add(b)
        assert result is not a and result is not b
        assert a == Vector2(1, 2)
        assert b == Vector2(3, 4)


class TestDivideByZero:
    def test_nonzero_over_zero_is_infinite(self) -> None:
        v = Vector2(1, -1).divide(0)
        assert v.x == math.inf
        assert v.y == -math.inf

    def test_zero_over_zero_is_nan(self) -> None:
        v = Vector2(0).divide(0)
        assert math.isnan(v.x) and math.isnan(v.y)


class TestDistance:
    def test_3_4_5(self) -> None:
        assert Vector2(3, 4).distance_from(Vector2(0, 0)) == 5

    def test_symmetric(self) -> None:
        a, b = Vector2(1, 7), Vector2(-2, 3)
        assert a.distance_from(b) == b.distance_from(a)

    def test_length(self) -> None:
        assert Vector2(-3, 4).length() == 5
