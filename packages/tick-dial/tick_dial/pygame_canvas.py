"""Canvas implementation on a pygame Surface."""
from __future__ import annotations

import math
from typing import Any

import pygame

from tick_dial.styles import (
    DEFAULT_LINE_WIDTH,
    DEFAULT_SHADOW_COLOR,
    DEFAULT_STROKE_STYLE,
    Color,
)

Point = tuple[float, float]
Matrix = tuple[float, float, float, float, float, float]

_IDENTITY: Matrix = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)
_TAU = math.pi * 2


def _multiply(m: Matrix, n: Matrix) -> Matrix:
    a1, b1, c1, d1, e1, f1 = m
    a2, b2, c2, d2, e2, f2 = n
    return (
        a1 * a2 + c1 * b2,
        b1 * a2 + d1 * b2,
        a1 * c2 + c1 * d2,
        b1 * c2 + d1 * d2,
        a1 * e2 + c1 * f2 + e1,
        b1 * e2 + d1 * f2 + f1,
    )


def _alpha(color: Color) -> int:
    return color[3] if len(color) > 3 else 255


class _Shape:
    """Device-space polygons and discs produced by a fill or stroke."""

    def __init__(self) -> None:
        self.polygons: list[list[Point]] = []
        self.discs: list[tuple[Point, float]] = []

    def __bool__(self) -> bool:
        return bool(self.polygons or self.discs)

    def bounds(self) -> pygame.Rect:
        xs: list[float] = []
        ys: list[float] = []
        for polygon in self.polygons:
            xs.extend(p[0] for p in polygon)
            ys.extend(p[1] for p in polygon)
        for (cx, cy), r in self.discs:
            xs.extend((cx - r, cx + r))
            ys.extend((cy - r, cy + r))
        left, top = math.floor(min(xs)), math.floor(min(ys))
        right, bottom = math.ceil(max(xs)), math.ceil(max(ys))
        return pygame.Rect(left, top, right - left + 1, bottom - top + 1)

    def draw(self, target: pygame.Surface, color: Color, origin: Point) -> None:
        ox, oy = origin
        for polygon in self.polygons:
            pygame.draw.polygon(target, color, [(x + ox, y + oy) for x, y in polygon])
        for (cx, cy), r in self.discs:
            pygame.draw.circle(target, color, (cx + ox, cy + oy), r)


class PygameCanvas:
    """The Canvas protocol rasterised with pygame.draw.

    Path points are transformed when they are added, so later transform
    changes do not move an open path. Arcs are flattened to
    ``arc_segments`` segments per full turn. Shadow offset and blur are
    in device pixels and ignore the transform.
    """

    def __init__(self, width: int, height: int, arc_segments: int = 120) -> None:
        self._arc_segments = arc_segments
        self._surface = pygame.Surface((width, height), pygame.SRCALPHA)
        self._matrix: Matrix = _IDENTITY
        self._stack: list[tuple[Matrix, dict[str, Any]]] = []
        self._subpaths: list[list[Point]] = []
        self._closed: list[bool] = []
        self._reset_paint()

    def _reset_paint(self) -> None:
        self.fill_style: Color = (0, 0, 0)
        self.stroke_style: Color = DEFAULT_STROKE_STYLE
        self.line_width: float = DEFAULT_LINE_WIDTH
        self.shadow_color: Color = DEFAULT_SHADOW_COLOR
        self.shadow_blur: float = 0.0
        self.shadow_offset_x: float = 0.0
        self.shadow_offset_y: float = 0.0

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    @property
    def matrix(self) -> Matrix:
        return self._matrix

    @property
    def width(self) -> int:
        return self._surface.get_width()

    @property
    def height(self) -> int:
        return self._surface.get_height()

    def resize(self, width: int, height: int) -> None:
        self._surface = pygame.Surface((width, height), pygame.SRCALPHA)
        self._matrix = _IDENTITY
        self._stack.clear()
        self.begin_path()
        self._reset_paint()

    def clear(self) -> None:
        self._surface.fill((0, 0, 0, 0))

    # -- Transform -----------------------------------------------------

    def save(self) -> None:
        paint = {
            "fill_style": self.fill_style,
            "stroke_style": self.stroke_style,
            "line_width": self.line_width,
            "shadow_color": self.shadow_color,
            "shadow_blur": self.shadow_blur,
            "shadow_offset_x": self.shadow_offset_x,
            "shadow_offset_y": self.shadow_offset_y,
        }
        self._stack.append((self._matrix, paint))

    def restore(self) -> None:
        if not self._stack:
            return
        self._matrix, paint = self._stack.pop()
        for name, value in paint.items():
            setattr(self, name, value)

    def translate(self, x: float, y: float) -> None:
        self._matrix = _multiply(self._matrix, (1.0, 0.0, 0.0, 1.0, x, y))

    def rotate(self, angle: float) -> None:
        cos, sin = math.cos(angle), math.sin(angle)
        self._matrix = _multiply(self._matrix, (cos, sin, -sin, cos, 0.0, 0.0))

    def scale(self, x: float, y: float) -> None:
        self._matrix = _multiply(self._matrix, (x, 0.0, 0.0, y, 0.0, 0.0))

    def _apply(self, x: float, y: float) -> Point:
        a, b, c, d, e, f = self._matrix
        return (a * x + c * y + e, b * x + d * y + f)

    # -- Paths ---------------------------------------------------------

    def begin_path(self) -> None:
        self._subpaths = []
        self._closed = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append([self._apply(x, y)])
        self._closed.append(False)

    def line_to(self, x: float, y: float) -> None:
        if not self._subpaths:
            self.move_to(x, y)
            return
        self._subpaths[-1].append(self._apply(x, y))

    def close_path(self) -> None:
        if not self._subpaths:
            return
        self._closed[-1] = True
        self._subpaths.append([self._subpaths[-1][0]])
        self._closed.append(False)

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool = False,
    ) -> None:
        if radius < 0:
            raise ValueError("radius must not be negative")
        sweep = end_angle - start_angle
        if not anticlockwise:
            sweep = _TAU if sweep >= _TAU else sweep % _TAU
        else:
            sweep = -_TAU if -sweep >= _TAU else -((-sweep) % _TAU)

        segments = max(1, math.ceil(abs(sweep) / _TAU * self._arc_segments))
        points = [
            self._apply(
                x + radius * math.cos(start_angle + sweep * i / segments),
                y + radius * math.sin(start_angle + sweep * i / segments),
            )
            for i in range(segments + 1)
        ]
        if self._subpaths:
            self._subpaths[-1].extend(points)
        else:
            self._subpaths.append(points)
            self._closed.append(False)

    # -- Painting ------------------------------------------------------

    def fill(self) -> None:
        shape = _Shape()
        shape.polygons = [
            path for path in self._subpaths if len(path) >= 3 and _area(path) != 0
        ]
        self._paint(shape, self.fill_style)

    def stroke(self) -> None:
        a, b, c, d, _, _ = self._matrix
        half = self.line_width * math.sqrt(abs(a * d - b * c)) / 2
        shape = _Shape()
        for path, closed in zip(self._subpaths, self._closed, strict=True):
            points = path + [path[0]] if closed and len(path) > 2 else path
            for p, q in zip(points, points[1:]):
                quad = _segment_quad(p, q, half)
                if quad is not None:
                    shape.polygons.append(quad)
            if half > 1:
                joints = points[:-1] if closed else points[1:-1]
                shape.discs.extend((joint, half) for joint in joints)
        self._paint(shape, self.stroke_style)

    def _paint(self, shape: _Shape, color: Color) -> None:
        if not shape:
            return
        if _alpha(self.shadow_color) > 0 and (
            self.shadow_blur > 0 or self.shadow_offset_x or self.shadow_offset_y
        ):
            self._paint_shadow(shape)
        if _alpha(color) >= 255:
            shape.draw(self._surface, color, (0.0, 0.0))
            return
        rect = shape.bounds()
        layer = pygame.Surface(rect.size, pygame.SRCALPHA)
        shape.draw(layer, color, (-rect.x, -rect.y))
        self._surface.blit(layer, rect.topleft)

    def _paint_shadow(self, shape: _Shape) -> None:
        pad = math.ceil(self.shadow_blur) + 1
        rect = shape.bounds().inflate(pad * 2, pad * 2)
        layer = pygame.Surface(rect.size, pygame.SRCALPHA)
        shape.draw(layer, self.shadow_color, (-rect.x, -rect.y))
        if self.shadow_blur > 0:
            layer = _soften(layer, self.shadow_blur)
        self._surface.blit(
            layer, (rect.x + round(self.shadow_offset_x), rect.y + round(self.shadow_offset_y)),
        )


def _area(points: list[Point]) -> float:
    total = 0.0
    for (x0, y0), (x1, y1) in zip(points, points[1:] + points[:1]):
        total += x0 * y1 - x1 * y0
    return total / 2


def _segment_quad(p: Point, q: Point, half: float) -> list[Point] | None:
    dx, dy = q[0] - p[0], q[1] - p[1]
    length = math.hypot(dx, dy)
    if length == 0 or half <= 0:
        return None
    nx, ny = -dy / length * half, dx / length * half
    return [
        (p[0] + nx, p[1] + ny),
        (q[0] + nx, q[1] + ny),
        (q[0] - nx, q[1] - ny),
        (p[0] - nx, p[1] - ny),
    ]


def _soften(layer: pygame.Surface, blur: float) -> pygame.Surface:
    """Cheap blur: shrink by roughly the blur radius and scale back up."""
    factor = max(2, round(blur / 2))
    width, height = layer.get_size()
    small = pygame.transform.smoothscale(
        layer, (max(1, width // factor), max(1, height // factor)),
    )
    return pygame.transform.smoothscale(small, (width, height))
