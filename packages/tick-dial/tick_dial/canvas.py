"""Drawing surface protocol and an in-memory recording implementation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from tick_dial.styles import (
    DEFAULT_LINE_WIDTH,
    DEFAULT_SHADOW_COLOR,
    DEFAULT_STROKE_STYLE,
    Color,
)


@runtime_checkable
class Canvas(Protocol):
    """The 2D drawing context the dial renders onto.

    Mirrors an HTML canvas context: paths are built in the current
    transform, painted with ``fill``/``stroke`` using the paint attributes
    in force at that moment, and ``save``/``restore`` push and pop both
    the transform and the paint attributes. ``resize`` resets the
    transform to identity.
    """

    fill_style: Color
    stroke_style: Color
    line_width: float
    shadow_color: Color
    shadow_blur: float
    shadow_offset_x: float
    shadow_offset_y: float

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def resize(self, width: int, height: int) -> None: ...

    def clear(self) -> None: ...

    def begin_path(self) -> None: ...

    def close_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool = False,
    ) -> None: ...

    def fill(self) -> None: ...

    def stroke(self) -> None: ...

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def translate(self, x: float, y: float) -> None: ...

    def rotate(self, angle: float) -> None: ...

    def scale(self, x: float, y: float) -> None: ...


_PAINT_ATTRS = (
    "fill_style",
    "stroke_style",
    "line_width",
    "shadow_color",
    "shadow_blur",
    "shadow_offset_x",
    "shadow_offset_y",
)


@dataclass
class Call:
    """One recorded canvas call. ``paint`` is set for fill and stroke."""

    name: str
    args: tuple[Any, ...] = ()
    paint: dict[str, Any] = field(default_factory=dict)


class RecordingCanvas:
    """Deterministic canvas that records calls instead of drawing.

    Conforms to the Canvas protocol. Tracks the save depth and the net
    transform calls so callers can assert that brackets are balanced.
    """

    def __init__(self, width: int = 1000, height: int = 1000) -> None:
        self._width = width
        self._height = height
        self.calls: list[Call] = []
        self.depth = 0
        self._stack: list[dict[str, Any]] = []
        self._reset_paint()

    def _reset_paint(self) -> None:
        self.fill_style: Color = (0, 0, 0)
        self.stroke_style: Color = DEFAULT_STROKE_STYLE
        self.line_width: float = DEFAULT_LINE_WIDTH
        self.shadow_color: Color = DEFAULT_SHADOW_COLOR
        self.shadow_blur: float = 0.0
        self.shadow_offset_x: float = 0.0
        self.shadow_offset_y: float = 0.0

    def _paint(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in _PAINT_ATTRS}

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append(Call(name, args))

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def resize(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._stack.clear()
        self.depth = 0
        self._reset_paint()
        self._record("resize", width, height)

    def clear(self) -> None:
        self._record("clear", self._width, self._height)

    def begin_path(self) -> None:
        self._record("begin_path")

    def close_path(self) -> None:
        self._record("close_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool = False,
    ) -> None:
        self._record("arc", x, y, radius, start_angle, end_angle, anticlockwise)

    def fill(self) -> None:
        self.calls.append(Call("fill", paint=self._paint()))

    def stroke(self) -> None:
        self.calls.append(Call("stroke", paint=self._paint()))

    def save(self) -> None:
        self._stack.append(self._paint())
        self.depth += 1
        self._record("save")

    def restore(self) -> None:
        self._record("restore")
        if not self._stack:
            return
        for name, value in self._stack.pop().items():
            setattr(self, name, value)
        self.depth -= 1

    def translate(self, x: float, y: float) -> None:
        self._record("translate", x, y)

    def rotate(self, angle: float) -> None:
        self._record("rotate", angle)

    def scale(self, x: float, y: float) -> None:
        self._record("scale", x, y)

    # -- Query helpers -------------------------------------------------

    def names(self) -> list[str]:
        return [call.name for call in self.calls]

    def find(self, name: str) -> list[Call]:
        return [call for call in self.calls if call.name == name]

    def reset(self) -> None:
        """Forget recorded calls, keeping size and paint state."""
        self.calls.clear()
