"""Frame driver - per-refresh loop, start hooks and step ordering."""
from __future__ import annotations

from datetime import datetime
from typing import Callable

from tick_dial.canvas import Canvas
from tick_dial.clock import FrameClock
from tick_dial.config import DialConfig
from tick_dial.steps import (
    make_face_step,
    make_hands_step,
    make_ticks_step,
    make_timer_step,
)
from tick_dial.timer import TimerState
from tick_dial.types import FrameScheduler, Step


class FrameDriver:
    """Runs the registered steps once per display refresh.

    Each frame clears the whole surface, runs the steps in registration
    order and asks the scheduler for the next frame. The loop has no stop
    switch; it ends when the host stops calling back.
    """

    def __init__(
        self,
        canvas: Canvas,
        scheduler: FrameScheduler,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._canvas = canvas
        self._scheduler = scheduler
        self._now = now
        self._clock = FrameClock()
        self._steps: list[Step] = []
        self._start_hooks: list[Callable[[Canvas], None]] = []
        self._started = False

    @property
    def canvas(self) -> Canvas:
        return self._canvas

    @property
    def clock(self) -> FrameClock:
        return self._clock

    def add_step(self, step: Step) -> None:
        self._steps.append(step)

    def on_start(self, hook: Callable[[Canvas], None]) -> None:
        self._start_hooks.append(hook)

    def start(self) -> None:
        """Run start hooks once and schedule the first frame."""
        if self._started:
            return
        self._started = True
        for hook in self._start_hooks:
            hook(self._canvas)
        self._scheduler.request_frame(self.frame)

    def frame(self, timestamp: float) -> None:
        self._clock.advance(timestamp)
        ctx = self._clock.context(self._now())
        canvas = self._canvas
        canvas.clear()
        for step in self._steps:
            step(canvas, ctx)
        self._scheduler.request_frame(self.frame)


def build_dial_driver(
    canvas: Canvas,
    scheduler: FrameScheduler,
    config: DialConfig,
    timer: TimerState,
    now: Callable[[], datetime] = datetime.now,
    on_complete: Callable[[TimerState], None] | None = None,
) -> FrameDriver:
    """Wire the dial steps in drawing order: face, wedge, ticks, hands."""
    driver = FrameDriver(canvas, scheduler, now=now)
    driver.add_step(make_face_step(config))
    driver.add_step(make_timer_step(config, timer, on_complete))
    driver.add_step(make_ticks_step(config))
    driver.add_step(make_hands_step(config))
    return driver
