"""pygame window hosting the dial: frame scheduling, input and fullscreen."""
from __future__ import annotations

import logging

import pygame

from tick_dial import ClickDebouncer, DialConfig, TimerState, Vector2, Viewport
from tick_dial.clicks import DOUBLE
from tick_dial.pygame_canvas import PygameCanvas
from tick_dial.types import FrameCallback

from ui.constants import BG_COLOR, LEFT_BUTTON

logger = logging.getLogger("tick_dial.host")


class PygameHost:
    """Frame scheduler and event source for one pygame window.

    The canvas is square and centered in the window; pointer positions
    are made relative to its top-left corner before being mapped to
    logical units.
    """

    def __init__(
        self,
        screen: pygame.Surface,
        canvas: PygameCanvas,
        viewport: Viewport,
        timer: TimerState,
        config: DialConfig,
    ) -> None:
        self.screen = screen
        self.canvas = canvas
        self.viewport = viewport
        self.timer = timer
        self.config = config
        self.running = True
        self._debouncer = ClickDebouncer(config.click_debounce_ms)
        self._pending: FrameCallback | None = None

    # -- FrameScheduler --------------------------------------------------

    def request_frame(self, callback: FrameCallback) -> None:
        self._pending = callback

    def pump_frame(self) -> None:
        callback, self._pending = self._pending, None
        if callback is not None:
            callback(float(pygame.time.get_ticks()))

    # -- Viewport --------------------------------------------------------

    def fit(self, canvas: PygameCanvas | None = None) -> None:
        """Resize the canvas to the current window. Usable as a start hook."""
        surface = pygame.display.get_surface()
        if surface is not None:
            self.screen = surface
        win_w, win_h = pygame.display.get_window_size()
        surf_w, _ = self.screen.get_size()
        pixel_ratio = surf_w / win_w if win_w else 1.0
        self.viewport.resize(self.canvas, win_w, win_h, pixel_ratio)

    def canvas_offset(self) -> Vector2:
        """Top-left corner of the canvas in window coordinates."""
        win_w, win_h = pygame.display.get_window_size()
        side = self.viewport.display_size.x
        return Vector2((win_w - side) / 2, (win_h - side) / 2)

    def toggle_fullscreen(self) -> None:
        try:
            ok = pygame.display.toggle_fullscreen()
        except pygame.error as exc:
            logger.warning("Fullscreen toggle failed: %s", exc)
            return
        if not ok:
            logger.warning("Fullscreen toggle not supported here")
            return
        self.fit()

    # -- Events ----------------------------------------------------------

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False

        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_F11:
                self.toggle_fullscreen()

        elif event.type == pygame.VIDEORESIZE:
            self.fit()

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_BUTTON:
            now = pygame.time.get_ticks()
            if self._debouncer.press(Vector2(*event.pos), now) == DOUBLE:
                self.toggle_fullscreen()

    def poll_clicks(self) -> None:
        pos = self._debouncer.poll(pygame.time.get_ticks())
        if pos is None:
            return
        point = self.viewport.to_logical(pos, self.canvas_offset())
        self.timer.handle_click(point, self.config)

    def present(self) -> None:
        self.screen.fill(BG_COLOR)
        surf_w, surf_h = self.screen.get_size()
        side = self.canvas.width
        self.screen.blit(self.canvas.surface, ((surf_w - side) // 2, (surf_h - side) // 2))
        pygame.display.flip()
