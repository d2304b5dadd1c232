"""Dial Clock - Analog clock with a click-to-set radial timer.

Exercises tick-dial: frame driver, viewport scaling, timer state machine.

Controls:
  Click         Start the timer from the tick under the cursor
                (12 o'clock = 60 min, one tick counter-clockwise = 1 min);
                click anywhere once it has finished to clear it
  Double-click  Toggle fullscreen
  F11           Toggle fullscreen
  Esc           Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from tick_dial import COMPLETED, DialConfig, TimerState, Viewport, build_dial_driver
from tick_dial.logging_config import setup_logging
from tick_dial.pygame_canvas import PygameCanvas

from ui.constants import FPS, TITLE, WINDOW_H, WINDOW_W
from ui.host import PygameHost


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Dial Clock - tick-dial demo")
    p.add_argument("--debug", action="store_true", help="Verbose logging")
    p.add_argument("--log-file", type=str, default=None,
                   metavar="FILE", help="Also write the log to FILE")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    setup_logging(logging.DEBUG if args.debug else logging.INFO, args.log_file)

    config = DialConfig()
    timer = TimerState()

    pygame.init()
    screen = pygame.display.set_mode((WINDOW_W, WINDOW_H), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()

    canvas = PygameCanvas(WINDOW_W, WINDOW_H)
    viewport = Viewport(config.logical_size)
    host = PygameHost(screen, canvas, viewport, timer, config)

    driver = build_dial_driver(canvas, host, config, timer)
    driver.on_start(host.fit)
    driver.start()
    caption = TITLE

    while host.running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            host.handle_event(event)
        host.poll_clicks()

        # --- Frame ---
        host.pump_frame()
        host.present()

        title = f"{TITLE} - time's up" if timer.phase == COMPLETED else TITLE
        if title != caption:
            pygame.display.set_caption(title)
            caption = title

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
