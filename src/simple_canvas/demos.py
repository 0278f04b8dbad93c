"""Small scenes that exercise the canvas through its public API."""

from __future__ import annotations

import logging
from typing import Callable

from simple_canvas.app import SimpleCanvas
from simple_canvas.core import colors
from simple_canvas.core.state import Font
from simple_canvas.services.repaint import PointerEvent
from simple_canvas.ui.constants import DEMO_FRAME_MS

logger = logging.getLogger(__name__)


def draw_shapes(canvas: SimpleCanvas) -> None:
    """One of every primitive, drawn as a single batched frame."""
    w, h = canvas.width, canvas.height
    previous = canvas.is_auto_repaint()
    canvas.set_auto_repaint(False)

    canvas.draw_rectangle(10, 10, w // 2 - 10, h // 2 - 10, colors.LIGHT_GRAY)
    canvas.draw_line(0, 0, w - 1, h - 1, colors.BLUE)
    canvas.draw_line(0, h - 1, w - 1, 0, colors.BLUE)
    canvas.draw_disc(w // 4, 3 * h // 4, min(w, h) // 8, colors.RED)
    canvas.draw_circle(3 * w // 4, h // 4, min(w, h) // 6, colors.GREEN)
    for x in range(0, w, 10):
        canvas.draw_point(x, h // 2, colors.BLACK)

    canvas.set_font(Font(size=14, weight="bold"))
    canvas.draw_string("SimpleCanvas", 12, h - 12, colors.DARK_GRAY)
    canvas.draw_string(w * h, w // 2 + 12, h - 12)

    canvas.repaint()
    canvas.set_auto_repaint(previous)


def bounce(canvas: SimpleCanvas, frames: int = 200, radius: int = 15) -> None:
    """Animate a ball bouncing around the canvas using draw/pause/draw."""
    w, h = canvas.width, canvas.height
    background = canvas.config.background
    x, y = radius + 1, radius + 1
    vx, vy = 4, 3

    previous = canvas.is_auto_repaint()
    canvas.set_auto_repaint(False)
    for _ in range(frames):
        canvas.draw_rectangle(0, 0, w, h, background)
        canvas.draw_disc(x, y, radius, colors.ORANGE)
        canvas.repaint()
        canvas.pause(DEMO_FRAME_MS)

        x += vx
        y += vy
        if x - radius < 0 or x + radius >= w:
            vx = -vx
        if y - radius < 0 or y + radius >= h:
            vy = -vy
    canvas.set_auto_repaint(previous)


def _show(canvas: SimpleCanvas) -> None:
    """Flush now unless auto-repaint already did."""
    if not canvas.is_auto_repaint():
        canvas.repaint()


def rings(canvas: SimpleCanvas, frames: int = 60) -> None:
    """Concentric rings that grow one step per frame.

    In manual mode each frame is repainted explicitly.
    """
    cx, cy = canvas.width // 2, canvas.height // 2
    palette = [colors.RED, colors.ORANGE, colors.YELLOW, colors.GREEN, colors.BLUE, colors.MAGENTA]
    max_r = min(cx, cy)
    for step in range(frames):
        r = 5 + (step * 10) % max(1, max_r)
        canvas.draw_circle(cx, cy, r, palette[step % len(palette)])
        _show(canvas)
        canvas.pause(DEMO_FRAME_MS)


def scribble(canvas: SimpleCanvas) -> None:
    """Draw wherever the pointer moves; click to clear.

    Each stroke is shown right away, also in manual mode.
    """
    background = canvas.config.background

    def on_move(event: PointerEvent) -> None:
        canvas.draw_disc(event.x, event.y, 3, colors.BLACK)
        _show(canvas)

    def on_click(event: PointerEvent) -> None:
        logger.info("Clearing canvas after click at (%d, %d)", event.x, event.y)
        canvas.draw_rectangle(0, 0, canvas.width, canvas.height, background)
        _show(canvas)

    canvas.add_mouse_motion_listener(on_move)
    canvas.add_mouse_listener(on_click)


DEMOS: dict[str, Callable[..., None]] = {
    "shapes": draw_shapes,
    "bounce": bounce,
    "rings": rings,
    "scribble": scribble,
}
