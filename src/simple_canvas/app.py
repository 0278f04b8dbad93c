"""SimpleCanvas: a fixed-size window you draw pixels, shapes and text onto.

Typical use:

    canvas = SimpleCanvas("Demo", 300, 200, "white")
    canvas.draw_disc(150, 100, 40, "red")
    canvas.draw_string("hello", 10, 190, "black")

Every drawing call paints into an offscreen buffer first. In auto-repaint
mode (the default) the buffer is pushed to the display after each call; in
manual mode nothing is shown until ``repaint()`` is called, which lets a
whole scene appear at once.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

from simple_canvas.config import CanvasConfig
from simple_canvas.core.colors import RGB, ColorLike
from simple_canvas.core.shapes import draw_circle, draw_disc
from simple_canvas.core.state import DrawingState, Font
from simple_canvas.core.surface import PixelSurface
from simple_canvas.services.repaint import Damage, DisplaySink, PointerHandler, RepaintScheduler
from simple_canvas.ui.constants import DEFAULT_BACKGROUND, DEFAULT_HEIGHT, DEFAULT_TITLE, DEFAULT_WIDTH


class SimpleCanvas:
    """Drawing surface with automatic or manual repainting.

    Think of this class as three pieces glued together:
    - a PixelSurface holding the pixels,
    - a DrawingState holding the active color and font,
    - a RepaintScheduler deciding when the display sees the pixels.

    The display itself is injected. Without one a TkDisplay window is opened;
    pass a HeadlessDisplay to draw without a screen.
    """

    def __init__(
        self,
        title: str = DEFAULT_TITLE,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        background: ColorLike = DEFAULT_BACKGROUND,
        *,
        display: DisplaySink | None = None,
        logger: logging.Logger | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = CanvasConfig.build(title=title, width=width, height=height, background=background)
        self._logger = logger or logging.getLogger(__name__)
        self._sleep = sleep

        if display is None:
            # Imported here so headless users never touch tkinter.
            from simple_canvas.ui.display import TkDisplay

            display = TkDisplay()
        self._display = display

        self._surface = PixelSurface(self.config.width, self.config.height, self.config.background)
        self._state = DrawingState()
        self._scheduler = RepaintScheduler(self._surface.snapshot, self._display, auto_repaint=True)

        self._display.open(self.config.title, self.config.width, self.config.height)
        self._scheduler.repaint()
        self._logger.debug(
            "Opened %dx%d canvas %r",
            self.config.width,
            self.config.height,
            self.config.title,
        )

    @classmethod
    def from_config(cls, config: CanvasConfig, **kwargs: Any) -> "SimpleCanvas":
        return cls(config.title, config.width, config.height, config.background, **kwargs)

    @property
    def width(self) -> int:
        return self._surface.width

    @property
    def height(self) -> int:
        return self._surface.height

    # ------------------------------
    # Drawing
    # ------------------------------
    def _activate(self, color: ColorLike | None) -> RGB:
        """Make ``color`` the foreground (when given) and return the active color."""
        if color is not None:
            self._state.set_foreground_color(color)
        return self._state.get_foreground_color()

    def _mark(self, x0: int, y0: int, x1: int, y1: int) -> None:
        """Tell the display which half-open area the last call painted."""
        if x1 > x0 and y1 > y0:
            self._display.mark_damage(Damage(x0, y0, x1, y1))

    def draw_point(self, x: int, y: int, color: ColorLike | None = None) -> None:
        """Draw a single pixel at x,y."""
        self.draw_line(x, y, x, y, color)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: ColorLike | None = None) -> None:
        """Draw a line from x1,y1 to x2,y2, both ends included."""
        rgb = self._activate(color)
        self._surface.draw_line(x1, y1, x2, y2, rgb)
        self._mark(min(x1, x2), min(y1, y2), max(x1, x2) + 1, max(y1, y2) + 1)
        self._scheduler.after_mutation()

    def draw_rectangle(self, x1: int, y1: int, x2: int, y2: int, color: ColorLike | None = None) -> None:
        """Fill the axis-aligned rectangle between two opposite corners.

        The far edge is exclusive: ``draw_rectangle(0, 0, 3, 2)`` fills a
        3x2 block, and equal x or y coordinates fill nothing.
        """
        rgb = self._activate(color)
        self._surface.fill_rect(x1, y1, x2, y2, rgb)
        self._mark(min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))
        self._scheduler.after_mutation()

    def draw_disc(self, x: int, y: int, r: int, color: ColorLike | None = None) -> None:
        """Draw a filled disc centred at x,y with radius r."""
        rgb = self._activate(color)
        draw_disc(self._surface, x, y, r, rgb)
        self._mark(x - r, y - r, x + r + 1, y + r + 1)
        self._scheduler.after_mutation()

    def draw_circle(self, x: int, y: int, r: int, color: ColorLike | None = None) -> None:
        """Draw a 5-pixel-thick ring centred at x,y with outer radius r.

        Radii below 5 produce a disc-like blob rather than a thin ring.
        """
        rgb = self._activate(color)
        draw_circle(self._surface, x, y, r, rgb)
        self._mark(x - r, y - r, x + r + 1, y + r + 1)
        self._scheduler.after_mutation()

    def draw_string(self, text: str | int | float, x: int, y: int, color: ColorLike | None = None) -> None:
        """Write ``text`` (or a number) with its baseline starting at x,y."""
        rgb = self._activate(color)
        self._display.draw_text(str(text), x, y, rgb, self._state.get_font())
        self._scheduler.after_mutation()

    # ------------------------------
    # Drawing state
    # ------------------------------
    def set_foreground_color(self, color: ColorLike) -> None:
        self._state.set_foreground_color(color)

    def get_foreground_color(self) -> RGB:
        return self._state.get_foreground_color()

    def set_font(self, font: Font) -> None:
        self._state.set_font(font)

    def get_font(self) -> Font:
        return self._state.get_font()

    def get_pixel(self, x: int, y: int) -> RGB:
        return self._surface.get_pixel(x, y)

    # ------------------------------
    # Repainting
    # ------------------------------
    def set_auto_repaint(self, auto_repaint: bool) -> None:
        """Switch between automatic and manual repainting (never flushes)."""
        self._scheduler.set_auto_repaint(auto_repaint)

    def is_auto_repaint(self) -> bool:
        return self._scheduler.auto_repaint

    def repaint(self) -> None:
        """Push the current buffer to the display right away."""
        self._scheduler.repaint()

    def pause(self, millis: int) -> None:
        """Block the calling thread for ``millis`` milliseconds.

        Used for simple animations: draw, pause, draw again. An
        ``InterruptedError`` from the sleep callable is logged and otherwise
        ignored. ``time.sleep`` itself never raises it, since Python retries
        interrupted sleeps (PEP 475); only an injected ``sleep`` can.
        """
        try:
            self._sleep(max(0, millis) / 1000.0)
        except InterruptedError as exc:
            self._logger.warning("Interruption in SimpleCanvas pause: %s", exc)

    # ------------------------------
    # Display passthrough
    # ------------------------------
    def add_mouse_listener(self, handler: PointerHandler) -> None:
        """Call ``handler(PointerEvent)`` whenever the canvas is clicked."""
        self._display.add_click_handler(handler)

    def add_mouse_motion_listener(self, handler: PointerHandler) -> None:
        """Call ``handler(PointerEvent)`` whenever the pointer moves over the canvas."""
        self._display.add_motion_handler(handler)

    def get_frame(self) -> Any:
        """The display's native window handle (a ``tk.Tk`` for TkDisplay)."""
        return self._display.handle()

    def get_graphic(self) -> PixelSurface:
        """The raw pixel surface, for advanced use only."""
        return self._surface

    def close(self) -> None:
        self._display.close()
