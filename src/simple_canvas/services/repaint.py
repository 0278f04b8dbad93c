"""Repaint scheduling and the display capability it pushes frames into.

This module owns the "when do we blit" decision. It knows nothing about
tkinter: anything implementing ``DisplaySink`` can receive frames, which is
what lets the drawing code run and be tested without a screen.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Protocol, Union

import numpy as np

from simple_canvas.core.colors import RGB
from simple_canvas.core.state import Font

# Frames a HeadlessDisplay keeps before dropping the oldest.
HEADLESS_FRAME_LIMIT = 32


@dataclass(frozen=True)
class PointerEvent:
    """Pointer position in canvas pixels plus the pressed button (0 for none)."""

    x: int
    y: int
    button: int = 0


PointerHandler = Callable[[PointerEvent], None]


@dataclass(frozen=True)
class TextItem:
    """One text placement recorded by a display."""

    text: str
    x: int
    y: int
    color: RGB
    font: Font


@dataclass(frozen=True)
class Damage:
    """Half-open pixel rectangle ``[x0, x1) x [y0, y1)`` painted by one draw call."""

    x0: int
    y0: int
    x1: int
    y1: int


# Text placements and painted areas, in drawing order.
DrawEvent = Union[TextItem, Damage]


class DisplaySink(Protocol):
    """Everything the canvas needs from a visible surface."""

    def open(self, title: str, width: int, height: int) -> None: ...

    def blit(self, frame: np.ndarray) -> None: ...

    def draw_text(self, text: str, x: int, y: int, color: RGB, font: Font) -> None: ...

    def mark_damage(self, damage: Damage) -> None: ...

    def add_click_handler(self, handler: PointerHandler) -> None: ...

    def add_motion_handler(self, handler: PointerHandler) -> None: ...

    def handle(self) -> Any: ...

    def close(self) -> None: ...


@dataclass
class HeadlessDisplay:
    """In-memory display that records what it was asked to show.

    Useful for scripts that only need the pixel buffer, and for tests that
    assert on flush counts without a window. Only the newest ``max_frames``
    frames are kept; ``blit_count`` counts every blit.
    """

    title: str | None = None
    size: tuple[int, int] | None = None
    max_frames: int = HEADLESS_FRAME_LIMIT
    frames: deque = field(default_factory=deque)
    blit_count: int = 0
    texts: list[TextItem] = field(default_factory=list)
    damage: deque = field(default_factory=deque)
    click_handlers: list[PointerHandler] = field(default_factory=list)
    motion_handlers: list[PointerHandler] = field(default_factory=list)
    is_open: bool = False

    def __post_init__(self) -> None:
        self.frames = deque(self.frames, maxlen=self.max_frames)
        self.damage = deque(self.damage, maxlen=self.max_frames)

    def open(self, title: str, width: int, height: int) -> None:
        self.title = title
        self.size = (width, height)
        self.is_open = True

    def blit(self, frame: np.ndarray) -> None:
        self.frames.append(frame)
        self.blit_count += 1

    def draw_text(self, text: str, x: int, y: int, color: RGB, font: Font) -> None:
        self.texts.append(TextItem(text=text, x=x, y=y, color=color, font=font))

    def mark_damage(self, damage: Damage) -> None:
        self.damage.append(damage)

    def add_click_handler(self, handler: PointerHandler) -> None:
        self.click_handlers.append(handler)

    def add_motion_handler(self, handler: PointerHandler) -> None:
        self.motion_handlers.append(handler)

    def handle(self) -> "HeadlessDisplay":
        return self

    def close(self) -> None:
        self.is_open = False

    @property
    def last_frame(self) -> np.ndarray | None:
        return self.frames[-1] if self.frames else None

    def dispatch_click(self, event: PointerEvent) -> None:
        """Feed a synthetic click to registered handlers."""
        for handler in list(self.click_handlers):
            handler(event)

    def dispatch_motion(self, event: PointerEvent) -> None:
        for handler in list(self.motion_handlers):
            handler(event)


class RepaintScheduler:
    """Decide after each mutation whether the buffer goes to the display.

    Auto mode flushes at the end of every mutating call. Manual mode only
    marks the buffer dirty until ``repaint()`` is called. Switching modes
    never flushes on its own.
    """

    def __init__(
        self,
        snapshot: Callable[[], np.ndarray],
        sink: DisplaySink,
        auto_repaint: bool = True,
    ) -> None:
        self._snapshot = snapshot
        self._sink = sink
        self.auto_repaint = auto_repaint
        self.dirty = False
        self.flush_count = 0

    def set_auto_repaint(self, auto_repaint: bool) -> None:
        self.auto_repaint = bool(auto_repaint)

    def after_mutation(self) -> None:
        """Called once at the end of every mutating draw call."""
        self.dirty = True
        if self.auto_repaint:
            self.repaint()

    def repaint(self) -> None:
        """Hand a snapshot of the current buffer to the display.

        The sink receives a copy, so draws issued after this call never leak
        into a frame that is still waiting to be shown.
        """
        self._sink.blit(self._snapshot())
        self.flush_count += 1
        self.dirty = False
