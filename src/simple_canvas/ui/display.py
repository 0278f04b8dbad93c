"""tkinter-backed display for SimpleCanvas.

The Tk event loop runs on its own daemon thread so the drawing script keeps
the calling thread (and can ``pause`` between frames without freezing the
window). Every Tk call happens on that thread: the drawing side only puts
frames on a queue, and the Tk side polls the queue with ``root.after``.
"""

from __future__ import annotations

import logging
import tkinter as tk
from dataclasses import dataclass, field
from queue import Empty, Queue
from threading import Event, Lock, Thread

import numpy as np

from simple_canvas.core.colors import RGB
from simple_canvas.core.state import Font
from simple_canvas.services.repaint import Damage, DrawEvent, PointerEvent, PointerHandler, TextItem
from simple_canvas.ui.canvas import apply_draw_events, blit_frame
from simple_canvas.ui.constants import FRAME_POLL_MS, WINDOW_READY_TIMEOUT_S

logger = logging.getLogger(__name__)


@dataclass
class PendingFrame:
    """Pixels plus the text placements and painted areas since the previous blit."""

    pixels: np.ndarray
    events: list[DrawEvent] = field(default_factory=list)


def merge_pending(frames: list[PendingFrame]) -> PendingFrame | None:
    """Collapse queued frames into one.

    Only the newest pixels matter, but draw events from every frame are kept
    in order: each text adds a canvas item and each painted area may remove one.
    """
    if not frames:
        return None
    events: list[DrawEvent] = []
    for frame in frames:
        events.extend(frame.events)
    return PendingFrame(pixels=frames[-1].pixels, events=events)


class TkDisplay:
    """Window that shows frames handed over by a RepaintScheduler."""

    def __init__(self, poll_ms: int = FRAME_POLL_MS, ready_timeout: float = WINDOW_READY_TIMEOUT_S) -> None:
        self._poll_ms = poll_ms
        self._ready_timeout = ready_timeout
        self._frames: Queue[PendingFrame] = Queue()
        self._pending_events: list[DrawEvent] = []
        self._events_lock = Lock()
        self._has_text = False
        self._click_handlers: list[PointerHandler] = []
        self._motion_handlers: list[PointerHandler] = []
        self._ready = Event()
        self._stop_event = Event()
        self._thread: Thread | None = None
        self._root: tk.Tk | None = None
        self._canvas: tk.Canvas | None = None

    # ------------------------------
    # DisplaySink API (caller thread)
    # ------------------------------
    def open(self, title: str, width: int, height: int) -> None:
        """Start the Tk thread once and wait for the window to exist."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop_event.clear()
        self._ready.clear()
        self._thread = Thread(target=self._run_loop, args=(title, width, height), daemon=True)
        self._thread.start()
        if not self._ready.wait(self._ready_timeout):
            logger.warning("Display window did not come up within %.1fs", self._ready_timeout)

    def blit(self, frame: np.ndarray) -> None:
        """Queue a frame; returns immediately.

        Once the window is gone nothing drains the queue, so frames are
        dropped instead.
        """
        with self._events_lock:
            events, self._pending_events = self._pending_events, []
        if self._stop_event.is_set():
            return
        self._frames.put(PendingFrame(pixels=frame, events=events))

    def draw_text(self, text: str, x: int, y: int, color: RGB, font: Font) -> None:
        """Stage a text item; it becomes visible with the next blit."""
        if self._stop_event.is_set():
            return
        with self._events_lock:
            self._has_text = True
            self._pending_events.append(TextItem(text=text, x=x, y=y, color=color, font=font))

    def mark_damage(self, damage: Damage) -> None:
        """Stage a painted area so text drawn before it gets covered.

        Until some text has been drawn there is nothing to cover, and the
        area is not recorded.
        """
        if self._stop_event.is_set():
            return
        with self._events_lock:
            if self._has_text:
                self._pending_events.append(damage)

    def add_click_handler(self, handler: PointerHandler) -> None:
        self._click_handlers.append(handler)

    def add_motion_handler(self, handler: PointerHandler) -> None:
        self._motion_handlers.append(handler)

    def handle(self) -> tk.Tk | None:
        """The Tk root window (None until the window is up)."""
        return self._root

    def close(self) -> None:
        """Ask the Tk thread to destroy the window."""
        self._stop_event.set()

    def is_stopped(self) -> bool:
        return self._stop_event.is_set()

    def join(self, timeout: float | None = None) -> None:
        """Wait until the window has been closed by the user or by close()."""
        if self._thread is not None:
            self._thread.join(timeout)

    # ------------------------------
    # Tk thread
    # ------------------------------
    def _run_loop(self, title: str, width: int, height: int) -> None:
        try:
            root = tk.Tk()
        except tk.TclError:
            logger.exception("Could not open a Tk window")
            self._stop_event.set()
            self._discard_pending()
            self._ready.set()
            return

        root.title(title)
        root.resizable(False, False)
        canvas = tk.Canvas(root, width=width, height=height, highlightthickness=0, borderwidth=0)
        canvas.pack()
        canvas.bind("<Button>", self._on_click)
        canvas.bind("<Motion>", self._on_motion)
        root.protocol("WM_DELETE_WINDOW", self._on_close)

        self._root = root
        self._canvas = canvas
        self._ready.set()
        root.after(self._poll_ms, self._poll_frames)
        try:
            root.mainloop()
        finally:
            self._stop_event.set()
            self._root = None
            self._canvas = None
            self._discard_pending()

    def _drain(self) -> list[PendingFrame]:
        frames: list[PendingFrame] = []
        try:
            while True:
                frames.append(self._frames.get_nowait())
        except Empty:
            return frames

    def _discard_pending(self) -> None:
        """Release queued frames and staged events once the window is gone."""
        self._drain()
        with self._events_lock:
            self._pending_events = []

    def _poll_frames(self) -> None:
        """Apply the newest queued frame, then reschedule."""
        root = self._root
        if root is None:
            return
        if self._stop_event.is_set():
            root.destroy()
            return

        merged = merge_pending(self._drain())
        if merged is not None and self._canvas is not None:
            blit_frame(self._canvas, merged.pixels)
            apply_draw_events(self._canvas, merged.events)
        root.after(self._poll_ms, self._poll_frames)

    def _on_close(self) -> None:
        self._stop_event.set()
        if self._root is not None:
            self._root.destroy()

    def _on_click(self, event: tk.Event) -> None:
        button = event.num if isinstance(event.num, int) else 0
        self._dispatch(self._click_handlers, PointerEvent(x=event.x, y=event.y, button=button))

    def _on_motion(self, event: tk.Event) -> None:
        self._dispatch(self._motion_handlers, PointerEvent(x=event.x, y=event.y))

    def _dispatch(self, handlers: list[PointerHandler], pointer: PointerEvent) -> None:
        for handler in list(handlers):
            handler(pointer)
