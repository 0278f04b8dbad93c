"""Helpers that move numpy frames and text items onto a tk.Canvas."""

from __future__ import annotations

import tkinter as tk
from typing import Any, Callable, Iterable

import numpy as np

from simple_canvas.core.colors import to_hex
from simple_canvas.services.repaint import Damage, DrawEvent, TextItem


def encode_ppm(frame: np.ndarray) -> bytes:
    """Encode a ``(height, width, 3)`` uint8 frame as binary PPM (P6).

    Tk's photo images load PPM natively, so this avoids any image library
    between the numpy buffer and the screen.
    """
    if frame.ndim != 3 or frame.shape[2] != 3:
        raise ValueError(f"Expected (height, width, 3) frame, got shape {frame.shape}")
    height, width, _ = frame.shape
    header = f"P6 {width} {height} 255 ".encode("ascii")
    return header + np.ascontiguousarray(frame, dtype=np.uint8).tobytes()


def blit_frame(
    canvas: tk.Canvas,
    frame: np.ndarray,
    photo_factory: Callable[..., Any] = tk.PhotoImage,
) -> None:
    """Show ``frame`` on ``canvas`` at the origin.

    The canvas image item is created once and reused; each blit swaps in a
    fresh photo. The current photo is cached on the canvas because Tk drops
    images that Python no longer references.
    """
    height, width, _ = frame.shape
    key = (height, width)
    cache = getattr(canvas, "_frame_cache", None)

    photo = photo_factory(master=canvas, width=width, height=height, data=encode_ppm(frame), format="PPM")

    if cache is None or cache.get("key") != key:
        if cache is not None:
            canvas.delete(cache["item"])
        item = canvas.create_image(0, 0, anchor="nw", image=photo)
        # Text items always stay above the pixel layer.
        canvas.tag_lower(item)
        cache = {"key": key, "item": item}
        setattr(canvas, "_frame_cache", cache)
    else:
        canvas.itemconfigure(cache["item"], image=photo)

    cache["photo"] = photo


def place_text_items(canvas: tk.Canvas, items: Iterable[TextItem]) -> int:
    """Create one canvas text item per TextItem, anchored at its baseline-left."""
    placed = 0
    for item in items:
        canvas.create_text(
            item.x,
            item.y,
            text=item.text,
            fill=to_hex(item.color),
            font=item.font.as_tk(),
            anchor="sw",
            tags=("text",),
        )
        placed += 1
    return placed


def erase_text_under(canvas: tk.Canvas, damage: Damage) -> int:
    """Delete text items overlapping a painted area.

    Text sits above the pixel image, so pixels painted after a text item
    would otherwise never cover it. Returns how many items were removed.
    """
    removed = 0
    for item in canvas.find_overlapping(damage.x0, damage.y0, damage.x1 - 1, damage.y1 - 1):
        if "text" in canvas.gettags(item):
            canvas.delete(item)
            removed += 1
    return removed


def apply_draw_events(canvas: tk.Canvas, events: Iterable[DrawEvent]) -> None:
    """Replay text placements and painted areas in the order they were drawn."""
    for event in events:
        if isinstance(event, Damage):
            erase_text_under(canvas, event)
        else:
            place_text_items(canvas, [event])
