"""Disc and ring rasterization on top of PixelSurface.

Both shapes use the same squared-distance test over the bounding square
``[cx - r, cx + r] x [cy - r, cy + r]``; no square roots are taken. The
square is clipped to the surface first, then a boolean mask selects the
pixels to paint in one numpy assignment.
"""

from __future__ import annotations

import numpy as np

from simple_canvas.core.colors import ColorLike, to_rgb
from simple_canvas.core.surface import PixelSurface
from simple_canvas.ui.constants import RING_THICKNESS


def _clipped_window(surface: PixelSurface, cx: int, cy: int, r: int) -> tuple[int, int, int, int] | None:
    """Return ``(x0, y0, x1, y1)`` half-open bounds of the visible bounding square."""
    if r < 0:
        return None
    x0 = max(0, cx - r)
    y0 = max(0, cy - r)
    x1 = min(surface.width, cx + r + 1)
    y1 = min(surface.height, cy + r + 1)
    if x1 <= x0 or y1 <= y0:
        return None
    return x0, y0, x1, y1


def _squared_distances(x0: int, y0: int, x1: int, y1: int, cx: int, cy: int) -> np.ndarray:
    rows, cols = np.ogrid[y0:y1, x0:x1]
    return (cols - cx) ** 2 + (rows - cy) ** 2


def disc_mask(surface: PixelSurface, cx: int, cy: int, r: int) -> tuple[tuple[int, int], np.ndarray] | None:
    """Pixels of a filled disc, as ``((x0, y0), mask)`` or None when empty."""
    window = _clipped_window(surface, cx, cy, r)
    if window is None:
        return None
    x0, y0, x1, y1 = window
    d2 = _squared_distances(x0, y0, x1, y1, cx, cy)
    return (x0, y0), d2 <= r * r


def ring_mask(
    surface: PixelSurface,
    cx: int,
    cy: int,
    r: int,
    thickness: int = RING_THICKNESS,
) -> tuple[tuple[int, int], np.ndarray] | None:
    """Pixels with ``(r - thickness)^2 <= d^2 <= r^2``.

    For ``r < thickness`` the inner bound is still ``(r - thickness)^2``,
    so a small ring can come out as a solid disc. Callers rely on this
    exact pixel set, so it is not special-cased.
    """
    window = _clipped_window(surface, cx, cy, r)
    if window is None:
        return None
    x0, y0, x1, y1 = window
    d2 = _squared_distances(x0, y0, x1, y1, cx, cy)
    inner = (r - thickness) ** 2
    return (x0, y0), (d2 >= inner) & (d2 <= r * r)


def _paint_mask(surface: PixelSurface, masked: tuple[tuple[int, int], np.ndarray] | None, color: ColorLike) -> None:
    if masked is None:
        return
    (x0, y0), mask = masked
    h, w = mask.shape
    surface.buffer[y0 : y0 + h, x0 : x0 + w][mask] = to_rgb(color)


def draw_disc(surface: PixelSurface, cx: int, cy: int, r: int, color: ColorLike) -> None:
    """Fill every pixel within distance ``r`` of ``(cx, cy)``."""
    _paint_mask(surface, disc_mask(surface, cx, cy, r), color)


def draw_circle(surface: PixelSurface, cx: int, cy: int, r: int, color: ColorLike) -> None:
    """Draw a ring outline of fixed thickness with outer radius ``r``."""
    _paint_mask(surface, ring_mask(surface, cx, cy, r), color)
