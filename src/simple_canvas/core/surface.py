"""Offscreen pixel buffer and its primitive fills."""

from __future__ import annotations

import numpy as np

from simple_canvas.core.colors import RGB, ColorLike, to_rgb


class PixelSurface:
    """Fixed-size RGB pixel buffer.

    The buffer is a ``(height, width, 3)`` uint8 array indexed as
    ``buffer[y, x]``. Writes that land outside ``[0, width) x [0, height)``
    are dropped without error, so shape algorithms can walk past the edges
    freely.
    """

    def __init__(self, width: int, height: int, background: ColorLike = (0, 0, 0)) -> None:
        self._width = int(width)
        self._height = int(height)
        self.buffer = np.empty((self._height, self._width, 3), dtype=np.uint8)
        self.fill(background)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def fill(self, color: ColorLike) -> None:
        """Paint the whole buffer with one color."""
        self.buffer[:, :] = to_rgb(color)

    def set_pixel(self, x: int, y: int, color: ColorLike) -> None:
        """Write one pixel; out-of-range coordinates are ignored."""
        if not self.in_bounds(x, y):
            return
        self.buffer[y, x] = to_rgb(color)

    def get_pixel(self, x: int, y: int) -> RGB:
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self._width}x{self._height} surface")
        r, g, b = self.buffer[y, x]
        return (int(r), int(g), int(b))

    def fill_rect(self, x1: int, y1: int, x2: int, y2: int, color: ColorLike) -> None:
        """Fill the axis-aligned rectangle spanned by two opposite corners.

        The region starts at ``min(x1, x2)`` and is ``|x1 - x2|`` pixels wide
        (same for y), so the far edge is exclusive. Equal coordinates on
        either axis give an empty region.
        """
        left = min(x1, x2)
        top = min(y1, y2)
        right = left + abs(x1 - x2)
        bottom = top + abs(y1 - y2)

        # Clip to the buffer before slicing; negative starts would wrap.
        left = max(0, left)
        top = max(0, top)
        right = min(self._width, right)
        bottom = min(self._height, bottom)
        if right <= left or bottom <= top:
            return
        self.buffer[top:bottom, left:right] = to_rgb(color)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: ColorLike) -> None:
        """Rasterize a line with Bresenham's algorithm, endpoints included."""
        rgb = to_rgb(color)
        dx = abs(x2 - x1)
        dy = -abs(y2 - y1)
        sx = 1 if x1 < x2 else -1
        sy = 1 if y1 < y2 else -1
        err = dx + dy
        x, y = x1, y1

        while True:
            if self.in_bounds(x, y):
                self.buffer[y, x] = rgb
            if x == x2 and y == y2:
                break
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x += sx
            if e2 <= dx:
                err += dx
                y += sy

    def snapshot(self) -> np.ndarray:
        """Return a copy of the buffer that later draws will not touch."""
        return self.buffer.copy()
