"""Color helpers shared by the surface, the facade and the Tk display.

Colors travel through the package as plain ``(r, g, b)`` tuples. Callers may
also pass ``"#rrggbb"``/``"#rgb"`` strings or one of the named colors below,
which keeps short scripts readable (``canvas.draw_disc(50, 50, 10, "red")``).
"""

from __future__ import annotations

from typing import Union

import numpy as np

RGB = tuple[int, int, int]
ColorLike = Union[RGB, str, list, np.ndarray]

BLACK: RGB = (0, 0, 0)
WHITE: RGB = (255, 255, 255)
GRAY: RGB = (128, 128, 128)
LIGHT_GRAY: RGB = (192, 192, 192)
DARK_GRAY: RGB = (64, 64, 64)
RED: RGB = (255, 0, 0)
GREEN: RGB = (0, 255, 0)
BLUE: RGB = (0, 0, 255)
YELLOW: RGB = (255, 255, 0)
CYAN: RGB = (0, 255, 255)
MAGENTA: RGB = (255, 0, 255)
ORANGE: RGB = (255, 200, 0)
PINK: RGB = (255, 175, 175)

NAMED_COLORS: dict[str, RGB] = {
    "black": BLACK,
    "white": WHITE,
    "gray": GRAY,
    "grey": GRAY,
    "light_gray": LIGHT_GRAY,
    "dark_gray": DARK_GRAY,
    "red": RED,
    "green": GREEN,
    "blue": BLUE,
    "yellow": YELLOW,
    "cyan": CYAN,
    "magenta": MAGENTA,
    "orange": ORANGE,
    "pink": PINK,
}


def parse_hex(hex_color: str) -> RGB:
    """Parse ``#rrggbb`` or ``#rgb`` into an RGB tuple."""
    digits = hex_color.lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    try:
        r = int(digits[0:2], 16)
        g = int(digits[2:4], 16)
        b = int(digits[4:6], 16)
    except ValueError as exc:
        raise ValueError(f"Invalid hex color: {hex_color!r}") from exc
    return (r, g, b)


def to_rgb(color: ColorLike) -> RGB:
    """Normalize any accepted color spelling into an ``(r, g, b)`` tuple.

    Channel values outside 0..255 are clamped so arithmetic-derived colors
    (gradients in a loop, for example) still produce something drawable.
    """
    if isinstance(color, str):
        key = color.strip().lower().replace(" ", "_")
        if key.startswith("#"):
            return parse_hex(key)
        if key in NAMED_COLORS:
            return NAMED_COLORS[key]
        raise ValueError(f"Unknown color name: {color!r}")

    channels = np.asarray(color).reshape(-1)
    if channels.shape[0] != 3:
        raise ValueError(f"Expected 3 color channels, got {channels.shape[0]}")
    r, g, b = (int(v) for v in np.clip(channels, 0, 255))
    return (r, g, b)


def to_hex(color: ColorLike) -> str:
    """Format a color as ``#rrggbb`` (the spelling tkinter expects)."""
    r, g, b = to_rgb(color)
    return f"#{r:02x}{g:02x}{b:02x}"
