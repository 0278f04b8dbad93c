"""Active drawing state: foreground color and font."""

from __future__ import annotations

from dataclasses import dataclass, field

from simple_canvas.core.colors import RGB, ColorLike, to_rgb
from simple_canvas.ui.constants import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE, DEFAULT_FOREGROUND


@dataclass(frozen=True)
class Font:
    """Font descriptor handed to the display when text is drawn."""

    family: str = DEFAULT_FONT_FAMILY
    size: int = DEFAULT_FONT_SIZE
    weight: str = "normal"
    slant: str = "roman"

    def as_tk(self) -> tuple[str, int, str, str]:
        """Font tuple in the form tkinter widgets accept."""
        return (self.family, self.size, self.weight, self.slant)


@dataclass
class DrawingState:
    """One active color and one active font, owned by a single canvas.

    Setters replace the value for every later draw call; nothing is scoped
    to a single call and there is no stack to push or pop.
    """

    foreground: RGB = DEFAULT_FOREGROUND
    font: Font = field(default_factory=Font)

    def set_foreground_color(self, color: ColorLike) -> None:
        self.foreground = to_rgb(color)

    def get_foreground_color(self) -> RGB:
        return self.foreground

    def set_font(self, font: Font) -> None:
        self.font = font

    def get_font(self) -> Font:
        return self.font
