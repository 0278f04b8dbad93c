"""Construction-time configuration for a SimpleCanvas window."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from simple_canvas.core.colors import RGB, ColorLike, to_rgb
from simple_canvas.ui.constants import DEFAULT_BACKGROUND, DEFAULT_HEIGHT, DEFAULT_TITLE, DEFAULT_WIDTH


class CanvasConfigError(ValueError):
    """Raised when a canvas is requested with unusable settings."""


@dataclass(frozen=True)
class CanvasConfig:
    """Title, size and background of a canvas.

    Validation runs in ``__post_init__`` so a bad size is rejected before
    any buffer is allocated or any window is opened.
    """

    title: str = DEFAULT_TITLE
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    background: RGB = DEFAULT_BACKGROUND

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise CanvasConfigError(f"{name} must be an int, got {type(value).__name__}")
            if value <= 0:
                raise CanvasConfigError(f"{name} must be positive, got {value}")

        try:
            background = to_rgb(self.background)
        except ValueError as exc:
            raise CanvasConfigError(f"Invalid background color: {self.background!r}") from exc
        # Frozen dataclass: normalize through object.__setattr__.
        object.__setattr__(self, "background", background)

    @classmethod
    def build(
        cls,
        title: str = DEFAULT_TITLE,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        background: ColorLike = DEFAULT_BACKGROUND,
    ) -> "CanvasConfig":
        return cls(title=str(title), width=width, height=height, background=background)
