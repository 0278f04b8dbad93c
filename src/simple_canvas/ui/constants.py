"""Centralized defaults for SimpleCanvas.

This file only stores values (numbers, colors, labels).
Keeping them in one place means the no-argument canvas, the CLI and the
demos all agree on what "default" means.
"""

# Title and size used by a no-argument SimpleCanvas() and by the CLI.
DEFAULT_TITLE = "SimpleCanvas"
DEFAULT_WIDTH = 400
DEFAULT_HEIGHT = 400
DEFAULT_BACKGROUND = (255, 255, 255)

# Drawing starts in black.
DEFAULT_FOREGROUND = (0, 0, 0)

# Font used for draw_string until set_font() is called.
DEFAULT_FONT_FAMILY = "Helvetica"
DEFAULT_FONT_SIZE = 12

# Thickness in pixels of the ring drawn by draw_circle.
RING_THICKNESS = 5

# How often the Tk thread checks for new frames, in milliseconds.
FRAME_POLL_MS = 16
# How long SimpleCanvas waits for the Tk window to come up, in seconds.
WINDOW_READY_TIMEOUT_S = 5.0

# Frame delay used by the animated demos.
DEMO_FRAME_MS = 30
