"""Test configuration shared across this project's pytest suite."""

from __future__ import annotations

import sys
from pathlib import Path


# Ensure tests can import modules from src/ without requiring editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402

from simple_canvas.app import SimpleCanvas  # noqa: E402
from simple_canvas.services.repaint import HeadlessDisplay  # noqa: E402


@pytest.fixture
def display() -> HeadlessDisplay:
    return HeadlessDisplay()


@pytest.fixture
def sleeps() -> list[float]:
    """Collects the durations passed to the canvas sleep function."""
    return []


@pytest.fixture
def canvas(display: HeadlessDisplay, sleeps: list[float]) -> SimpleCanvas:
    """10x10 white canvas drawing into an in-memory display."""
    return SimpleCanvas("Test", 10, 10, "white", display=display, sleep=sleeps.append)
