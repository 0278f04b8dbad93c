"""Tests for the repaint scheduling policy and the headless display."""

from __future__ import annotations

import numpy as np

from simple_canvas.core.colors import RED
from simple_canvas.core.state import Font
from simple_canvas.core.surface import PixelSurface
from simple_canvas.services.repaint import Damage, HeadlessDisplay, PointerEvent, RepaintScheduler, TextItem


def _scheduler(auto: bool = True) -> tuple[PixelSurface, HeadlessDisplay, RepaintScheduler]:
    surface = PixelSurface(4, 4)
    display = HeadlessDisplay()
    return surface, display, RepaintScheduler(surface.snapshot, display, auto_repaint=auto)


def test_auto_mode_flushes_after_every_mutation() -> None:
    _, display, scheduler = _scheduler(auto=True)
    scheduler.after_mutation()
    scheduler.after_mutation()
    assert len(display.frames) == 2
    assert scheduler.flush_count == 2
    assert not scheduler.dirty


def test_manual_mode_defers_until_repaint() -> None:
    surface, display, scheduler = _scheduler(auto=False)
    for x in range(3):
        surface.set_pixel(x, 0, RED)
        scheduler.after_mutation()

    assert len(display.frames) == 0
    assert scheduler.dirty

    scheduler.repaint()
    assert len(display.frames) == 1
    assert not scheduler.dirty
    # The single flush carries every accumulated draw.
    assert all(tuple(display.last_frame[0, x]) == RED for x in range(3))


def test_switching_modes_never_flushes_by_itself() -> None:
    _, display, scheduler = _scheduler(auto=False)
    scheduler.after_mutation()
    scheduler.set_auto_repaint(True)
    scheduler.set_auto_repaint(False)
    assert len(display.frames) == 0


def test_repaint_flushes_in_auto_mode_too() -> None:
    _, display, scheduler = _scheduler(auto=True)
    scheduler.repaint()
    assert len(display.frames) == 1


def test_flushed_frame_is_a_snapshot() -> None:
    surface, display, scheduler = _scheduler(auto=True)
    scheduler.repaint()
    surface.set_pixel(0, 0, RED)
    assert tuple(display.frames[0][0, 0]) == (0, 0, 0)
    assert display.frames[0] is not surface.buffer


def test_headless_display_records_text_and_dispatches_pointer_events() -> None:
    display = HeadlessDisplay()
    display.open("t", 3, 2)
    assert display.is_open and display.size == (3, 2) and display.title == "t"

    display.draw_text("hi", 1, 2, RED, Font())
    assert display.texts == [TextItem(text="hi", x=1, y=2, color=RED, font=Font())]

    clicks: list[PointerEvent] = []
    moves: list[PointerEvent] = []
    display.add_click_handler(clicks.append)
    display.add_motion_handler(moves.append)
    display.dispatch_click(PointerEvent(1, 1, button=1))
    display.dispatch_motion(PointerEvent(2, 0))

    assert clicks == [PointerEvent(1, 1, 1)]
    assert moves == [PointerEvent(2, 0, 0)]
    assert display.handle() is display

    display.close()
    assert not display.is_open


def test_headless_display_last_frame_none_before_any_blit() -> None:
    display = HeadlessDisplay()
    assert display.last_frame is None
    display.blit(np.zeros((1, 1, 3), dtype=np.uint8))
    assert display.last_frame.shape == (1, 1, 3)


def test_headless_display_keeps_only_newest_frames() -> None:
    display = HeadlessDisplay(max_frames=3)
    for value in range(5):
        display.blit(np.full((1, 1, 3), value, dtype=np.uint8))

    assert display.blit_count == 5
    assert [int(frame[0, 0, 0]) for frame in display.frames] == [2, 3, 4]
    assert int(display.last_frame[0, 0, 0]) == 4


def test_headless_display_records_painted_areas() -> None:
    display = HeadlessDisplay(max_frames=2)
    for x in range(3):
        display.mark_damage(Damage(x, 0, x + 1, 1))
    assert list(display.damage) == [Damage(1, 0, 2, 1), Damage(2, 0, 3, 1)]
