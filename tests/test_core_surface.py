"""Unit tests for the pixel buffer primitives."""

from __future__ import annotations

import numpy as np
import pytest

from simple_canvas.core.colors import BLACK, RED, WHITE
from simple_canvas.core.surface import PixelSurface


def _painted(surface: PixelSurface, color: tuple[int, int, int]) -> set[tuple[int, int]]:
    """Return the (x, y) positions currently holding ``color``."""
    ys, xs = np.nonzero(np.all(surface.buffer == color, axis=-1))
    return {(int(x), int(y)) for x, y in zip(xs, ys)}


def test_new_surface_is_filled_with_background() -> None:
    surface = PixelSurface(4, 3, WHITE)
    assert surface.buffer.shape == (3, 4, 3)
    assert surface.buffer.dtype == np.uint8
    assert np.all(surface.buffer == 255)


def test_set_pixel_round_trips_through_get_pixel() -> None:
    surface = PixelSurface(10, 10, WHITE)
    surface.set_pixel(3, 7, RED)
    assert surface.get_pixel(3, 7) == RED
    # Row-major storage: y selects the row.
    assert tuple(surface.buffer[7, 3]) == RED


def test_set_pixel_out_of_bounds_is_ignored() -> None:
    surface = PixelSurface(10, 10, WHITE)
    for x, y in [(-1, 0), (0, -1), (10, 0), (0, 10), (100, 100)]:
        surface.set_pixel(x, y, BLACK)
    assert np.all(surface.buffer == 255)


def test_get_pixel_out_of_bounds_raises() -> None:
    surface = PixelSurface(5, 5)
    with pytest.raises(IndexError):
        surface.get_pixel(5, 0)


def test_fill_rect_far_edge_is_exclusive() -> None:
    surface = PixelSurface(10, 10, WHITE)
    surface.fill_rect(2, 2, 5, 5, BLACK)
    expected = {(x, y) for x in range(2, 5) for y in range(2, 5)}
    assert _painted(surface, BLACK) == expected
    assert surface.get_pixel(5, 5) == WHITE


def test_fill_rect_ignores_corner_order() -> None:
    reference = PixelSurface(10, 10, WHITE)
    reference.fill_rect(2, 1, 7, 6, BLACK)

    for corners in [(7, 6, 2, 1), (2, 6, 7, 1), (7, 1, 2, 6)]:
        surface = PixelSurface(10, 10, WHITE)
        surface.fill_rect(*corners, BLACK)
        assert np.array_equal(surface.buffer, reference.buffer)


def test_fill_rect_with_zero_width_or_height_paints_nothing() -> None:
    surface = PixelSurface(10, 10, WHITE)
    surface.fill_rect(3, 3, 3, 8, BLACK)
    surface.fill_rect(1, 4, 9, 4, BLACK)
    assert _painted(surface, BLACK) == set()


def test_fill_rect_is_clipped_to_surface() -> None:
    surface = PixelSurface(10, 10, WHITE)
    # Starts at -5 and is 8 wide, so only columns/rows 0..2 are visible.
    surface.fill_rect(-5, -5, 3, 3, BLACK)
    assert _painted(surface, BLACK) == {(x, y) for x in range(3) for y in range(3)}

    surface.fill_rect(8, 8, 20, 20, RED)
    assert _painted(surface, RED) == {(8, 8), (8, 9), (9, 8), (9, 9)}


def test_draw_line_single_point_colors_one_pixel() -> None:
    surface = PixelSurface(10, 10, WHITE)
    surface.draw_line(4, 6, 4, 6, BLACK)
    assert _painted(surface, BLACK) == {(4, 6)}


def test_draw_line_axis_aligned_and_diagonal() -> None:
    surface = PixelSurface(10, 10, WHITE)
    surface.draw_line(0, 0, 4, 0, BLACK)
    assert _painted(surface, BLACK) == {(x, 0) for x in range(5)}

    surface = PixelSurface(10, 10, WHITE)
    surface.draw_line(3, 9, 3, 5, BLACK)
    assert _painted(surface, BLACK) == {(3, y) for y in range(5, 10)}

    surface = PixelSurface(10, 10, WHITE)
    surface.draw_line(0, 0, 3, 3, BLACK)
    assert _painted(surface, BLACK) == {(i, i) for i in range(4)}


def test_draw_line_includes_endpoints_and_is_connected() -> None:
    surface = PixelSurface(10, 10, WHITE)
    surface.draw_line(0, 0, 7, 3, BLACK)
    painted = _painted(surface, BLACK)

    assert (0, 0) in painted
    assert (7, 3) in painted
    # Bresenham lays down exactly one pixel per step along the major axis.
    assert len(painted) == 8
    assert {x for x, _ in painted} == set(range(8))


def test_draw_line_skips_pixels_outside_surface() -> None:
    surface = PixelSurface(10, 10, WHITE)
    surface.draw_line(-5, 2, 15, 2, BLACK)
    assert _painted(surface, BLACK) == {(x, 2) for x in range(10)}


def test_snapshot_is_independent_copy() -> None:
    surface = PixelSurface(3, 3, WHITE)
    snap = surface.snapshot()
    surface.set_pixel(1, 1, BLACK)
    assert np.all(snap == 255)
