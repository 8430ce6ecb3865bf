"""Unit tests for the Canvas pixel surface."""

import pytest

from rasterlab.core import rasterize_line
from rasterlab.domain import Color, Point
from rasterlab.domain.palette import AXIS, BACKGROUND, GREEN, RED
from rasterlab.exceptions import CanvasError
from rasterlab.render.canvas import Canvas


class TestCanvas:
    """Tests for Canvas class."""

    def test_origin_at_center(self) -> None:
        canvas = Canvas(5, 5)
        assert (canvas.origin_x, canvas.origin_y) == (2, 2)
        assert canvas.to_device(0, 0) == (2, 2)

    def test_y_axis_is_flipped(self) -> None:
        """Test model Y up maps to device Y down."""
        canvas = Canvas(5, 5)
        assert canvas.to_device(1, 1) == (3, 1)
        assert canvas.to_device(-2, -2) == (0, 4)

    def test_clear_draws_axes(self) -> None:
        canvas = Canvas(5, 5)
        assert canvas.get(0, 0) == BACKGROUND
        assert canvas.get(2, 0) == AXIS
        assert canvas.get(0, 2) == AXIS
        assert canvas.count(AXIS) == 9
        assert canvas.count(BACKGROUND) == 16

    def test_plot_model_point(self) -> None:
        canvas = Canvas(5, 5)
        canvas.plot(1, 1, RED)
        assert canvas.get(3, 1) == RED
        assert canvas.pixel_at(1, 1) == RED

    def test_plot_keeps_alpha(self) -> None:
        canvas = Canvas(3, 3)
        translucent = Color(10, 20, 30, 40)
        canvas.plot(0, 0, translucent)
        assert canvas.pixel_at(0, 0) == translucent

    def test_out_of_bounds_plot_ignored(self) -> None:
        canvas = Canvas(5, 5)
        before = bytes(canvas.buffer)
        canvas.plot(100, -100, RED)
        assert bytes(canvas.buffer) == before

    def test_pixel_size_block(self) -> None:
        """Test a 2x2 block sits up and left of the device point."""
        canvas = Canvas(6, 6, pixel_size=2)
        canvas.plot(0, 0, RED)
        assert canvas.count(RED) == 4
        for dx, dy in [(2, 2), (3, 2), (2, 3), (3, 3)]:
            assert canvas.get(dx, dy) == RED

    def test_plotter_binds_color(self) -> None:
        canvas = Canvas(64, 64)
        rasterize_line(Point(10, 12), Point(26, 22), canvas.plotter(GREEN))
        assert canvas.count(GREEN) == 17
        assert canvas.pixel_at(10, 12) == GREEN
        assert canvas.pixel_at(26, 22) == GREEN

    def test_clear_resets_drawing(self) -> None:
        canvas = Canvas(8, 8)
        canvas.plot(1, 1, RED)
        canvas.clear()
        assert canvas.count(RED) == 0

    def test_rows(self) -> None:
        canvas = Canvas(4, 3)
        rows = list(canvas.rows())
        assert len(rows) == 3
        assert all(len(row) == 4 for row in rows)

    def test_get_out_of_bounds(self) -> None:
        with pytest.raises(CanvasError):
            Canvas(4, 4).get(4, 0)

    @pytest.mark.parametrize(
        ("width", "height", "pixel_size"),
        [(0, 5, 1), (5, -1, 1), (5, 5, 0)],
    )
    def test_invalid_dimensions(self, width: int, height: int, pixel_size: int) -> None:
        with pytest.raises(CanvasError):
            Canvas(width, height, pixel_size=pixel_size)
