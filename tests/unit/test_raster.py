"""Unit tests for the line and circle rasterizers."""

import math

import pytest

from rasterlab.core.raster import plot_symmetric, rasterize_circle, rasterize_line
from rasterlab.core.shapes import collect_circle, collect_line
from rasterlab.domain import Point
from rasterlab.exceptions import GeometryError, InvalidRadiusError

LINE_CASES = [
    (Point(10, 12), Point(26, 22)),
    (Point(0, 0), Point(0, 0)),
    (Point(0, 0), Point(7, 0)),
    (Point(0, 0), Point(0, -7)),
    (Point(-5, -5), Point(5, 5)),
    (Point(3, -2), Point(-9, 4)),
    (Point(0, 0), Point(2, 11)),
    (Point(-20, 7), Point(13, -6)),
    (Point(4, 4), Point(-1, 30)),
    (Point(0, 0), Point(-1, -1)),
]


class TestRasterizeLine:
    """Tests for Bresenham line rasterization."""

    def test_reference_line(self) -> None:
        """Test the shallow demo line steps x every iteration."""
        points = collect_line(Point(10, 12), Point(26, 22))

        assert len(points) == 17
        assert [p.x for p in points] == list(range(10, 27))
        assert [p.y for p in points] == [
            12, 13, 13, 14, 15, 15, 16, 16, 17, 18, 18, 19, 20, 20, 21, 21, 22,
        ]

    def test_degenerate_line_plots_one_pixel(self) -> None:
        assert collect_line(Point(4, -4), Point(4, -4)) == [Point(4, -4)]

    def test_calls_plot_callback(self) -> None:
        """Test plot receives plain integer coordinates."""
        calls: list[tuple[int, int]] = []
        rasterize_line(Point(0, 0), Point(2, 0), lambda x, y: calls.append((x, y)))
        assert calls == [(0, 0), (1, 0), (2, 0)]

    @pytest.mark.parametrize(("p0", "p1"), LINE_CASES)
    def test_endpoints_included(self, p0: Point, p1: Point) -> None:
        points = collect_line(p0, p1)
        assert points[0] == p0
        assert points[-1] == p1

    @pytest.mark.parametrize(("p0", "p1"), LINE_CASES)
    def test_path_is_8_connected(self, p0: Point, p1: Point) -> None:
        """Test consecutive pixels are neighbours with no gaps or repeats."""
        points = collect_line(p0, p1)
        for a, b in zip(points, points[1:]):
            assert abs(a.x - b.x) <= 1
            assert abs(a.y - b.y) <= 1
            assert a != b

    @pytest.mark.parametrize(("p0", "p1"), LINE_CASES)
    def test_pixel_count(self, p0: Point, p1: Point) -> None:
        """Test one pixel per step along the major axis."""
        points = collect_line(p0, p1)
        assert len(points) == max(abs(p1.x - p0.x), abs(p1.y - p0.y)) + 1

    @pytest.mark.parametrize(
        ("p0", "p1"),
        [
            (Point(0, 0), Point(9, 0)),
            (Point(2, -3), Point(2, 8)),
            (Point(-5, -5), Point(5, 5)),
            (Point(-4, 4), Point(4, -4)),
        ],
    )
    def test_reversed_line_same_pixels(self, p0: Point, p1: Point) -> None:
        """Test axis-aligned and diagonal lines are direction independent."""
        assert set(collect_line(p0, p1)) == set(collect_line(p1, p0))

    @pytest.mark.parametrize(("p0", "p1"), LINE_CASES)
    def test_reversed_line_same_length(self, p0: Point, p1: Point) -> None:
        assert len(collect_line(p0, p1)) == len(collect_line(p1, p0))

    def test_reversed_line_tie_break(self) -> None:
        """Test ties are resolved in the walking direction.

        With the single error term update order, an exact tie moves both
        axes on the first step, so the reversed line picks the mirrored pixel.
        """
        forward = collect_line(Point(0, 0), Point(2, 1))
        backward = collect_line(Point(2, 1), Point(0, 0))
        assert forward == [Point(0, 0), Point(1, 1), Point(2, 1)]
        assert backward == [Point(2, 1), Point(1, 0), Point(0, 0)]


class TestRasterizeCircle:
    """Tests for midpoint circle rasterization."""

    def test_reference_circle_contains_axis_points(self) -> None:
        points = set(collect_circle(Point(-3, -3), 8))
        assert Point(5, -3) in points
        assert Point(-3, 5) in points
        assert Point(-11, -3) in points
        assert Point(-3, -11) in points

    def test_reference_circle_distance_band(self) -> None:
        """Test no pixel is closer than 7 or farther than 9 from the center."""
        for p in collect_circle(Point(-3, -3), 8):
            distance = math.hypot(p.x + 3, p.y + 3)
            assert 7 <= distance <= 9

    def test_reference_circle_call_count(self) -> None:
        """Test 7 octant steps times 8 reflections, duplicates kept."""
        assert len(collect_circle(Point(-3, -3), 8)) == 56

    def test_octant_walk(self) -> None:
        """Test the first octant offsets chosen by the decision variable."""
        points = collect_circle(Point(0, 0), 8)
        octant = [points[i] for i in range(0, len(points), 8)]
        assert octant == [
            Point(0, 8),
            Point(1, 8),
            Point(2, 8),
            Point(3, 7),
            Point(4, 7),
            Point(5, 6),
            Point(6, 5),
        ]

    def test_radius_zero_plots_center(self) -> None:
        points = collect_circle(Point(4, -2), 0)
        assert len(points) == 8
        assert set(points) == {Point(4, -2)}

    def test_radius_one(self) -> None:
        points = collect_circle(Point(0, 0), 1)
        assert len(points) == 16
        assert set(points) == {Point(0, 1), Point(0, -1), Point(1, 0), Point(-1, 0)}

    @pytest.mark.parametrize("radius", [0, 1, 2, 3, 5, 8, 13, 21, 40])
    def test_distance_within_one(self, radius: int) -> None:
        center = Point(7, -4)
        for p in collect_circle(center, radius):
            distance = math.sqrt((p.x - center.x) ** 2 + (p.y - center.y) ** 2)
            assert abs(round(distance) - radius) <= 1

    @pytest.mark.parametrize("radius", [1, 4, 8, 15, 32])
    def test_eightfold_symmetry(self, radius: int) -> None:
        """Test the plotted set maps onto itself under all 8 reflections."""
        cx, cy = -3, 2
        points = set(collect_circle(Point(cx, cy), radius))
        offsets = {(p.x - cx, p.y - cy) for p in points}
        reflections = [
            lambda x, y: (-x, y),
            lambda x, y: (x, -y),
            lambda x, y: (-x, -y),
            lambda x, y: (y, x),
            lambda x, y: (-y, x),
            lambda x, y: (y, -x),
            lambda x, y: (-y, -x),
        ]
        for reflect in reflections:
            assert {reflect(x, y) for x, y in offsets} == offsets

    def test_negative_radius_rejected(self) -> None:
        """Test negative radius fails before any pixel is plotted."""
        calls: list[tuple[int, int]] = []
        with pytest.raises(InvalidRadiusError) as exc_info:
            rasterize_circle(Point(0, 0), -1, lambda x, y: calls.append((x, y)))

        assert exc_info.value.radius == -1
        assert isinstance(exc_info.value, GeometryError)
        assert calls == []


class TestPlotSymmetric:
    """Tests for the 8-way symmetry helper."""

    def test_eight_calls_in_order(self) -> None:
        calls: list[tuple[int, int]] = []
        plot_symmetric(Point(10, 20), 1, 3, lambda x, y: calls.append((x, y)))
        assert calls == [
            (11, 23),
            (9, 23),
            (11, 17),
            (9, 17),
            (13, 21),
            (7, 21),
            (13, 19),
            (7, 19),
        ]
