"""Point transformations in model space.

This module provides the affine operations applied to shapes before they are
rasterized:
- Translation by an integer offset
- Rotation about the origin by an angle in degrees
- Reflection across the Y axis

Every function takes and returns an integer Point. Chained transforms round
after each step, so applying them one at a time is not equivalent to applying
a single combined matrix.
"""

import math

from rasterlab.domain import Point


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, with ties moving away from zero.

    Examples:
        >>> round_half_away_from_zero(2.5)
        3
        >>> round_half_away_from_zero(-2.5)
        -3
        >>> round_half_away_from_zero(-0.4)
        0
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def translate(p: Point, dx: int, dy: int) -> Point:
    """Translate a point by (dx, dy).

    Examples:
        >>> translate(Point(0, 0), 5, 1)
        Point(x=5, y=1)
    """
    return Point(p.x + dx, p.y + dy)


def rotate(p: Point, angle_degrees: float) -> Point:
    """Rotate a point counter-clockwise about the origin.

    Args:
        p: Point to rotate
        angle_degrees: Rotation angle in degrees, positive is counter-clockwise

    Returns:
        Rotated point with each coordinate rounded half away from zero

    Examples:
        >>> rotate(Point(5, 1), 90)
        Point(x=-1, y=5)
    """
    rad = math.radians(angle_degrees)
    s = math.sin(rad)
    c = math.cos(rad)

    x_new = round_half_away_from_zero(p.x * c - p.y * s)
    y_new = round_half_away_from_zero(p.x * s + p.y * c)
    return Point(x_new, y_new)


def reflect_across_y_axis(p: Point) -> Point:
    """Mirror a point across the Y axis.

    Examples:
        >>> reflect_across_y_axis(Point(-1, 5))
        Point(x=1, y=5)
    """
    return Point(-p.x, p.y)
