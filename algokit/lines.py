"""Raster line drawing and locating a point against a line."""

import math
from dataclasses import dataclass
from fractions import Fraction


@dataclass(frozen=True)
class PointPosition:
    """Where a point lies with respect to a line.

    ``vertical`` is ``"upper"`` or ``"lower"`` and is None for a vertical line.
    ``horizontal`` is ``"left"`` or ``"right"`` and is None for a horizontal line.
    Both are None when the point lies on the line.
    """

    on_line: bool
    vertical: str | None = None
    horizontal: str | None = None


def _round(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def bresenham_line(x1: int, y1: int, x2: int, y2: int) -> list[tuple[int, int]]:
    """Return the pixels of a line by Bresenham's decision-parameter method.

    The walk starts at the endpoint with the smaller x and steps x by one;
    y only ever increases, so the result is exact for slopes from 0 to 1.
    """
    dx = abs(x1 - x2)
    dy = abs(y1 - y2)
    p = 2 * dy - dx
    if x1 > x2:
        x, y, end = x2, y2, x1
    else:
        x, y, end = x1, y1, x2
    points = [(x, y)]
    while x < end:
        x += 1
        if p < 0:
            p += 2 * dy
        else:
            y += 1
            p += 2 * (dy - dx)
        points.append((x, y))
    return points


def dda_line(x1: int, y1: int, x2: int, y2: int) -> list[tuple[int, int]]:
    """Return the pixels of a line by the digital differential analyser.

    One pixel is produced per step along the major axis, starting at
    ``(x1, y1)`` and stopping just short of ``(x2, y2)``; coordinates are
    truncated towards zero.
    """
    dx = x2 - x1
    dy = y2 - y1
    steps = max(abs(dx), abs(dy))
    return [
        (
            math.trunc(x1 + Fraction(i * dx, steps)),
            math.trunc(y1 + Fraction(i * dy, steps)),
        )
        for i in range(steps)
    ]


def _slope_intercept(x1: int, y1: int, x2: int, y2: int) -> tuple[float | None, int]:
    if x2 == x1:
        return None, x1
    slope = (y2 - y1) / (x2 - x1)
    return slope, y1 - _round(slope * x1)


def line_equation(x1: int, y1: int, x2: int, y2: int) -> tuple[float | None, int]:
    """Return ``(slope, intercept)`` of the line through two points.

    The intercept is rounded to an integer. For a vertical line the slope is
    None and the second value is the x the line runs along.
    """
    return _slope_intercept(x1, y1, x2, y2)


def classify_point(
    px: int, py: int, x1: int, y1: int, x2: int, y2: int
) -> PointPosition:
    """Tell where ``(px, py)`` lies relative to the line through two points.

    A point is ``"upper"`` when the line lies further from the x axis at the
    point's x, and ``"left"`` when the line lies further right at the point's y.
    """
    slope, intercept = _slope_intercept(x1, y1, x2, y2)
    if slope is None:
        if px == intercept:
            return PointPosition(on_line=True)
        return PointPosition(
            on_line=False, horizontal="left" if intercept > px else "right"
        )

    line_y = _round(slope * px) + intercept
    if line_y == py:
        return PointPosition(on_line=True)
    vertical = "upper" if line_y > py else "lower"
    horizontal = None
    if slope != 0:
        line_x = _round((py - intercept) / slope)
        horizontal = "left" if line_x > px else "right"
    return PointPosition(on_line=False, vertical=vertical, horizontal=horizontal)