"""Circle rasterisation: Bresenham and midpoint outlines and a scanline fill."""

from __future__ import annotations

Point = tuple[int, int]
Span = tuple[int, int, int]


def eight_way_points(xc: int, yc: int, x: int, y: int) -> list[Point]:
    """Return the eight symmetric images of octant offset (x, y) about (xc, yc)."""
    return [
        (xc + x, yc + y),
        (xc - x, yc + y),
        (xc + x, yc - y),
        (xc - x, yc - y),
        (xc + y, yc + x),
        (xc - y, yc + x),
        (xc + y, yc - x),
        (xc - y, yc - x),
    ]


def bresenham_circle(xc: int, yc: int, r: int) -> list[Point]:
    """Return the outline pixels of a circle, in plotting order, by Bresenham's method."""
    x, y = 0, r
    d = 3 - 2 * r
    points = eight_way_points(xc, yc, x, y)
    while y >= x:
        x += 1
        if d > 0:
            y -= 1
            d += 4 * (x - y) + 10
        else:
            d += 4 * x + 6
        points.extend(eight_way_points(xc, yc, x, y))
    return points


def midpoint_circle(xc: int, yc: int, r: int) -> list[Point]:
    """Return the outline pixels of a circle, in plotting order, by the midpoint method."""
    x, y = 0, r
    p = 1 - r
    points = eight_way_points(xc, yc, x, y)
    while x < y:
        x += 1
        if p < 0:
            p += 2 * x + 1
        else:
            y -= 1
            p += 2 * (x - y) + 1
        points.extend(eight_way_points(xc, yc, x, y))
    return points


def fill_circle_spans(xc: int, yc: int, r: int) -> list[Span]:
    """Return the horizontal spans ``(x1, x2, y)`` that fill a disc."""
    x, y = 0, r
    p = 1 - r
    spans: list[Span] = []
    while x <= y:
        spans.append((xc - x, xc + x, yc + y))
        spans.append((xc - x, xc + x, yc - y))
        spans.append((xc - y, xc + y, yc + x))
        spans.append((xc - y, xc + y, yc - x))
        x += 1
        if p < 0:
            p += 2 * x + 1
        else:
            y -= 1
            p += 2 * (x - y) + 1
    return spans