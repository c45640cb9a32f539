"""Ellipse rasterisation by the integer Bresenham and the midpoint methods."""

from __future__ import annotations

import struct

Point = tuple[int, int]

_F32 = struct.Struct("f")


def _f32(value: float) -> float:
    """Round a number to single precision."""
    return _F32.unpack(_F32.pack(value))[0]


def four_way_points(xc: int, yc: int, x: int, y: int) -> list[Point]:
    """Return the four quadrant images of offset (x, y) about (xc, yc)."""
    return [
        (xc + x, yc + y),
        (xc - x, yc + y),
        (xc + x, yc - y),
        (xc - x, yc - y),
    ]


def bresenham_ellipse(xc: int, yc: int, rx: int, ry: int) -> list[Point]:
    """Return the outline pixels of an axis-aligned ellipse using integer decisions."""
    rx2 = rx * rx
    ry2 = ry * ry
    two_rx2 = 2 * rx2
    two_ry2 = 2 * ry2
    x, y = 0, ry
    px, py = 0, two_rx2 * y
    points: list[Point] = []

    p = int(ry2 - rx2 * ry + 0.25 * rx2 + 0.5)
    while px < py:
        points.extend(four_way_points(xc, yc, x, y))
        x += 1
        px += two_ry2
        if p < 0:
            p += ry2 + px
        else:
            y -= 1
            py -= two_rx2
            p += ry2 + px - py

    p = int(ry2 * (x + 0.5) * (x + 0.5) + rx2 * (y - 1) * (y - 1) - rx2 * ry2 + 0.5)
    while y >= 0:
        points.extend(four_way_points(xc, yc, x, y))
        y -= 1
        py -= two_rx2
        if p > 0:
            p += rx2 - py
        else:
            x += 1
            px += two_ry2
            p += rx2 - py + px
    return points


def midpoint_ellipse(xc: int, yc: int, rx: int, ry: int) -> list[Point]:
    """Return the outline pixels of an axis-aligned ellipse by the midpoint method.

    The decision values are kept in single precision throughout.
    """
    rx2 = rx * rx
    ry2 = ry * ry
    f_rx2 = _f32(rx2)
    f_ry2 = _f32(ry2)
    f_two_rx2 = _f32(2 * rx2)
    f_two_ry2 = _f32(2 * ry2)
    x = 0.0
    y = _f32(ry)
    points: list[Point] = []

    d1 = _f32(ry2 - rx2 * ry + 0.25 * rx2)
    dx = _f32(f_two_ry2 * x)
    dy = _f32(f_two_rx2 * y)
    while dx < dy:
        points.extend(four_way_points(xc, yc, int(x), int(y)))
        x = _f32(x + 1)
        dx = _f32(dx + f_two_ry2)
        if d1 < 0:
            d1 = _f32(_f32(d1 + dx) + f_ry2)
        else:
            y = _f32(y - 1)
            dy = _f32(dy - f_two_rx2)
            d1 = _f32(_f32(_f32(d1 + dx) - dy) + f_ry2)

    d2 = _f32(
        ry2 * ((x + 0.5) * (x + 0.5))
        + _f32(f_rx2 * _f32((y - 1) * (y - 1)))
        - rx2 * ry2
    )
    while y >= 0:
        points.extend(four_way_points(xc, yc, int(x), int(y)))
        y = _f32(y - 1)
        dy = _f32(dy - f_two_rx2)
        if d2 > 0:
            d2 = _f32(_f32(d2 + f_rx2) - dy)
        else:
            x = _f32(x + 1)
            dx = _f32(dx + f_two_ry2)
            d2 = _f32(_f32(_f32(d2 + dx) - dy) + f_rx2)
    return points