"""Line clipping (Cohen-Sutherland) and polygon clipping (Sutherland-Hodgman)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import NamedTuple


class Point(NamedTuple):
    """A point in world coordinates."""

    x: float
    y: float


class OutCode(IntFlag):
    """Region code of a point relative to the clipping window."""

    INSIDE = 0
    LEFT = 1
    RIGHT = 2
    BOTTOM = 4
    TOP = 8


class WindowEdge(IntEnum):
    """The window edges in the order the polygon is clipped against them."""

    LEFT = 0
    RIGHT = 1
    BOTTOM = 2
    TOP = 3


DEFAULT_SEGMENTS: tuple[tuple[Point, Point], ...] = (
    (Point(-150.0, 50.0), Point(150.0, 50.0)),
    (Point(-50.0, -150.0), Point(50.0, 150.0)),
    (Point(-200.0, -200.0), Point(-50.0, -50.0)),
    (Point(0.0, 0.0), Point(80.0, 80.0)),
)

DEFAULT_TRIANGLE: tuple[Point, ...] = (
    Point(100.0, 150.0),
    Point(200.0, 100.0),
    Point(-150.0, -100.0),
)

_VERTICAL_SLOPE = 1e9


def _point(value: Sequence[float]) -> Point:
    x, y = value
    return Point(float(x), float(y))


@dataclass(frozen=True)
class ClipWindow:
    """An axis-aligned clipping rectangle."""

    xmin: float = -100.0
    xmax: float = 100.0
    ymin: float = -100.0
    ymax: float = 100.0

    def __post_init__(self) -> None:
        if self.xmax <= self.xmin or self.ymax <= self.ymin:
            raise ValueError("clip window must satisfy xmin < xmax and ymin < ymax")

    def corners(self) -> list[Point]:
        """Return the window corners anticlockwise from the bottom left."""
        return [
            Point(self.xmin, self.ymin),
            Point(self.xmax, self.ymin),
            Point(self.xmax, self.ymax),
            Point(self.xmin, self.ymax),
        ]

    def out_code(self, point: Sequence[float]) -> OutCode:
        """Return the Cohen-Sutherland region code of a point."""
        x, y = _point(point)
        code = OutCode.INSIDE
        if x < self.xmin:
            code |= OutCode.LEFT
        elif x > self.xmax:
            code |= OutCode.RIGHT
        if y < self.ymin:
            code |= OutCode.BOTTOM
        elif y > self.ymax:
            code |= OutCode.TOP
        return code

    def clip_line(
        self, p1: Sequence[float], p2: Sequence[float]
    ) -> tuple[Point, Point] | None:
        """Clip a segment to the window; return the visible part or None."""
        a, b = _point(p1), _point(p2)
        code_a, code_b = self.out_code(a), self.out_code(b)
        while True:
            if not (code_a | code_b):
                return a, b
            if code_a & code_b:
                return None
            code_out = code_a or code_b
            if code_out & OutCode.TOP:
                x = a.x + (b.x - a.x) * (self.ymax - a.y) / (b.y - a.y)
                y = self.ymax
            elif code_out & OutCode.BOTTOM:
                x = a.x + (b.x - a.x) * (self.ymin - a.y) / (b.y - a.y)
                y = self.ymin
            elif code_out & OutCode.RIGHT:
                y = a.y + (b.y - a.y) * (self.xmax - a.x) / (b.x - a.x)
                x = self.xmax
            else:
                y = a.y + (b.y - a.y) * (self.xmin - a.x) / (b.x - a.x)
                x = self.xmin
            if code_out == code_a:
                a = Point(x, y)
                code_a = self.out_code(a)
            else:
                b = Point(x, y)
                code_b = self.out_code(b)

    def inside(self, point: Sequence[float], edge: WindowEdge) -> bool:
        """Return whether a point lies on the inner side of one window edge."""
        x, y = _point(point)
        edge = WindowEdge(edge)
        if edge is WindowEdge.LEFT:
            return x >= self.xmin
        if edge is WindowEdge.RIGHT:
            return x <= self.xmax
        if edge is WindowEdge.BOTTOM:
            return y >= self.ymin
        return y <= self.ymax

    def intersection(
        self, s: Sequence[float], p: Sequence[float], edge: WindowEdge
    ) -> Point:
        """Return where segment s-p crosses the line of one window edge."""
        s, p = _point(s), _point(p)
        edge = WindowEdge(edge)
        vertical = p.x == s.x
        m = _VERTICAL_SLOPE if vertical else (p.y - s.y) / (p.x - s.x)
        if edge is WindowEdge.LEFT:
            return Point(self.xmin, s.y + m * (self.xmin - s.x))
        if edge is WindowEdge.RIGHT:
            return Point(self.xmax, s.y + m * (self.xmax - s.x))
        boundary = self.ymin if edge is WindowEdge.BOTTOM else self.ymax
        x = s.x if vertical else s.x + (boundary - s.y) / m
        return Point(x, boundary)

    def clip_polygon(self, polygon: Iterable[Sequence[float]]) -> list[Point]:
        """Clip a polygon against each window edge in turn."""
        output = [_point(vertex) for vertex in polygon]
        for edge in WindowEdge:
            subject = output
            output = []
            for s, p in zip(subject, subject[1:] + subject[:1]):
                s_inside = self.inside(s, edge)
                p_inside = self.inside(p, edge)
                if s_inside and p_inside:
                    output.append(p)
                elif s_inside:
                    output.append(self.intersection(s, p, edge))
                elif p_inside:
                    output.append(self.intersection(s, p, edge))
                    output.append(p)
        return output