"""Scanline polygon fill driven by an edge table and an active edge table."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_F32 = struct.Struct("f")


def _f32(value: float) -> float:
    """Round a number to single precision."""
    return _F32.unpack(_F32.pack(value))[0]


PENTAGON: tuple[tuple[int, int], ...] = (
    (250, 400),
    (130, 320),
    (180, 150),
    (320, 150),
    (370, 320),
)


@dataclass
class Edge:
    """A non-horizontal polygon edge as tracked while scanning upwards."""

    y_max: int
    x_cur: float
    inv_slope: float

    def advance(self) -> None:
        """Move the intersection to the next scanline."""
        self.x_cur = _f32(self.x_cur + self.inv_slope)


def _closed_edges(
    vertices: Sequence[tuple[int, int]],
) -> Iterable[tuple[tuple[int, int], tuple[int, int]]]:
    return zip(vertices, [*vertices[1:], *vertices[:1]])


def build_edge_table(vertices: Iterable[Sequence[int]]) -> dict[int, list[Edge]]:
    """Group a polygon's non-horizontal edges by the scanline on which they start."""
    points = [(int(x), int(y)) for x, y in vertices]
    table: dict[int, list[Edge]] = {}
    for p1, p2 in _closed_edges(points):
        if p1[1] == p2[1]:
            continue
        if p1[1] > p2[1]:
            p1, p2 = p2, p1
        inv_slope = _f32(_f32(p2[0] - p1[0]) / (p2[1] - p1[1]))
        table.setdefault(p1[1], []).append(Edge(p2[1], _f32(p1[0]), inv_slope))
    return table


def scanline_fill(vertices: Iterable[Sequence[int]]) -> list[tuple[int, int]]:
    """Return the pixels inside a polygon, row by row from the bottom up."""
    points = [(int(x), int(y)) for x, y in vertices]
    if not points:
        return []
    ys = [y for _, y in points]
    table = build_edge_table(points)
    active: list[Edge] = []
    filled: list[tuple[int, int]] = []
    for y in range(min(ys), max(ys) + 1):
        active.extend(table.get(y, []))
        active = [edge for edge in active if edge.y_max > y]
        active.sort(key=lambda edge: edge.x_cur)
        for left, right in zip(active[0::2], active[1::2]):
            filled.extend((x, y) for x in range(int(left.x_cur), int(right.x_cur)))
        for edge in active:
            edge.advance()
    return filled