"""A small in-memory raster canvas with a 2D orthographic world mapping."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from pathlib import Path

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)


def _check_color(color: Iterable[int]) -> Color:
    values = tuple(color)
    if len(values) != 3 or not all(
        isinstance(v, int) and 0 <= v <= 255 for v in values
    ):
        raise ValueError(f"color must be three integers in 0..255, got {color!r}")
    return values  # type: ignore[return-value]


def _line_pixels(c0: int, r0: int, c1: int, r1: int) -> Iterator[tuple[int, int]]:
    """Yield the pixels of a straight line between two pixel positions."""
    dc = abs(c1 - c0)
    dr = -abs(r1 - r0)
    step_c = 1 if c0 < c1 else -1
    step_r = 1 if r0 < r1 else -1
    err = dc + dr
    while True:
        yield c0, r0
        if c0 == c1 and r0 == r1:
            return
        e2 = 2 * err
        if e2 >= dr:
            err += dr
            c0 += step_c
        if e2 <= dc:
            err += dc
            r0 += step_r


class Canvas:
    """An RGB pixel grid addressed in world coordinates.

    The world rectangle ``[left, right] x [bottom, top]`` is stretched over
    the whole canvas, with ``y`` growing upwards, as an orthographic 2D
    projection does.
    """

    def __init__(
        self,
        width: int = 500,
        height: int = 500,
        left: float = 0.0,
        right: float = 500.0,
        bottom: float = 0.0,
        top: float = 500.0,
        background: Color = BLACK,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas width and height must be positive")
        if right <= left or top <= bottom:
            raise ValueError("world bounds must satisfy left < right and bottom < top")
        self.width = width
        self.height = height
        self.left = left
        self.right = right
        self.bottom = bottom
        self.top = top
        self.background = _check_color(background)
        self._pixels = bytearray(bytes(self.background) * (width * height))

    def _map(self, x: float, y: float) -> tuple[int, int]:
        col = math.floor((x - self.left) * self.width / (self.right - self.left))
        up = math.floor((y - self.bottom) * self.height / (self.top - self.bottom))
        return col, self.height - 1 - up

    def _contains(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row < self.height

    def _set(self, col: int, row: int, color: Color) -> None:
        offset = (row * self.width + col) * 3
        self._pixels[offset : offset + 3] = bytes(color)

    def to_screen(self, x: float, y: float) -> tuple[int, int] | None:
        """Return the (column, row) of a world point, or None when off the canvas."""
        col, row = self._map(x, y)
        return (col, row) if self._contains(col, row) else None

    def plot(self, x: float, y: float, color: Color) -> bool:
        """Colour the pixel under a world point; return whether it was on the canvas."""
        color = _check_color(color)
        position = self.to_screen(x, y)
        if position is None:
            return False
        self._set(*position, color)
        return True

    def plot_all(self, points: Iterable[tuple[float, float]], color: Color) -> int:
        """Plot many points and return how many landed on the canvas."""
        return sum(self.plot(x, y, color) for x, y in points)

    def line(self, x1: float, y1: float, x2: float, y2: float, color: Color) -> None:
        """Draw a straight line segment between two world points."""
        color = _check_color(color)
        for col, row in _line_pixels(*self._map(x1, y1), *self._map(x2, y2)):
            if self._contains(col, row):
                self._set(col, row, color)

    def line_loop(self, points: Iterable[tuple[float, float]], color: Color) -> None:
        """Draw a closed outline through the points in order."""
        vertices = list(points)
        if len(vertices) == 1:
            self.plot(*vertices[0], color)
            return
        for (x1, y1), (x2, y2) in zip(vertices, vertices[1:] + vertices[:1]):
            self.line(x1, y1, x2, y2, color)

    def pixel(self, x: float, y: float) -> Color:
        """Return the colour under a world point."""
        position = self.to_screen(x, y)
        if position is None:
            raise IndexError(f"point ({x}, {y}) lies outside the canvas")
        col, row = position
        offset = (row * self.width + col) * 3
        r, g, b = self._pixels[offset : offset + 3]
        return r, g, b

    def to_ppm(self) -> bytes:
        """Encode the canvas as a binary PPM (P6) image."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        return header + bytes(self._pixels)

    def save_ppm(self, path: str | Path) -> None:
        """Write the canvas to a binary PPM file."""
        Path(path).write_bytes(self.to_ppm())