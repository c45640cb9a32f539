"""The flag scene: a rectangle and a disc outlined and filled by flood fill."""

from __future__ import annotations

from enum import Enum

from rastergfx.canvas import Color


class Shape(str, Enum):
    """The region a flood fill is confined to."""

    CIRCLE = "circle"
    RECTANGLE = "rectangle"


FILL_COLORS: dict[Shape, Color] = {
    Shape.CIRCLE: (255, 0, 0),
    Shape.RECTANGLE: (0, 153, 0),
}

_OUTLINE_TOLERANCE = 50


class FlagScene:
    """A centred rectangle with a disc at the origin on a square window."""

    def __init__(
        self,
        window_size: int = 500,
        left: int = -200,
        right: int = 200,
        bottom: int = -120,
        top: int = 120,
        radius: int = 80,
    ) -> None:
        if window_size <= 0:
            raise ValueError("window size must be positive")
        if right <= left or top <= bottom:
            raise ValueError("rectangle must satisfy left < right and bottom < top")
        if radius < 0:
            raise ValueError("radius must not be negative")
        self.window_size = window_size
        self.left = left
        self.right = right
        self.bottom = bottom
        self.top = top
        self.radius = radius

    def inside_rectangle(self, x: int, y: int) -> bool:
        """Return whether a point lies strictly inside the rectangle."""
        return self.left < x < self.right and self.bottom < y < self.top

    def inside_circle(self, x: int, y: int) -> bool:
        """Return whether a point lies in the closed disc."""
        return x * x + y * y <= self.radius * self.radius

    def flood_fill(self, x: int, y: int, shape: Shape | str) -> list[tuple[int, int]]:
        """Return the points reached by a four-way flood fill from (x, y).

        Points are listed in the order a depth-first fill visits them, trying
        right, left, up and down in turn. The fill stays inside the shape and
        the window.
        """
        contains = (
            self.inside_circle if Shape(shape) is Shape.CIRCLE else self.inside_rectangle
        )
        half = self.window_size // 2
        visited: set[tuple[int, int]] = set()
        filled: list[tuple[int, int]] = []
        stack = [(x, y)]
        while stack:
            px, py = stack.pop()
            if not contains(px, py):
                continue
            if not (
                0 <= px + half < self.window_size and 0 <= py + half < self.window_size
            ):
                continue
            if (px, py) in visited:
                continue
            visited.add((px, py))
            filled.append((px, py))
            stack.extend(((px, py - 1), (px, py + 1), (px - 1, py), (px + 1, py)))
        return filled

    def rectangle_outline(self) -> list[tuple[int, int]]:
        """Return the rectangle's corners in drawing order."""
        return [
            (self.left, self.bottom),
            (self.right, self.bottom),
            (self.right, self.top),
            (self.left, self.top),
        ]

    def circle_outline(self) -> list[tuple[int, int]]:
        """Return the lattice points close to the circle's boundary."""
        r = self.radius
        return [
            (x, y)
            for x in range(-r, r + 1)
            for y in range(-r, r + 1)
            if abs(x * x + y * y - r * r) <= _OUTLINE_TOLERANCE
        ]

    def mouse_to_world(self, x: int, y: int) -> tuple[int, int]:
        """Convert window coordinates (origin top left) to world coordinates."""
        half = self.window_size // 2
        return x - half, half - y

    def click(self, x: int, y: int) -> tuple[Shape, list[tuple[int, int]]] | None:
        """Handle a click in window coordinates: fill the shape under it, if any."""
        wx, wy = self.mouse_to_world(x, y)
        if self.inside_circle(wx, wy):
            return Shape.CIRCLE, self.flood_fill(wx, wy, Shape.CIRCLE)
        if self.inside_rectangle(wx, wy):
            return Shape.RECTANGLE, self.flood_fill(wx, wy, Shape.RECTANGLE)
        return None