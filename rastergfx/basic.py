"""The introductory point pattern: mirrored pairs stepping down a V shape."""

from __future__ import annotations


def basic_points(count: int = 5) -> list[tuple[float, float]]:
    """Return ``count`` mirrored point pairs starting at (0, 10).

    Each step moves two units outwards and two units down; every point is
    followed by its mirror image across the y axis.
    """
    points: list[tuple[float, float]] = []
    for step in range(count):
        x = float(2 * step)
        y = float(10 - 2 * step)
        points.append((x, y))
        points.append((-x, y))
    return points