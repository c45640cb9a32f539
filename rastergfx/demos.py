"""The demo scenes rendered to images, and the command that writes them."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable
from pathlib import Path

from rastergfx.basic import basic_points
from rastergfx.canvas import BLACK, WHITE, Canvas, Color
from rastergfx.circles import bresenham_circle, fill_circle_spans, midpoint_circle
from rastergfx.clipping import DEFAULT_SEGMENTS, DEFAULT_TRIANGLE, ClipWindow
from rastergfx.ellipses import bresenham_ellipse, midpoint_ellipse
from rastergfx.flag import FILL_COLORS, FlagScene
from rastergfx.scanline import PENTAGON, scanline_fill

RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
BLUE: Color = (0, 0, 255)
CYAN: Color = (0, 255, 255)
ORANGE: Color = (255, 128, 0)
TEAL: Color = (0, 204, 204)
DARK_GREY: Color = (26, 26, 26)

Click = tuple[int, int]
_Renderer = Callable[[bool, list[Click]], Canvas]


def _basic(clip: bool, clicks: list[Click]) -> Canvas:
    canvas = Canvas(500, 500, -10, 10, -10, 10, BLACK)
    canvas.plot_all(basic_points(), WHITE)
    return canvas


def _circle_bresenham(clip: bool, clicks: list[Click]) -> Canvas:
    canvas = Canvas(500, 500, 0, 500, 0, 500, BLACK)
    canvas.plot(250, 250, RED)
    canvas.plot_all(bresenham_circle(250, 250, 100), GREEN)
    for x1, x2, y in fill_circle_spans(250, 250, 100):
        canvas.line(x1, y, x2, y, BLUE)
    return canvas


def _circle_midpoint(clip: bool, clicks: list[Click]) -> Canvas:
    canvas = Canvas(500, 500, 0, 500, 0, 500, BLACK)
    canvas.plot_all(midpoint_circle(250, 250, 150), WHITE)
    return canvas


def _ellipse_bresenham(clip: bool, clicks: list[Click]) -> Canvas:
    canvas = Canvas(500, 500, 0, 500, 0, 500, BLACK)
    canvas.plot_all(bresenham_ellipse(250, 250, 200, 100), CYAN)
    return canvas


def _ellipse_midpoint(clip: bool, clicks: list[Click]) -> Canvas:
    canvas = Canvas(500, 500, 0, 500, 0, 500, BLACK)
    canvas.plot_all(midpoint_ellipse(250, 250, 150, 100), ORANGE)
    return canvas


def _flag(clip: bool, clicks: list[Click]) -> Canvas:
    scene = FlagScene()
    half = scene.window_size // 2
    canvas = Canvas(scene.window_size, scene.window_size, -half, half, -half, half, WHITE)
    canvas.line_loop(scene.rectangle_outline(), BLACK)
    canvas.plot_all(scene.circle_outline(), BLACK)
    for x, y in clicks:
        result = scene.click(x, y)
        if result is not None:
            shape, points = result
            canvas.plot_all(points, FILL_COLORS[shape])
    return canvas


def _clip_canvas(background: Color, window: ClipWindow) -> Canvas:
    canvas = Canvas(600, 600, -300, 300, -300, 300, background)
    canvas.line_loop(window.corners(), BLUE)
    return canvas


def _line_clipping(clip: bool, clicks: list[Click]) -> Canvas:
    window = ClipWindow()
    canvas = _clip_canvas(WHITE, window)
    for p1, p2 in DEFAULT_SEGMENTS:
        if not clip:
            canvas.line(*p1, *p2, RED)
            continue
        visible = window.clip_line(p1, p2)
        if visible is not None:
            (x1, y1), (x2, y2) = visible
            canvas.line(x1, y1, x2, y2, GREEN)
    return canvas


def _polygon_clipping(clip: bool, clicks: list[Click]) -> Canvas:
    window = ClipWindow()
    canvas = _clip_canvas(BLACK, window)
    if clip:
        canvas.line_loop(window.clip_polygon(DEFAULT_TRIANGLE), GREEN)
    else:
        canvas.line_loop(DEFAULT_TRIANGLE, RED)
    return canvas


def _scanline(clip: bool, clicks: list[Click]) -> Canvas:
    canvas = Canvas(500, 500, 0, 500, 0, 500, DARK_GREY)
    canvas.plot_all(scanline_fill(PENTAGON), TEAL)
    return canvas


_DEMOS: dict[str, _Renderer] = {
    "basic": _basic,
    "circle-bresenham": _circle_bresenham,
    "circle-midpoint": _circle_midpoint,
    "ellipse-bresenham": _ellipse_bresenham,
    "ellipse-midpoint": _ellipse_midpoint,
    "flag": _flag,
    "line-clipping": _line_clipping,
    "polygon-clipping": _polygon_clipping,
    "scanline": _scanline,
}

DEMO_NAMES: tuple[str, ...] = tuple(sorted(_DEMOS))


def render_demo(
    name: str, clip: bool = False, clicks: Iterable[Click] = ()
) -> Canvas:
    """Render a named demo scene.

    ``clip`` switches the clipping demos to their clipped view; ``clicks``
    are mouse positions in window coordinates, used by the flag demo.
    """
    try:
        renderer = _DEMOS[name]
    except KeyError:
        raise ValueError(
            f"unknown demo {name!r}; choose from {', '.join(DEMO_NAMES)}"
        ) from None
    return renderer(clip, [(int(x), int(y)) for x, y in clicks])


def _parse_click(text: str) -> Click:
    try:
        x, y = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"click must look like X,Y, got {text!r}"
        ) from None
    return x, y


def main(argv: list[str] | None = None) -> int:
    """Render a demo and write it as a PPM image."""
    parser = argparse.ArgumentParser(
        prog="rastergfx", description="Render a raster graphics demo to a PPM image."
    )
    parser.add_argument("demo", choices=DEMO_NAMES)
    parser.add_argument("-o", "--output", type=Path, help="image file to write")
    parser.add_argument(
        "--clip", action="store_true", help="show the clipped view of a clipping demo"
    )
    parser.add_argument(
        "--click",
        action="append",
        type=_parse_click,
        default=[],
        metavar="X,Y",
        help="mouse click in window coordinates (flag demo); may repeat",
    )
    args = parser.parse_args(argv)
    canvas = render_demo(args.demo, clip=args.clip, clicks=args.click)
    output = args.output or Path(f"{args.demo}.ppm")
    canvas.save_ppm(output)
    print(output)
    return 0