# rastergfx

Classic 2D raster graphics algorithms, computed as plain Python data and
drawn onto a small in-memory canvas that can be written out as a binary PPM
(P6) image. There are no dependencies beyond the standard library.

What's included:

- `rastergfx.circles`: Bresenham and midpoint circle outlines
  (`bresenham_circle`, `midpoint_circle`), the eight-way symmetry helper
  `eight_way_points`, and `fill_circle_spans` for a filled disc
- `rastergfx.ellipses`: `bresenham_ellipse` (integer decisions) and
  `midpoint_ellipse` (single-precision decisions), with `four_way_points`
- `rastergfx.scanline`: `build_edge_table` and `scanline_fill`, a polygon fill
  using an edge table and an active edge table of `Edge` records
- `rastergfx.clipping`: `ClipWindow` with Cohen–Sutherland line clipping
  (`clip_line`, `out_code`) and Sutherland–Hodgman polygon clipping
  (`clip_polygon`, `inside`, `intersection`), plus `Point`, `OutCode` and
  `WindowEdge`
- `rastergfx.flag`: `FlagScene`, a rectangle with a disc at its centre, filled
  by a four-way flood fill
- `rastergfx.basic`: `basic_points`, a simple mirrored point pattern
- `rastergfx.canvas`: `Canvas`, the pixel grid everything can be drawn on
- `rastergfx.demos`: the built-in scenes and the `rastergfx` command

## Installation

```
pip install .
```

To also install the test tools:

```
pip install ".[test]"
```

## Using the algorithms

Every algorithm returns coordinates, so you can inspect them or draw them
anywhere you like:

```python
from rastergfx.circles import midpoint_circle, fill_circle_spans
from rastergfx.ellipses import bresenham_ellipse
from rastergfx.scanline import scanline_fill
from rastergfx.clipping import ClipWindow, Point

points = midpoint_circle(250, 250, 150)      # list of (x, y) in plotting order
spans = fill_circle_spans(250, 250, 100)     # list of (x1, x2, y)
outline = bresenham_ellipse(250, 250, 200, 100)
filled = scanline_fill([(250, 400), (130, 320), (180, 150), (320, 150), (370, 320)])

window = ClipWindow(-100, 100, -100, 100)    # xmin, xmax, ymin, ymax
segment = window.clip_line(Point(-150, 50), Point(150, 50))   # None when rejected
clipped = window.clip_polygon([Point(100, 150), Point(200, 100), Point(-150, -100)])
```

`ClipWindow` raises `ValueError` when `xmin >= xmax` or `ymin >= ymax`.

## Drawing on a canvas

```python
from rastergfx.canvas import Canvas
from rastergfx.circles import bresenham_circle

canvas = Canvas(500, 500, 0, 500, 0, 500, (0, 0, 0))
canvas.plot_all(bresenham_circle(250, 250, 100), (0, 255, 0))
canvas.save_ppm("circle.ppm")
```

`Canvas(width, height, left, right, bottom, top, background)` maps the world
rectangle `[left, right] x [bottom, top]` onto the pixel grid, with `y`
growing upwards. `plot`, `plot_all`, `line` and `line_loop` draw into it;
points off the canvas are skipped (`plot` returns `False`, `plot_all` returns
how many landed). `to_screen` gives the pixel position of a world point or
`None`, `pixel` reads a colour back (raising `IndexError` off the canvas), and
`to_ppm` / `save_ppm` encode the image. Colours are `(r, g, b)` tuples of
integers in 0..255; anything else raises `ValueError`.

## Flood-filled flag

```python
from rastergfx.flag import FlagScene, Shape

scene = FlagScene(500, -200, 200, -120, 120, 80)
shape, points = scene.click(250, 250)   # inside the disc: Shape.CIRCLE
shape, points = scene.click(60, 250)    # inside the rectangle: Shape.RECTANGLE
scene.click(5, 5)                       # outside both: None
```

`click` takes window coordinates (origin top left), converts them with
`mouse_to_world`, and returns the shape under the click together with the
points a flood fill from there reaches. `flood_fill(x, y, shape)` can also be
called directly, and `rectangle_outline` and `circle_outline` give the points
of the two outlines.

## Command line

The `rastergfx` command renders one of the built-in demos to a PPM file:

```
rastergfx --help
rastergfx circle-midpoint -o circle.ppm
rastergfx line-clipping --clip
rastergfx flag --click 250,250 --click 60,250
```

The demos are `basic`, `circle-bresenham`, `circle-midpoint`,
`ellipse-bresenham`, `ellipse-midpoint`, `flag`, `line-clipping`,
`polygon-clipping` and `scanline`. Without `-o`/`--output` the image is
written to `<demo>.ppm` in the current directory, and the path written is
printed. `--clip` shows the clipped view of the two clipping demos; each
`--click X,Y` replays a mouse click in window coordinates for the flag demo.

`render_demo(name, clip, clicks)` in `rastergfx.demos` does the same from
Python and returns the `Canvas`; an unknown name raises `ValueError`.

## What it does not do

The package draws only into memory and into PPM files. It opens no window
and reads no keyboard or mouse: toggling the clipping view and clicking on
the flag are done by passing `--clip` and `--click` (or `clip` and `clicks`)
up front.

## Running the tests

```
pip install ".[test]"
pytest
```