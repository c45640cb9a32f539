import pytest

from rastergfx import demos
from rastergfx.canvas import BLACK, WHITE
from rastergfx.demos import main, render_demo


def test_basic_plots_points():
    canvas = render_demo("basic")
    assert canvas.pixel(2, 8) == WHITE
    assert canvas.pixel(5, -5) == BLACK


def test_circle_bresenham_fill_covers_centre():
    canvas = render_demo("circle-bresenham")
    assert canvas.pixel(250, 250) == demos.BLUE
    assert canvas.pixel(10, 10) == BLACK


def test_circle_midpoint_outline():
    canvas = render_demo("circle-midpoint")
    assert canvas.pixel(400, 250) == WHITE
    assert canvas.pixel(250, 250) == BLACK


def test_ellipse_demos_start_at_top():
    assert render_demo("ellipse-bresenham").pixel(250, 350) == demos.CYAN
    assert render_demo("ellipse-midpoint").pixel(250, 350) == demos.ORANGE


def test_flag_without_clicks_has_white_centre():
    assert render_demo("flag").pixel(0, 0) == WHITE


def test_flag_click_fills_disc_red():
    canvas = render_demo("flag", clicks=[(250, 250)])
    assert canvas.pixel(0, 0) == demos.RED
    assert canvas.pixel(150, 0) == WHITE


def test_line_clipping_views():
    plain = render_demo("line-clipping")
    clipped = render_demo("line-clipping", clip=True)
    assert plain.pixel(-150, 50) == demos.RED
    assert clipped.pixel(-150, 50) == WHITE
    assert clipped.pixel(0, 50) == demos.GREEN


def test_polygon_clipping_views():
    assert render_demo("polygon-clipping").pixel(100, 150) == demos.RED
    assert render_demo("polygon-clipping", clip=True).pixel(100, 150) == BLACK


def test_scanline_fills_pentagon():
    canvas = render_demo("scanline")
    assert canvas.pixel(250, 250) == demos.TEAL
    assert canvas.pixel(10, 10) == demos.DARK_GREY


def test_unknown_demo_raises():
    with pytest.raises(ValueError):
        render_demo("teapot")


def test_main_writes_ppm(tmp_path, capsys):
    path = tmp_path / "basic.ppm"
    assert main(["basic", "-o", str(path)]) == 0
    data = path.read_bytes()
    assert data == render_demo("basic").to_ppm()
    assert data.startswith(b"P6\n500 500\n255\n")
    assert str(path) in capsys.readouterr().out


def test_main_passes_clicks_and_clip(tmp_path):
    flag_path = tmp_path / "flag.ppm"
    clip_path = tmp_path / "lines.ppm"
    main(["flag", "--click", "250,250", "-o", str(flag_path)])
    main(["line-clipping", "--clip", "-o", str(clip_path)])
    assert flag_path.read_bytes() == render_demo("flag", clicks=[(250, 250)]).to_ppm()
    assert clip_path.read_bytes() == render_demo("line-clipping", clip=True).to_ppm()


def test_main_rejects_bad_arguments():
    with pytest.raises(SystemExit):
        main(["teapot"])
    with pytest.raises(SystemExit):
        main(["flag", "--click", "nowhere"])