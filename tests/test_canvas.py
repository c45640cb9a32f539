import pytest
from hypothesis import given
from hypothesis import strategies as st

from rastergfx.canvas import Canvas

RED = (255, 0, 0)


def _colored_count(canvas, color):
    data = canvas.to_ppm()
    body = data[len(data) - canvas.width * canvas.height * 3 :]
    target = bytes(color)
    return sum(1 for i in range(0, len(body), 3) if body[i : i + 3] == target)


def test_rejects_non_positive_size():
    with pytest.raises(ValueError):
        Canvas(width=0)


def test_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        Canvas(left=10, right=0)


def test_rejects_bad_color():
    canvas = Canvas(10, 10, 0, 10, 0, 10)
    with pytest.raises(ValueError):
        canvas.plot(1, 1, (300, 0, 0))


def test_background_fills_canvas():
    canvas = Canvas(10, 10, 0, 10, 0, 10, (1, 2, 3))
    assert canvas.pixel(5, 5) == (1, 2, 3)
    assert _colored_count(canvas, (1, 2, 3)) == 100


def test_to_screen_corners():
    canvas = Canvas(10, 10, 0, 10, 0, 10)
    assert canvas.to_screen(0, 0) == (0, 9)
    assert canvas.to_screen(9.5, 9.5) == (9, 0)
    assert canvas.to_screen(10, 10) is None


@given(st.integers(-50, 49), st.integers(-50, 49))
def test_plot_then_pixel_round_trip(x, y):
    canvas = Canvas(100, 100, -50, 50, -50, 50)
    assert canvas.plot(x, y, RED) is True
    assert canvas.pixel(x, y) == RED
    assert _colored_count(canvas, RED) == 1


def test_plot_outside_is_ignored():
    canvas = Canvas(10, 10, 0, 10, 0, 10)
    assert canvas.plot(20, 20, RED) is False
    assert _colored_count(canvas, RED) == 0
    with pytest.raises(IndexError):
        canvas.pixel(20, 20)


def test_plot_all_counts_points_on_canvas():
    canvas = Canvas(10, 10, 0, 10, 0, 10)
    assert canvas.plot_all([(1, 1), (2, 2), (50, 50)], RED) == 2


def test_horizontal_line_covers_row():
    canvas = Canvas(10, 10, 0, 10, 0, 10)
    canvas.line(0, 0, 9, 0, RED)
    assert all(canvas.pixel(x + 0.5, 0.5) == RED for x in range(10))
    assert _colored_count(canvas, RED) == 10


@given(
    st.integers(0, 19), st.integers(0, 19), st.integers(0, 19), st.integers(0, 19)
)
def test_line_pixel_count_and_endpoints(x1, y1, x2, y2):
    canvas = Canvas(20, 20, 0, 20, 0, 20)
    canvas.line(x1, y1, x2, y2, RED)
    assert canvas.pixel(x1, y1) == RED
    assert canvas.pixel(x2, y2) == RED
    assert _colored_count(canvas, RED) == max(abs(x2 - x1), abs(y2 - y1)) + 1


def test_line_loop_closes_outline():
    canvas = Canvas(20, 20, 0, 20, 0, 20)
    square = [(2, 2), (12, 2), (12, 12), (2, 12)]
    canvas.line_loop(square, RED)
    assert all(canvas.pixel(x, y) == RED for x, y in square)
    assert canvas.pixel(2, 7) == RED
    assert canvas.pixel(7, 7) == canvas.background


def test_ppm_header_and_size():
    canvas = Canvas(4, 3, 0, 4, 0, 3)
    data = canvas.to_ppm()
    header = b"P6\n4 3\n255\n"
    assert data.startswith(header)
    assert len(data) == len(header) + 4 * 3 * 3


def test_save_ppm_writes_same_bytes(tmp_path):
    canvas = Canvas(5, 5, 0, 5, 0, 5)
    canvas.plot(2, 2, RED)
    target = tmp_path / "out.ppm"
    canvas.save_ppm(target)
    assert target.read_bytes() == canvas.to_ppm()