import pytest

from rastergfx.flag import FlagScene, Shape


@pytest.fixture
def scene():
    return FlagScene(window_size=50, left=-20, right=30, bottom=-15, top=15, radius=8)


def _lattice(scene, predicate):
    half = scene.window_size // 2
    return {
        (x, y)
        for x in range(-half, scene.window_size - half)
        for y in range(-half, scene.window_size - half)
        if predicate(x, y)
    }


def test_rectangle_is_open(scene):
    assert scene.inside_rectangle(0, 0) is True
    assert scene.inside_rectangle(scene.right, 0) is False
    assert scene.inside_rectangle(scene.left, 0) is False
    assert scene.inside_rectangle(0, scene.top) is False


def test_circle_is_closed(scene):
    assert scene.inside_circle(scene.radius, 0) is True
    assert scene.inside_circle(scene.radius + 1, 0) is False


def test_mouse_to_world():
    scene = FlagScene()
    assert scene.mouse_to_world(250, 250) == (0, 0)
    assert scene.mouse_to_world(0, 0) == (-250, 250)


def test_circle_fill_covers_disc(scene):
    filled = scene.flood_fill(0, 0, Shape.CIRCLE)
    assert filled[0] == (0, 0)
    assert len(filled) == len(set(filled))
    assert set(filled) == _lattice(scene, scene.inside_circle)


def test_rectangle_fill_ignores_circle(scene):
    filled = scene.flood_fill(-15, 10, "rectangle")
    assert set(filled) == _lattice(scene, scene.inside_rectangle)
    assert (0, 0) in filled


def test_fill_outside_shape_is_empty(scene):
    assert scene.flood_fill(scene.radius + 1, 0, Shape.CIRCLE) == []


def test_fill_stays_in_window():
    scene = FlagScene(window_size=20, left=-50, right=50, bottom=-50, top=50, radius=0)
    filled = scene.flood_fill(1, 1, Shape.RECTANGLE)
    assert all(-10 <= x < 10 and -10 <= y < 10 for x, y in filled)
    assert len(filled) == scene.window_size**2


def test_click_prefers_circle(scene):
    half = scene.window_size // 2
    shape, points = scene.click(half, half)
    assert shape is Shape.CIRCLE
    assert all(scene.inside_circle(x, y) for x, y in points)


def test_click_in_rectangle(scene):
    half = scene.window_size // 2
    shape, points = scene.click(half - 15, half - 10)
    assert shape is Shape.RECTANGLE
    assert (-15, 10) in points


def test_click_outside_everything(scene):
    assert scene.click(0, 0) is None


def test_rectangle_outline(scene):
    assert scene.rectangle_outline() == [(-20, -15), (30, -15), (30, 15), (-20, 15)]


def test_circle_outline_is_near_boundary_and_symmetric(scene):
    outline = scene.circle_outline()
    r2 = scene.radius**2
    assert outline
    assert all(abs(x * x + y * y - r2) <= 50 for x, y in outline)
    assert {(-x, y) for x, y in outline} == set(outline)
    assert (scene.radius, 0) in outline


def test_unknown_shape_raises(scene):
    with pytest.raises(ValueError):
        scene.flood_fill(0, 0, "triangle")


def test_invalid_scene_raises():
    with pytest.raises(ValueError):
        FlagScene(window_size=0)