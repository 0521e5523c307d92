import pytest

from minotaur.model import Bitmap, Color, Path, PathSet, Vec2


def test_vec2_add_and_sub_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(3.0, 4.25)
    assert (a + b) - b == a
    assert a + b == Vec2(4.5, 2.25)


def test_vec2_scalar_multiply_both_sides():
    v = Vec2(2.0, -3.0)
    assert v * 0.5 == Vec2(1.0, -1.5)
    assert 2 * v == v + v


def test_vec2_defaults_to_origin():
    assert Vec2() == Vec2(0.0, 0.0)


def test_vec2_add_rejects_non_vector():
    with pytest.raises(TypeError):
        Vec2(1.0, 1.0) + 3


def test_color_defaults_white_opaque():
    c = Color()
    assert (c.r, c.g, c.b, c.a) == (1.0, 1.0, 1.0, 1.0)


def test_path_and_pathset_defaults_are_independent():
    first = Path()
    second = Path()
    first.points.append(Vec2(1.0, 1.0))
    assert second.points == []
    assert first.closed is False
    ps_a, ps_b = PathSet(), PathSet()
    ps_a.paths.append(first)
    assert ps_b.paths == []


def test_bitmap_pixel_reads_row_major():
    bm = Bitmap(width_px=3, height_px=2, pixels=bytearray(range(6)))
    assert bm.pixel(0, 0) == 0
    assert bm.pixel(2, 0) == 2
    assert bm.pixel(0, 1) == 3
    assert bm.pixel(2, 1) == 5


@pytest.mark.parametrize("x,y", [(-1, 0), (3, 0), (0, 2), (0, -1)])
def test_bitmap_pixel_out_of_range(x, y):
    bm = Bitmap(width_px=3, height_px=2, pixels=bytearray(6))
    with pytest.raises(IndexError):
        bm.pixel(x, y)