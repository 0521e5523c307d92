import json

import pytest

from minotaur.model import Bitmap, Color, Path, PathSet, Vec2
from minotaur.serialization import (
    IDENTITY_MAT3,
    bitmap_from_json,
    bitmap_to_json,
    color_from_json,
    color_to_json,
    mat3_from_json,
    mat3_to_json,
    path_from_json,
    path_to_json,
    pathset_from_json,
    pathset_to_json,
    vec2_from_json,
    vec2_to_json,
)


def _through_text(data):
    return json.loads(json.dumps(data))


def test_vec2_keys():
    assert vec2_to_json(Vec2(1.5, -2.0)) == {"x": 1.5, "y": -2.0}


def test_vec2_round_trip():
    v = Vec2(12.25, 99.5)
    assert vec2_from_json(_through_text(vec2_to_json(v))) == v


def test_vec2_defaults_to_zero():
    assert vec2_from_json({}) == Vec2(0.0, 0.0)
    assert vec2_from_json({"y": 3}) == Vec2(0.0, 3.0)


def test_vec2_wrong_type_raises():
    with pytest.raises(TypeError):
        vec2_from_json({"x": "abc"})


def test_color_keys_and_round_trip():
    c = Color(0.2, 0.4, 0.6, 0.8)
    data = color_to_json(c)
    assert set(data) == {"r", "g", "b", "a"}
    assert color_from_json(_through_text(data)) == c


def test_color_defaults_to_one():
    assert color_from_json({"r": 0.5}) == Color(0.5, 1.0, 1.0, 1.0)


def test_mat3_round_trip():
    m = [2.0, 0.0, 10.0, 0.0, 3.0, 20.0, 0.0, 0.0, 1.0]
    assert list(mat3_from_json(_through_text(mat3_to_json(m)))) == m


@pytest.mark.parametrize("bad", [None, [], [1.0] * 8, [1.0] * 10, {"a": 1}])
def test_mat3_invalid_is_identity(bad):
    assert mat3_from_json(bad) == IDENTITY_MAT3


def test_identity_fallback_is_unit_diagonal():
    m = list(mat3_from_json(None))
    assert len(m) == 9
    assert [m[i * 4] for i in range(3)] == [1.0, 1.0, 1.0]
    assert sum(m) == 3.0
    assert mat3_to_json(m) == [1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0]


def test_mat3_to_json_wrong_length_raises():
    with pytest.raises(ValueError):
        mat3_to_json([1.0, 2.0])


def test_path_round_trip():
    p = Path(points=[Vec2(0, 0), Vec2(10, 5), Vec2(3, 7)], closed=True)
    assert path_from_json(_through_text(path_to_json(p))) == p


def test_path_defaults_open_and_empty():
    p = path_from_json({})
    assert p.closed is False
    assert p.points == []


def test_pathset_round_trip():
    ps = PathSet(
        paths=[
            Path(points=[Vec2(1, 2), Vec2(3, 4)], closed=False),
            Path(points=[Vec2(5, 6)], closed=True),
        ],
        color=Color(0.9, 0.2, 0.2, 1.0),
    )
    assert pathset_from_json(_through_text(pathset_to_json(ps))) == ps


def test_pathset_defaults():
    ps = pathset_from_json({})
    assert ps.paths == []
    assert ps.color == Color()


def test_bitmap_keys_and_round_trip():
    b = Bitmap(width_px=2, height_px=2, pixel_size_mm=0.5,
               pixels=bytearray([0, 128, 255, 7]))
    data = bitmap_to_json(b)
    assert set(data) == {"w_px", "h_px", "pixel_size_mm", "pixels"}
    assert data["pixels"] == [0, 128, 255, 7]
    restored = bitmap_from_json(_through_text(data))
    assert restored == b
    assert restored.pixel(1, 1) == 7


def test_bitmap_defaults():
    b = bitmap_from_json({})
    assert (b.width_px, b.height_px) == (0, 0)
    assert b.pixel_size_mm == 1.0
    assert b.pixels == bytearray()


def test_bitmap_pixel_out_of_range_raises():
    with pytest.raises(ValueError):
        bitmap_from_json({"w_px": 1, "h_px": 1, "pixels": [300]})


def test_non_object_raises():
    with pytest.raises(TypeError):
        pathset_from_json([1, 2, 3])