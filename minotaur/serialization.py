"""JSON conversions for the core geometry and raster types.

Each ``*_to_json`` function returns plain Python data ready for
:func:`json.dumps`; each ``*_from_json`` function accepts such data and
fills in defaults for missing keys.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from minotaur.model import Bitmap, Color, Path, PathSet, Vec2

IDENTITY_MAT3: tuple[float, ...] = (
    1.0, 0.0, 0.0,
    0.0, 1.0, 0.0,
    0.0, 0.0, 1.0,
)


def _number(data: Mapping[str, Any], key: str, default: float) -> float:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key!r} must be a number, got {type(value).__name__}")
    return float(value)


def _integer(data: Mapping[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key!r} must be a number, got {type(value).__name__}")
    return int(value)


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"{what} must be an object, got {type(data).__name__}")
    return data


def _array(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise TypeError(f"{key!r} must be an array, got {type(value).__name__}")
    return value


def vec2_to_json(v: Vec2) -> dict[str, float]:
    """Encode a vector as ``{"x": ..., "y": ...}``."""
    return {"x": v.x, "y": v.y}


def vec2_from_json(data: Mapping[str, Any]) -> Vec2:
    """Decode a vector; missing components default to zero."""
    data = _mapping(data, "Vec2")
    return Vec2(_number(data, "x", 0.0), _number(data, "y", 0.0))


def color_to_json(c: Color) -> dict[str, float]:
    """Encode a colour as ``{"r", "g", "b", "a"}``."""
    return {"r": c.r, "g": c.g, "b": c.b, "a": c.a}


def color_from_json(data: Mapping[str, Any]) -> Color:
    """Decode a colour; missing components default to one."""
    data = _mapping(data, "Color")
    return Color(
        _number(data, "r", 1.0),
        _number(data, "g", 1.0),
        _number(data, "b", 1.0),
        _number(data, "a", 1.0),
    )


def mat3_to_json(m: Sequence[float]) -> list[float]:
    """Encode a 3x3 matrix given as nine values into a flat list."""
    values = [float(v) for v in m]
    if len(values) != 9:
        raise ValueError(f"a 3x3 matrix needs 9 values, got {len(values)}")
    return values


def mat3_from_json(data: Any) -> tuple[float, ...]:
    """Decode a flat nine-value matrix; anything else yields the identity."""
    if not isinstance(data, list) or len(data) != 9:
        return IDENTITY_MAT3
    values = []
    for v in data:
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise TypeError(f"matrix entries must be numbers, got {v!r}")
        values.append(float(v))
    return tuple(values)


def path_to_json(p: Path) -> dict[str, Any]:
    """Encode a path with its closed flag and points."""
    return {"closed": p.closed, "points": [vec2_to_json(pt) for pt in p.points]}


def path_from_json(data: Mapping[str, Any]) -> Path:
    """Decode a path; it is open and empty unless the data says otherwise."""
    data = _mapping(data, "Path")
    closed = data.get("closed", False)
    if not isinstance(closed, bool):
        raise TypeError(f"'closed' must be a boolean, got {closed!r}")
    return Path(
        points=[vec2_from_json(pt) for pt in _array(data, "points")],
        closed=closed,
    )


def pathset_to_json(ps: PathSet) -> dict[str, Any]:
    """Encode a path set with its colour and paths."""
    return {
        "color": color_to_json(ps.color),
        "paths": [path_to_json(p) for p in ps.paths],
    }


def pathset_from_json(data: Mapping[str, Any]) -> PathSet:
    """Decode a path set; missing colour is white, missing paths empty."""
    data = _mapping(data, "PathSet")
    color = color_from_json(data["color"]) if "color" in data else Color()
    return PathSet(
        paths=[path_from_json(p) for p in _array(data, "paths")],
        color=color,
    )


def bitmap_to_json(b: Bitmap) -> dict[str, Any]:
    """Encode a bitmap, storing its pixels as integers 0..255."""
    return {
        "w_px": b.width_px,
        "h_px": b.height_px,
        "pixel_size_mm": b.pixel_size_mm,
        "pixels": list(b.pixels),
    }


def bitmap_from_json(data: Mapping[str, Any]) -> Bitmap:
    """Decode a bitmap; pixel values must each fit in a byte."""
    data = _mapping(data, "Bitmap")
    raw = _array(data, "pixels")
    try:
        pixels = bytearray(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid bitmap pixel data: {exc}") from exc
    return Bitmap(
        width_px=_integer(data, "w_px", 0),
        height_px=_integer(data, "h_px", 0),
        pixel_size_mm=_number(data, "pixel_size_mm", 1.0),
        pixels=pixels,
    )