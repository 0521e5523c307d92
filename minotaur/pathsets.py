"""Generators for simple vector shapes and text as path sets."""

from __future__ import annotations

import math

from minotaur.model import Color, Path, PathSet, Vec2
from minotaur.vectorfont import text_to_paths


def circle(
    center_mm: Vec2,
    radius_mm: float,
    segments: int = 64,
    color: Color = Color(0.9, 0.2, 0.2, 1.0),
) -> PathSet:
    """A closed regular polygon approximating a circle (at least 3 sides)."""
    segments = max(segments, 3)
    points = [
        Vec2(
            center_mm.x + radius_mm * math.cos(math.tau * i / segments),
            center_mm.y + radius_mm * math.sin(math.tau * i / segments),
        )
        for i in range(segments)
    ]
    return PathSet(paths=[Path(points=points, closed=True)], color=color)


def square(
    center_mm: Vec2,
    side_mm: float,
    color: Color = Color(0.2, 0.7, 0.9, 1.0),
) -> PathSet:
    """A closed axis-aligned square centred on ``center_mm``."""
    h = side_mm * 0.5
    corners = [Vec2(-h, -h), Vec2(h, -h), Vec2(h, h), Vec2(-h, h)]
    points = [center_mm + c for c in corners]
    return PathSet(paths=[Path(points=points, closed=True)], color=color)


def star(
    center_mm: Vec2,
    outer_radius_mm: float,
    inner_radius_mm: float,
    points: int = 5,
    color: Color = Color(0.95, 0.8, 0.2, 1.0),
) -> PathSet:
    """A closed star with its first tip at the top (at least 2 points)."""
    points = max(points, 2)
    verts = points * 2
    outline = []
    for i in range(verts):
        angle = math.tau * i / verts - math.pi * 0.5
        radius = outer_radius_mm if i % 2 == 0 else inner_radius_mm
        outline.append(
            Vec2(
                center_mm.x + radius * math.cos(angle),
                center_mm.y + radius * math.sin(angle),
            )
        )
    return PathSet(paths=[Path(points=outline, closed=True)], color=color)


def text(
    text: str,
    origin_mm: Vec2,
    height_mm: float = 10.0,
    letter_spacing_units: float = 2.0,
    color: Color = Color(1.0, 1.0, 1.0, 1.0),
) -> PathSet:
    """Text drawn with the built-in stroke font; height is the cap height."""
    paths = text_to_paths(
        text, origin_mm.x, origin_mm.y, height_mm, letter_spacing_units
    )
    return PathSet(paths=paths, color=color)