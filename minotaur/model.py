"""Core geometry and raster types shared across the package."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vec2:
    """A 2D vector or point, usually in millimetres."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in 0..1."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0


@dataclass
class Path:
    """A polyline, optionally closed back to its first point."""

    points: list[Vec2] = field(default_factory=list)
    closed: bool = False


@dataclass
class PathSet:
    """A group of paths drawn in one colour."""

    paths: list[Path] = field(default_factory=list)
    color: Color = field(default_factory=Color)


@dataclass
class Bitmap:
    """An 8-bit greyscale image stored row by row, bottom row first."""

    width_px: int = 0
    height_px: int = 0
    pixel_size_mm: float = 1.0
    pixels: bytearray = field(default_factory=bytearray)

    def pixel(self, x: int, y: int) -> int:
        """Return the grey value at column ``x`` and row ``y``."""
        if not (0 <= x < self.width_px and 0 <= y < self.height_px):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width_px}x{self.height_px} bitmap"
            )
        return self.pixels[y * self.width_px + x]