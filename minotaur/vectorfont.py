"""Stroke-based vector font that turns text into open polylines.

Glyph coordinates span roughly -16..+16 font units vertically with Y
growing downwards; conversion flips Y to match page coordinates.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType

from minotaur.model import Path, Vec2

UNITS_TALL = 32.0
GLYPH_WIDTH_UNITS = 15.0
UNKNOWN_WIDTH_UNITS = 10.0
DEFAULT_HEIGHT_MM = 10.0


@dataclass(frozen=True)
class Command:
    """A pen command: ``'M'`` moves to a point, ``'L'`` draws a line to it."""

    op: str
    x: float
    y: float


_GLYPH_SOURCE = {
    " ": "",
    "!": "M0,-12 L0,2 M0,7 L-1,8 L0,9 L1,8 L0,7",
    "&": "M0,-10 L-1,-11 L0,-12 L1,-11 L1,-9 L0,-7 L-1,-6",
    "(": "M4,-16 L2,-14 L0,-11 L-2,-7 L-3,-2 L-3,2 L-2,7 L0,11 L2,14 L4,16",
    ")": "M-4,-16 L-2,-14 L0,-11 L2,-7 L3,-2 L3,2 L2,7 L0,11 L-2,14 L-4,16",
    "*": "M0,-12 L0,0 M-5,-9 L5,-3 M5,-9 L-5,-3",
    "+": "M0,-9 L0,9 M-9,0 L9,0",
    ",": "M1,8 L0,9 L-1,8 L0,7 L1,8 L1,10 L0,12 L-1,13",
    "-": "M-9,0 L9,0",
    ".": "M0,7 L-1,8 L0,9 L1,8 L0,7",
    "/": "M9,-16 L-9,16",
    "0": "M-1,-12 L-4,-11 L-6,-8 L-7,-3 L-7,0 L-6,5 L-4,8 L-1,9 L1,9 L4,8 "
         "L6,5 L7,0 L7,-3 L6,-8 L4,-11 L1,-12 L-1,-12",
    "1": "M-4,-8 L-2,-9 L1,-12 L1,9",
    "2": "M-6,-7 L-6,-8 L-5,-10 L-4,-11 L-2,-12 L2,-12 L4,-11 L5,-10 L6,-8 "
         "L6,-6 L5,-4 L3,-1 L-7,9 L7,9",
    "3": "M-5,-12 L6,-12 L0,-4 L3,-4 L5,-3 L6,-2 L7,1 L7,3 L6,6 L4,8 L1,9 "
         "L-2,9 L-5,8 L-6,7 L-7,5",
    "4": "M3,-12 L-7,2 L8,2 M3,-12 L3,9",
    "5": "M5,-12 L-5,-12 L-6,-3 L-5,-4 L-2,-5 L1,-5 L4,-4 L6,-2 L7,1 L7,3 "
         "L6,6 L4,8 L1,9 L-2,9 L-5,8 L-6,7 L-7,5",
    "6": "M6,-9 L5,-11 L2,-12 L0,-12 L-3,-11 L-5,-8 L-6,-3 L-6,2 L-5,6 L-3,8 "
         "L0,9 L1,9 L4,8 L6,6 L7,3 L7,2 L6,-1 L4,-3 L1,-4 L0,-4 L-3,-3 L-5,-1 "
         "L-6,2",
    "7": "M7,-12 L-3,9 M-7,-12 L7,-12",
    "8": "M-2,-12 L-5,-11 L-6,-9 L-6,-7 L-5,-5 L-3,-4 L1,-3 L4,-2 L6,0 L7,2 "
         "L7,5 L6,7 L5,8 L2,9 L-2,9 L-5,8 L-6,7 L-7,5 L-7,2 L-6,0 L-4,-2 "
         "L-1,-3 L3,-4 L5,-5 L6,-7 L6,-9 L5,-11 L2,-12 L-2,-12",
    "9": "M6,-5 L5,-2 L3,0 L0,1 L-1,1 L-4,0 L-6,-2 L-7,-5 L-7,-6 L-6,-9 "
         "L-4,-11 L-1,-12 L0,-12 L3,-11 L5,-9 L6,-5 L6,0 L5,5 L3,8 L0,9 L-2,9 "
         "L-5,8 L-6,6",
    ":": "M0,-5 L-1,-4 L0,-3 L1,-4 L0,-5 M0,7 L-1,8 L0,9 L1,8 L0,7",
    ";": "M0,-5 L-1,-4 L0,-3 L1,-4 L0,-5 M1,8 L0,9 L-1,8 L0,7 L1,8 L1,10 "
         "L0,12 L-1,13",
    "=": "M-9,-3 L9,-3 M-9,3 L9,3",
    "?": "M-6,-7 L-6,-8 L-5,-10 L-4,-11 L-2,-12 L2,-12 L4,-11 L5,-10 L6,-8 "
         "L6,-6 L5,-4 L4,-3 L0,-1 L0,2 M0,7 L-1,8 L0,9 L1,8 L0,7",
    "@": "M5,-4 L4,-6 L2,-7 L-1,-7 L-3,-6 L-4,-5 L-5,-2 L-5,1 L-4,3 L-2,4 "
         "L1,4 L3,3 L4,1 M-1,-7 L-3,-5 L-4,-2 L-4,1 L-3,3 L-2,4 M5,-7 L4,1 "
         "L4,3 L6,4 L8,4 L10,2 L11,-1 L11,-3 L10,-6 L9,-8 L7,-10 L5,-11 "
         "L2,-12 L-1,-12 L-4,-11 L-6,-10 L-8,-8 L-9,-6 L-10,-3 L-10,0 L-9,3 "
         "L-8,5 L-6,7 L-4,8 L-1,9 L2,9 L5,8 L7,7 L8,6 M6,-7 L5,1 L5,3 L6,4",
    "A": "M0,-12 L-8,9 M0,-12 L8,9 M-5,2 L5,2",
    "B": "M-7,-12 L-7,9 M-7,-12 L2,-12 L5,-11 L6,-10 L7,-8 L7,-6 L6,-4 L5,-3 "
         "L2,-2 M-7,-2 L2,-2 L5,-1 L6,0 L7,2 L7,5 L6,7 L5,8 L2,9 L-7,9",
    "C": "M8,-7 L7,-9 L5,-11 L3,-12 L-1,-12 L-3,-11 L-5,-9 L-6,-7 L-7,-4 "
         "L-7,1 L-6,4 L-5,6 L-3,8 L-1,9 L3,9 L5,8 L7,6 L8,4",
    "D": "M-7,-12 L-7,9 M-7,-12 L0,-12 L3,-11 L5,-9 L6,-7 L7,-4 L7,1 L6,4 "
         "L5,6 L3,8 L0,9 L-7,9",
    "E": "M-6,-12 L-6,9 M-6,-12 L7,-12 M-6,-2 L2,-2 M-6,9 L7,9",
    "F": "M-6,-12 L-6,9 M-6,-12 L7,-12 M-6,-2 L2,-2",
    "G": "M8,-7 L7,-9 L5,-11 L3,-12 L-1,-12 L-3,-11 L-5,-9 L-6,-7 L-7,-4 "
         "L-7,1 L-6,4 L-5,6 L-3,8 L-1,9 L3,9 L5,8 L7,6 L8,4 L8,1 M3,1 L8,1",
    "H": "M-7,-12 L-7,9 M7,-12 L7,9 M-7,-2 L7,-2",
    "I": "M0,-12 L0,9",
    "J": "M4,-12 L4,4 L3,7 L2,8 L0,9 L-2,9 L-4,8 L-5,7 L-6,4 L-6,2",
    "K": "M-7,-12 L-7,9 M7,-12 L-7,2 M-2,-3 L7,9",
    "L": "M-6,-12 L-6,9 M-6,9 L6,9",
    "M": "M-8,-12 L-8,9 M-8,-12 L0,9 M8,-12 L0,9 M8,-12 L8,9",
    "N": "M-7,-12 L-7,9 M-7,-12 L7,9 M7,-12 L7,9",
    "O": "M-2,-12 L-4,-11 L-6,-9 L-7,-7 L-8,-4 L-8,1 L-7,4 L-6,6 L-4,8 L-2,9 "
         "L2,9 L4,8 L6,6 L7,4 L8,1 L8,-4 L7,-7 L6,-9 L4,-11 L2,-12 L-2,-12",
    "P": "M-7,-12 L-7,9 M-7,-12 L2,-12 L5,-11 L6,-10 L7,-8 L7,-5 L6,-3 L5,-2 "
         "L2,-1 L-7,-1",
    "Q": "M-2,-12 L-4,-11 L-6,-9 L-7,-7 L-8,-4 L-8,1 L-7,4 L-6,6 L-4,8 L-2,9 "
         "L2,9 L4,8 L6,6 L7,4 L8,1 L8,-4 L7,-7 L6,-9 L4,-11 L2,-12 L-2,-12 "
         "M1,5 L7,11",
    "R": "M-7,-12 L-7,9 M-7,-12 L2,-12 L5,-11 L6,-10 L7,-8 L7,-6 L6,-4 L5,-3 "
         "L2,-2 L-7,-2 M0,-2 L7,9",
    "S": "M7,-9 L5,-11 L2,-12 L-2,-12 L-5,-11 L-7,-9 L-7,-7 L-6,-5 L-5,-4 "
         "L-3,-3 L3,-1 L5,0 L6,1 L7,3 L7,6 L5,8 L2,9 L-2,9 L-5,8 L-6,7 L-7,5",
    "T": "M0,-12 L0,9 M-7,-12 L7,-12",
    "U": "M-7,-12 L-7,3 L-6,6 L-4,8 L-1,9 L1,9 L4,8 L6,6 L7,3 L7,-12",
    "V": "M-8,-12 L0,9 M8,-12 L0,9",
    "W": "M-10,-12 L-5,9 M0,-12 L-5,9 M0,-12 L5,9 M10,-12 L5,9",
    "X": "M-7,-12 L7,9 M7,-12 L-7,9",
    "Y": "M-8,-12 L0,-2 L0,9 M8,-12 L0,-2",
    "Z": "M7,-12 L-7,9 M-7,-12 L7,-12 M-7,9 L7,9",
    "[": "M-3,-16 L-3,16 M-2,-16 L-2,16 M-3,-16 L4,-16 M-3,16 L4,16",
    "\\": "M-7,-12 L7,12",
    "]": "M2,-16 L2,16 M3,-16 L3,16 M-4,-16 L3,-16 M-4,16 L3,16",
    "^": "M-2,-6 L0,-9 L2,-6 M-5,-3 L0,-8 L5,-3 M0,-8 L0,9",
    "_": "M-8,11 L8,11",
    "`": "M1,-12 L0,-11 L-1,-9 L-1,-7 L0,-6 L1,-7 L0,-8",
    "a": "M6,-5 L6,9 M6,-2 L4,-4 L2,-5 L-1,-5 L-3,-4 L-5,-2 L-6,1 L-6,3 "
         "L-5,6 L-3,8 L-1,9 L2,9 L4,8 L6,6",
    "b": "M-6,-12 L-6,9 M-6,-2 L-4,-4 L-2,-5 L1,-5 L3,-4 L5,-2 L6,1 L6,3 "
         "L5,6 L3,8 L1,9 L-2,9 L-4,8 L-6,6",
    "c": "M6,-2 L4,-4 L2,-5 L-1,-5 L-3,-4 L-5,-2 L-6,1 L-6,3 L-5,6 L-3,8 "
         "L-1,9 L2,9 L4,8 L6,6",
    "d": "M6,-12 L6,9 M6,-2 L4,-4 L2,-5 L-1,-5 L-3,-4 L-5,-2 L-6,1 L-6,3 "
         "L-5,6 L-3,8 L-1,9 L2,9 L4,8 L6,6",
    "e": "M-6,1 L6,1 L6,-1 L5,-3 L4,-4 L2,-5 L-1,-5 L-3,-4 L-5,-2 L-6,1 "
         "L-6,3 L-5,6 L-3,8 L-1,9 L2,9 L4,8 L6,6",
    "f": "M5,-12 L3,-12 L1,-11 L0,-8 L0,9 M-3,-5 L4,-5",
    "g": "M6,-5 L6,11 L5,14 L4,15 L2,16 L-1,16 L-3,15 M6,-2 L4,-4 L2,-5 "
         "L-1,-5 L-3,-4 L-5,-2 L-6,1 L-6,3 L-5,6 L-3,8 L-1,9 L2,9 L4,8 L6,6",
    "h": "M-5,-12 L-5,9 M-5,-1 L-2,-4 L0,-5 L3,-5 L5,-4 L6,-1 L6,9",
    "i": "M-1,-12 L0,-11 L1,-12 L0,-13 L-1,-12 M0,-5 L0,9",
    "j": "M0,-12 L1,-11 L2,-12 L1,-13 L0,-12 M1,-5 L1,12 L0,15 L-2,16 L-4,16",
    "k": "M-5,-12 L-5,9 M5,-5 L-5,5 M-1,1 L6,9",
    "l": "M0,-12 L0,9",
    "m": "M-11,-5 L-11,9 M-11,-1 L-8,-4 L-6,-5 L-3,-5 L-1,-4 L0,-1 L0,9 "
         "M0,-1 L3,-4 L5,-5 L8,-5 L10,-4 L11,-1 L11,9",
    "n": "M-5,-5 L-5,9 M-5,-1 L-2,-4 L0,-5 L3,-5 L5,-4 L6,-1 L6,9",
    "o": "M-1,-5 L-3,-4 L-5,-2 L-6,1 L-6,3 L-5,6 L-3,8 L-1,9 L2,9 L4,8 L6,6 "
         "L7,3 L7,1 L6,-2 L4,-4 L2,-5 L-1,-5",
    "p": "M-6,-5 L-6,16 M-6,-2 L-4,-4 L-2,-5 L1,-5 L3,-4 L5,-2 L6,1 L6,3 "
         "L5,6 L3,8 L1,9 L-2,9 L-4,8 L-6,6",
    "q": "M6,-5 L6,16 M6,-2 L4,-4 L2,-5 L-1,-5 L-3,-4 L-5,-2 L-6,1 L-6,3 "
         "L-5,6 L-3,8 L-1,9 L2,9 L4,8 L6,6",
    "r": "M-3,-5 L-3,9 M-3,1 L-2,-2 L0,-4 L2,-5 L5,-5",
    "s": "M6,-2 L5,-4 L2,-5 L-1,-5 L-4,-4 L-5,-2 L-4,0 L-2,1 L3,2 L5,3 L6,5 "
         "L6,6 L5,8 L2,9 L-1,9 L-4,8 L-5,6",
    "t": "M0,-12 L0,5 L1,8 L3,9 L5,9 M-3,-5 L4,-5",
    "u": "M-5,-5 L-5,5 L-4,8 L-2,9 L1,9 L3,8 L6,5 M6,-5 L6,9",
    "v": "M-6,-5 L0,9 M6,-5 L0,9",
    "w": "M-8,-5 L-4,9 M0,-5 L-4,9 M0,-5 L4,9 M8,-5 L4,9",
    "x": "M-5,-5 L6,9 M6,-5 L-5,9",
    "y": "M-6,-5 L0,9 M6,-5 L0,9 L-2,13 L-4,15 L-6,16 L-7,16",
    "z": "M6,-5 L-5,9 M-5,-5 L6,-5 M-5,9 L6,9",
    "{": "M2,-16 L0,-15 L1,-14 L2,-12 L2,-10 L1,-8 L0,-7 L-1,-5 L-1,-3 L1,-1 "
         "M0,-15 L1,-13 L1,-11 L0,-9 L-1,-8 L-2,-6 L-2,-4 L-1,-2 L3,0 L-1,2 "
         "L-2,4 L-2,6 L-1,8 L0,9 L1,11 L1,13 L0,15 M1,1 L-1,3 L-1,5 L0,7 "
         "L1,8 L2,10 L2,12 L1,14 L0,15 L-2,16",
    "|": "M0,-16 L0,16",
    "}": "M-2,-16 L0,-15 L-1,-14 L-2,-12 L-2,-10 L-1,-8 L0,-7 L1,-5 L1,-3 "
         "L-1,-1 M0,-15 L-1,-13 L-1,-11 L0,-9 L1,-8 L2,-6 L2,-4 L1,-2 L-3,0 "
         "L1,2 L2,4 L2,6 L1,8 L0,9 L-1,11 L-1,13 L0,15 M-1,1 L1,3 L1,5 L0,7 "
         "L-1,8 L-2,10 L-2,12 L-1,14 L0,15 L2,16",
    "~": "M-9,3 L-9,1 L-8,-2 L-6,-3 L-4,-3 L-2,-2 L2,1 L4,2 L6,2 L8,1 L9,-1 "
         "M-9,1 L-8,-1 L-6,-2 L-4,-2 L-2,-1 L2,2 L4,3 L6,3 L8,2 L9,-1 L9,-3",
}


def _parse_glyph(spec: str) -> tuple[Command, ...]:
    commands = []
    for token in spec.split():
        x, y = token[1:].split(",")
        commands.append(Command(token[0], float(x), float(y)))
    return tuple(commands)


GLYPHS = MappingProxyType(
    {ch: _parse_glyph(spec) for ch, spec in _GLYPH_SOURCE.items()}
)


def glyph_to_paths(
    commands: Iterable[Command],
    offset_x_mm: float,
    offset_y_mm: float,
    scale: float,
) -> list[Path]:
    """Turn glyph commands into open paths, scaled and with Y flipped."""
    paths: list[Path] = []
    current: Path | None = None
    for cmd in commands:
        point = Vec2(offset_x_mm + cmd.x * scale, offset_y_mm - cmd.y * scale)
        if cmd.op == "M":
            if current is not None and current.points:
                paths.append(current)
            current = Path(points=[point], closed=False)
        elif cmd.op == "L":
            if current is None:
                current = Path(closed=False)
            current.points.append(point)
    if current is not None and current.points:
        paths.append(current)
    return paths


def text_to_paths(
    text: str,
    origin_x_mm: float,
    origin_y_mm: float,
    height_mm: float = DEFAULT_HEIGHT_MM,
    letter_spacing_units: float = 2.0,
) -> list[Path]:
    """Lay out ``text`` from the origin and return its strokes as paths.

    A height of zero or less falls back to the default height. Characters
    without a glyph draw nothing but still advance the cursor.
    """
    height = DEFAULT_HEIGHT_MM if height_mm <= 0.0 else height_mm
    scale = height / UNITS_TALL
    cursor_units = 0.0
    paths: list[Path] = []
    for ch in text:
        glyph = GLYPHS.get(ch)
        width_units = UNKNOWN_WIDTH_UNITS
        if glyph is not None:
            width_units = GLYPH_WIDTH_UNITS
            if glyph:
                ox = origin_x_mm + cursor_units * scale
                paths.extend(glyph_to_paths(glyph, ox, origin_y_mm, scale))
        cursor_units += width_units + letter_spacing_units
    return paths