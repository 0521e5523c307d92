"""Loading images from disk into 8-bit greyscale bitmaps.

Loaded bitmaps are stored bottom row first, so file rows are flipped.
"""

from __future__ import annotations

import struct
from collections.abc import Iterator
from os import PathLike

from PIL import Image, UnidentifiedImageError

from minotaur.model import Bitmap

_WHITESPACE = b" \t\n\r\v\f"


class ImageLoadError(Exception):
    """Raised when an image file cannot be read or decoded."""


def flip_vertical(data: bytes, width: int, height: int) -> bytearray:
    """Return ``data`` with its rows of ``width`` bytes in reverse order."""
    if width == 0 or height == 0:
        return bytearray(data)
    rows = [data[y * width:(y + 1) * width] for y in range(height)]
    return bytearray(b"".join(reversed(rows)))


def _tokens(raw: bytes) -> Iterator[tuple[bytes, int]]:
    """Yield header tokens with the offset just past their terminator."""
    pos = 0
    size = len(raw)
    while True:
        while pos < size:
            ch = raw[pos:pos + 1]
            if ch in _WHITESPACE:
                pos += 1
            elif ch == b"#":
                end = raw.find(b"\n", pos)
                pos = size if end < 0 else end + 1
            else:
                break
        if pos >= size:
            return
        start = pos
        while pos < size and raw[pos:pos + 1] not in _WHITESPACE:
            pos += 1
        token = raw[start:pos]
        if pos < size:
            pos += 1  # the single whitespace that ends the token
        yield token, pos


def _header_int(tokens: Iterator[tuple[bytes, int]], what: str) -> tuple[int, int]:
    try:
        token, pos = next(tokens)
    except StopIteration:
        raise ImageLoadError(f"Missing {what}") from None
    try:
        return int(token), pos
    except ValueError:
        raise ImageLoadError(f"Invalid {what}: {token!r}") from None


def load_pgm(file_path: str | PathLike, pixel_size_mm: float = 0.5) -> Bitmap:
    """Load a binary PGM (P5) file, scaling 16-bit samples down to 8 bits."""
    try:
        with open(file_path, "rb") as fh:
            raw = fh.read()
    except OSError as exc:
        raise ImageLoadError("Failed to open file") from exc

    tokens = _tokens(raw)
    magic = next(tokens, None)
    if magic is None or magic[0] != b"P5":
        raise ImageLoadError("Not a binary PGM (P5) file")
    width, _ = _header_int(tokens, "width")
    height, _ = _header_int(tokens, "height")
    maxval, data_start = _header_int(tokens, "maxval")
    if maxval <= 0 or maxval > 65535:
        raise ImageLoadError("Unsupported maxval")
    if width < 0 or height < 0:
        raise ImageLoadError("Failed to read pixel data")

    count = width * height
    if maxval < 256:
        data = raw[data_start:data_start + count]
        if len(data) != count:
            raise ImageLoadError("Failed to read pixel data")
        pixels = bytes(data)
    else:
        # Samples are taken as little-endian 16-bit words.
        data = raw[data_start:data_start + count * 2]
        if len(data) != count * 2:
            raise ImageLoadError("Failed to read pixel data")
        samples = struct.unpack(f"<{count}H", data)
        pixels = bytes(s * 255 // maxval for s in samples)

    return Bitmap(
        width_px=width,
        height_px=height,
        pixel_size_mm=pixel_size_mm,
        pixels=flip_vertical(pixels, width, height),
    )


def _luma(rgba: bytes) -> bytes:
    """Rec. 709 luma of RGBA pixels, rounded to the nearest level."""
    return bytes(
        int(0.2126 * r + 0.7152 * g + 0.0722 * b + 0.5)
        for r, g, b in zip(rgba[0::4], rgba[1::4], rgba[2::4])
    )


def load_image(file_path: str | PathLike, pixel_size_mm: float = 0.5) -> Bitmap:
    """Load a common image format (PNG, JPEG, BMP, ...) as greyscale."""
    try:
        with Image.open(file_path) as img:
            img.load()
            width, height = img.size
            if img.mode == "L":
                gray = img.tobytes()
            elif img.mode == "1":
                gray = img.convert("L").tobytes()
            else:
                gray = _luma(img.convert("RGBA").tobytes())
    except FileNotFoundError as exc:
        raise ImageLoadError("Failed to decode image") from exc
    except (UnidentifiedImageError, OSError, ValueError) as exc:
        raise ImageLoadError("Failed to decode image") from exc

    return Bitmap(
        width_px=width,
        height_px=height,
        pixel_size_mm=pixel_size_mm,
        pixels=flip_vertical(gray, width, height),
    )