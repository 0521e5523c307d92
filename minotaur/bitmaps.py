"""Generators for synthetic greyscale test bitmaps."""

from __future__ import annotations

import math

from minotaur.model import Bitmap


def _round_half_up(value: float) -> int:
    """Round a non-negative value to the nearest integer, halves upward."""
    return int(math.floor(value + 0.5))


def _check_size(w: int, h: int) -> None:
    if w <= 0 or h <= 0:
        raise ValueError(f"bitmap size must be positive, got {w}x{h}")


def gradient(w: int, h: int, pixel_size_mm: float) -> Bitmap:
    """A horizontal ramp from black on the left to white on the right."""
    _check_size(w, h)
    span = w - 1
    row = bytes(
        _round_half_up((x / span if span else 0.0) * 255.0) for x in range(w)
    )
    return Bitmap(
        width_px=w,
        height_px=h,
        pixel_size_mm=pixel_size_mm,
        pixels=bytearray(row * h),
    )


def checkerboard(w: int, h: int, block_px: int, pixel_size_mm: float) -> Bitmap:
    """Alternating light (200) and dark (40) squares of ``block_px`` pixels."""
    _check_size(w, h)
    if block_px <= 0:
        raise ValueError(f"block size must be positive, got {block_px}")
    pixels = bytearray(
        200 if ((x // block_px) & 1) == ((y // block_px) & 1) else 40
        for y in range(h)
        for x in range(w)
    )
    return Bitmap(
        width_px=w, height_px=h, pixel_size_mm=pixel_size_mm, pixels=pixels
    )


def radial(w: int, h: int, pixel_size_mm: float) -> Bitmap:
    """White at the centre fading to black at the corners."""
    _check_size(w, h)
    cx = (w - 1) * 0.5
    cy = (h - 1) * 0.5
    max_r = math.hypot(cx, cy)
    pixels = bytearray()
    for y in range(h):
        dy = y - cy
        for x in range(w):
            t = math.hypot(x - cx, dy) / max_r if max_r else 0.0
            pixels.append(_round_half_up((1.0 - t) * 255.0))
    return Bitmap(
        width_px=w, height_px=h, pixel_size_mm=pixel_size_mm, pixels=pixels
    )