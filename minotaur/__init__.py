"""Geometry types, stroke font, shape and bitmap generators, image loading,
JSON conversion and serial access for pen-plotter drawing tools."""

__version__ = "0.1.0"

__all__ = [
    "model",
    "vectorfont",
    "pathsets",
    "bitmaps",
    "imageloader",
    "serialization",
    "serialport",
]