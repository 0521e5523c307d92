# minotaur

Building blocks for a pen-plotter drawing tool: page geometry types, a
built-in stroke font, shape and test-pattern generators, greyscale image
loading, JSON conversion of the geometry and raster types, and a small
serial-port controller for EiBotBoard-based plotters.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `minotaur.model` — `Vec2` (immutable, with `+`, `-` and scalar `*`),
  `Color` (RGBA in 0..1, white by default), `Path` (a list of points and a
  `closed` flag), `PathSet` (paths plus a colour) and `Bitmap` (8-bit
  greyscale pixels stored bottom row first, with a pixel size in
  millimetres). `Bitmap.pixel(x, y)` returns one grey value and raises
  `IndexError` outside the image.
- `minotaur.vectorfont` — a stroke font covering printable ASCII.
  `text_to_paths(text, origin_x_mm, origin_y_mm, height_mm=10.0,
  letter_spacing_units=2.0)` lays out a string as open polylines; a height of
  zero or less falls back to 10 mm, and characters without a glyph leave a
  gap. `glyph_to_paths` converts one glyph's `Command` sequence; the glyphs
  themselves are in the read-only mapping `GLYPHS`.
- `minotaur.pathsets` — `circle`, `square`, `star` and `text`, each returning
  a `PathSet` in page millimetres. `circle` uses at least 3 segments and
  `star` at least 2 points, starting at the top.
- `minotaur.bitmaps` — test patterns: `gradient` (black to white, left to
  right), `checkerboard` (squares of grey 200 and 40) and `radial` (white at
  the centre, black at the corners). Non-positive sizes raise `ValueError`.
- `minotaur.imageloader` — `load_pgm` reads binary PGM (P5) files with 8- or
  16-bit samples (16-bit ones are scaled down to 8 bits); `load_image` reads
  whatever Pillow can open (PNG, JPEG, BMP, ...) and converts it to greyscale
  with Rec. 709 weights. Both return a `Bitmap` flipped to bottom-row-first
  order and raise `ImageLoadError` on failure. `flip_vertical` reverses the
  row order of raw pixel data.
- `minotaur.serialization` — `*_to_json` / `*_from_json` pairs for `Vec2`,
  `Color`, 3x3 matrices (nine flat values; anything malformed decodes to
  `IDENTITY_MAT3`), `Path`, `PathSet` and `Bitmap`. Encoders return plain
  data ready for `json.dumps`; decoders fill in defaults for missing keys and
  raise `TypeError` or `ValueError` for values of the wrong kind.
- `minotaur.serialport` — `SerialController` opens a port with `connect`,
  writes carriage-return terminated ASCII lines with `write_line` (retrying
  once after clearing the buffers), lists ports with their USB vendor and
  product ids via `list_ports`, and connects to the first matching device
  with `auto_connect` (EiBotBoard ids `EBB_VID` / `EBB_PID`) or
  `auto_connect_by_vid_pid`. Its `state` is a `SerialState`; failures raise
  `SerialError`. It works as a context manager that disconnects on exit, and
  accepts custom `opener` and `lister` callables in place of pyserial.

## Example

```python
from minotaur.model import Vec2, Color
from minotaur.pathsets import circle, text
from minotaur.serialization import pathset_to_json

ring = circle(Vec2(148.5, 210.0), 50.0, 96, Color(0.9, 0.2, 0.2, 1.0))
label = text("HELLO", Vec2(20.0, 20.0), 12.0, 2.0, Color(1.0, 1.0, 1.0, 1.0))

print(len(ring.paths[0].points))   # 96
print(pathset_to_json(label)["paths"][0]["closed"])  # False
```

```python
from minotaur.imageloader import load_pgm, ImageLoadError

try:
    bitmap = load_pgm("photo.pgm", 0.5)
except ImageLoadError as exc:
    print("could not load:", exc)
```

```python
from minotaur.serialport import SerialController, SerialError

with SerialController() as controller:
    try:
        port = controller.auto_connect()
        controller.write_line("V")
    except SerialError as exc:
        print("serial problem:", exc)
```

## What it does not do

This package is a library only. It has no drawing window or editor screen,
no command-line program, and no saving or loading of whole project files
(pages, entities, camera or plotter settings) — `minotaur.serialization`
converts individual values only. It does not plan plotter motion, send pen
or stepper commands of its own, or spool plot jobs; `SerialController` only
opens a port and writes the lines it is given.