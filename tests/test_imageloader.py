import struct

import pytest
from PIL import Image

from minotaur.imageloader import ImageLoadError, flip_vertical, load_image, load_pgm


def _write(tmp_path, name, data):
    path = tmp_path / name
    path.write_bytes(data)
    return path


def test_flip_vertical_reverses_rows():
    data = bytes([1, 2, 3, 4, 5, 6])
    assert flip_vertical(data, 2, 3) == bytearray([5, 6, 3, 4, 1, 2])


def test_flip_vertical_twice_is_identity():
    data = bytes(range(24))
    assert flip_vertical(flip_vertical(data, 4, 6), 4, 6) == bytearray(data)


def test_flip_vertical_single_row_and_empty():
    assert flip_vertical(b"abc", 3, 1) == bytearray(b"abc")
    assert flip_vertical(b"", 0, 0) == bytearray()


def test_load_pgm_8bit_flips_rows(tmp_path):
    pixels = bytes([10, 20, 30, 40, 50, 60])
    path = _write(tmp_path, "a.pgm", b"P5\n3 2\n255\n" + pixels)
    bm = load_pgm(path, 0.25)
    assert bm.width_px == 3
    assert bm.height_px == 2
    assert bm.pixel_size_mm == 0.25
    assert bytes(bm.pixels) == bytes([40, 50, 60, 10, 20, 30])


def test_load_pgm_default_pixel_size(tmp_path):
    path = _write(tmp_path, "a.pgm", b"P5 1 1 255 " + bytes([7]))
    bm = load_pgm(path)
    assert bm.pixel_size_mm == 0.5
    assert list(bm.pixels) == [7]


def test_load_pgm_skips_comments(tmp_path):
    header = b"P5\n# made by hand\n2 1\n# maxval next\n255\n"
    path = _write(tmp_path, "c.pgm", header + bytes([1, 2]))
    bm = load_pgm(path)
    assert (bm.width_px, bm.height_px) == (2, 1)
    assert list(bm.pixels) == [1, 2]


def test_load_pgm_16bit_scaled(tmp_path):
    samples = struct.pack("<2H", 0, 65535)
    path = _write(tmp_path, "w.pgm", b"P5\n2 1\n65535\n" + samples)
    bm = load_pgm(path)
    assert list(bm.pixels) == [0, 255]


def test_load_pgm_not_p5(tmp_path):
    path = _write(tmp_path, "p2.pgm", b"P2\n1 1\n255\n0\n")
    with pytest.raises(ImageLoadError, match="P5"):
        load_pgm(path)


def test_load_pgm_missing_height(tmp_path):
    path = _write(tmp_path, "h.pgm", b"P5\n4")
    with pytest.raises(ImageLoadError, match="Missing height"):
        load_pgm(path)


@pytest.mark.parametrize("maxval", [b"0", b"70000"])
def test_load_pgm_bad_maxval(tmp_path, maxval):
    path = _write(tmp_path, "m.pgm", b"P5\n1 1\n" + maxval + b"\n\x00\x00")
    with pytest.raises(ImageLoadError, match="Unsupported maxval"):
        load_pgm(path)


def test_load_pgm_short_data(tmp_path):
    path = _write(tmp_path, "s.pgm", b"P5\n4 4\n255\n" + bytes(5))
    with pytest.raises(ImageLoadError, match="pixel data"):
        load_pgm(path)


def test_load_pgm_missing_file(tmp_path):
    with pytest.raises(ImageLoadError, match="Failed to open file"):
        load_pgm(tmp_path / "nope.pgm")


def test_load_image_grayscale_png(tmp_path):
    img = Image.new("L", (2, 2))
    img.putdata([11, 22, 33, 44])
    path = tmp_path / "g.png"
    img.save(path)
    bm = load_image(path, 0.3)
    assert (bm.width_px, bm.height_px) == (2, 2)
    assert bm.pixel_size_mm == 0.3
    assert list(bm.pixels) == [33, 44, 11, 22]


def test_load_image_rgb_gray_levels_preserved(tmp_path):
    img = Image.new("RGB", (3, 1))
    img.putdata([(0, 0, 0), (128, 128, 128), (255, 255, 255)])
    path = tmp_path / "rgb.png"
    img.save(path)
    bm = load_image(path)
    assert list(bm.pixels) == [0, 128, 255]


def test_load_image_undecodable(tmp_path):
    path = _write(tmp_path, "junk.png", b"this is not an image")
    with pytest.raises(ImageLoadError, match="decode"):
        load_image(path)