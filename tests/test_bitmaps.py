import pytest

from minotaur.bitmaps import checkerboard, gradient, radial


def test_gradient_dimensions_and_metadata():
    bm = gradient(16, 8, 0.5)
    assert bm.width_px == 16
    assert bm.height_px == 8
    assert bm.pixel_size_mm == 0.5
    assert len(bm.pixels) == 16 * 8


def test_gradient_spans_full_range():
    bm = gradient(256, 4, 0.5)
    assert bm.pixel(0, 0) == 0
    assert bm.pixel(255, 0) == 255
    assert [bm.pixel(x, 2) for x in range(256)] == list(range(256))


def test_gradient_rows_identical_and_monotonic():
    bm = gradient(37, 5, 1.0)
    rows = [bytes(bm.pixels[y * 37:(y + 1) * 37]) for y in range(5)]
    assert all(r == rows[0] for r in rows)
    assert list(rows[0]) == sorted(rows[0])


def test_gradient_rejects_bad_size():
    with pytest.raises(ValueError):
        gradient(0, 4, 0.5)


def test_checkerboard_uses_two_levels():
    bm = checkerboard(64, 64, 16, 0.5)
    assert set(bm.pixels) == {200, 40}
    assert bm.pixel(0, 0) == 200
    assert bm.pixel(16, 0) == 40
    assert bm.pixel(16, 16) == 200
    assert bm.pixel(0, 16) == 40


def test_checkerboard_blocks_are_uniform():
    bm = checkerboard(32, 32, 8, 0.5)
    for y in range(8):
        for x in range(8):
            assert bm.pixel(x, y) == bm.pixel(0, 0)


def test_checkerboard_rejects_zero_block():
    with pytest.raises(ValueError):
        checkerboard(8, 8, 0, 0.5)


def test_radial_corners_black_center_white():
    bm = radial(33, 33, 0.5)
    assert bm.pixel(16, 16) == 255
    for x, y in [(0, 0), (32, 0), (0, 32), (32, 32)]:
        assert bm.pixel(x, y) == 0


def test_radial_is_symmetric():
    bm = radial(20, 12, 0.5)
    for y in range(12):
        for x in range(20):
            assert bm.pixel(x, y) == bm.pixel(19 - x, y)
            assert bm.pixel(x, y) == bm.pixel(x, 11 - y)


def test_radial_single_pixel():
    bm = radial(1, 1, 0.5)
    assert list(bm.pixels) == [255]