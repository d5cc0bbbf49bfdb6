import pytest

from cubkit.image import Image
from cubkit.pixelformat import ColorFormat

IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242


def color_map(x, y, w, h):
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def test_new_image_layout():
    img = Image(IM1_SX, IM1_SY)
    assert img.bits_per_pixel == 32
    assert img.size_line == 168
    assert img.endian == 0
    assert len(img.data) == img.size_line * IM1_SY


@pytest.mark.parametrize("w,h", [(IM1_SX, IM1_SY), (IM3_SX, IM3_SY)])
def test_fill_with_colour_map_round_trips(w, h):
    img = Image(w, h)
    fmt = ColorFormat.from_masks(0xFF0000, 0x00FF00, 0x0000FF, 24)
    for y in range(h):
        for x in range(w):
            img.put_pixel(x, y, fmt.pixel_value(color_map(x, y, w, h)))
    for y in (0, h // 2, h - 1):
        for x in (0, w // 2, w - 1):
            assert img.get_pixel(x, y) == color_map(x, y, w, h)


def test_little_endian_byte_layout():
    img = Image(4, 2)
    img.put_pixel(1, 1, 0x00FF99FF)
    start = img.size_line + 4
    assert bytes(img.data[start:start + 4]) == (0x00FF99FF).to_bytes(4, "little")


def test_big_endian_byte_layout():
    img = Image(4, 2, big_endian=True)
    img.put_pixel(2, 0, 0x0000FFFF)
    assert img.endian == 1
    assert bytes(img.data[8:12]) == (0x0000FFFF).to_bytes(4, "big")
    assert img.get_pixel(2, 0) == 0x0000FFFF


def test_colour_is_truncated_to_pixel_width():
    img = Image(2, 2)
    img.put_pixel(0, 0, -1)
    assert img.get_pixel(0, 0) == 0xFFFFFFFF


def test_row_returns_whole_line():
    img = Image(IM1_SX, IM1_SY)
    img.put_pixel(0, 3, 0x112233)
    line = img.row(3)
    assert len(line) == img.size_line
    assert line[:4] == (0x112233).to_bytes(4, "little")
    assert img.row(4) == bytes(img.size_line)


def test_out_of_range_pixel():
    img = Image(3, 3)
    with pytest.raises(IndexError):
        img.put_pixel(3, 0, 0)
    with pytest.raises(IndexError):
        img.get_pixel(0, -1)


def test_invalid_sizes():
    with pytest.raises(ValueError):
        Image(0, 5)
    with pytest.raises(ValueError):
        Image(5, 5, bits_per_pixel=12)