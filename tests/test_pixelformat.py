import pytest

from cubkit.pixelformat import ColorFormat

RGB565 = (0xF800, 0x07E0, 0x001F)


@pytest.fixture
def fmt565():
    return ColorFormat.from_masks(*RGB565, 16)


def test_masks_give_shift_and_width(fmt565):
    assert fmt565.red_shift == 11
    assert fmt565.green_bits == 6
    assert fmt565.blue_shift == 0
    assert fmt565.red_bits == fmt565.blue_bits


def test_deep_visual_keeps_colour():
    fmt = ColorFormat.from_masks(0xFF0000, 0x00FF00, 0x0000FF, 24)
    for color in (0x000000, 0x123456, 0xFF99FF, 0xFFFFFF):
        assert fmt.pixel_value(color) == color


def test_white_fills_every_mask(fmt565):
    red, green, blue = RGB565
    assert fmt565.pixel_value(0xFFFFFF) == red | green | blue


def test_pure_channels_land_in_their_masks(fmt565):
    red, green, blue = RGB565
    assert fmt565.pixel_value(0xFF0000) == red
    assert fmt565.pixel_value(0x00FF00) == green
    assert fmt565.pixel_value(0x0000FF) == blue


def test_black_is_zero(fmt565):
    assert fmt565.pixel_value(0x000000) == 0


def test_results_stay_inside_masks(fmt565):
    allowed = RGB565[0] | RGB565[1] | RGB565[2]
    for color in (0x123456, 0xABCDEF, 0x7F7F7F, 0x00FFFF):
        assert fmt565.pixel_value(color) & ~allowed == 0


def test_zero_mask_is_rejected():
    with pytest.raises(ValueError):
        ColorFormat.from_masks(0, 0x00FF00, 0x0000FF, 16)