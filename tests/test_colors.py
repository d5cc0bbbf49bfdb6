import pytest

from cubkit.colors import lookup_color


def test_plain_name():
    assert lookup_color("red") == 0xFF0000


def test_none_is_transparent():
    assert lookup_color("none") == -1


def test_unknown_name_gives_zero():
    assert lookup_color("not-a-colour") == 0


@pytest.mark.parametrize("spelling", ["RED", "Red", "rEd"])
def test_case_insensitive(spelling):
    assert lookup_color(spelling) == lookup_color("red")


def test_suffix_joins_with_space():
    assert lookup_color("ghost", "white") == 0xF8F8FF
    assert lookup_color("ghost", "white") == lookup_color("ghost white")


def test_first_listed_entry_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_hex_specification():
    assert lookup_color("#ff00ff") == 0xFF00FF
    assert lookup_color("#FF00FF") == lookup_color("#ff00ff")


def test_hex_stops_at_invalid_digit():
    assert lookup_color("#12zz") == lookup_color("#12")


def test_empty_hex_gives_zero():
    assert lookup_color("#") == 0


def test_hex_ignores_suffix():
    assert lookup_color("#ff0000", "anything") == lookup_color("#ff0000")


@pytest.mark.parametrize("shade", ["0", "1", "50", "99", "100"])
def test_gray_and_grey_agree(shade):
    assert lookup_color("gray" + shade) == lookup_color("grey" + shade)


def test_gray_extremes_match_black_and_white():
    assert lookup_color("gray0") == lookup_color("black")
    assert lookup_color("gray100") == lookup_color("white")


@pytest.mark.parametrize(
    "name", ["snow", "navy", "cyan", "gold", "thistle4", "lightgreen", "purple"]
)
def test_named_colors_fit_in_24_bits(name):
    value = lookup_color(name)
    assert 0 <= value <= 0xFFFFFF


def test_spaced_and_joined_names_agree():
    assert lookup_color("light", "green") == lookup_color("lightgreen")


def test_empty_suffix_adds_trailing_space():
    assert lookup_color("red", "") == 0
    assert lookup_color("red") == 0xFF0000