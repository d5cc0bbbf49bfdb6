import pytest

from cubkit.cubfile import CubError
from cubkit.mapcheck import (
    GameMap,
    MapError,
    Player,
    check_map,
    check_map_elements,
    check_map_walls,
)

VALID = ["1111\n", "1N01\n", "1111\n"]


def test_player_found():
    assert check_map_elements(VALID) == Player(1, 1, "N")


def test_two_players_rejected():
    with pytest.raises(MapError, match="exactly one"):
        check_map_elements(["1111", "1NS1", "1111"])


def test_no_player_rejected():
    with pytest.raises(MapError, match="exactly one"):
        check_map_elements(["111", "101", "111"])


def test_invalid_character_rejected():
    with pytest.raises(MapError, match="Invalid character"):
        check_map_elements(["1111", "1 N1", "1111"])


def test_walls_accept_closed_map():
    check_map_walls(VALID)
    assert check_map(VALID).player == Player(1, 1, "N")


def test_open_side_rejected():
    with pytest.raises(MapError, match="surrounded by walls"):
        check_map_walls(["1111", "1N00", "1111"])


def test_open_top_rejected():
    with pytest.raises(MapError, match="surrounded by walls"):
        check_map_walls(["1101", "1N01", "1111"])


def test_short_row_counts_as_open():
    with pytest.raises(MapError):
        check_map_walls(["1111", "1N0", "1111"])


def test_empty_grid_rejected():
    with pytest.raises(MapError):
        check_map_walls([])


def test_check_map_returns_stripped_rows():
    game_map = check_map(VALID)
    assert isinstance(game_map, GameMap)
    assert game_map.rows == ("1111", "1N01", "1111")
    assert (game_map.width, game_map.height) == (4, 3)


def test_check_map_reports_invalid_char():
    with pytest.raises(MapError, match="valid char"):
        check_map(["1111", "1X01", "1111"])


def test_check_map_reports_walls():
    with pytest.raises(MapError, match="walls"):
        check_map(["1111", "0N01", "1111"])


def test_map_error_is_cub_error():
    with pytest.raises(CubError):
        check_map(["111", "101", "111"])