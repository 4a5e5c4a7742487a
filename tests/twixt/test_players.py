"""Unit tests for /src/twixt/players.py"""

import pytest

from src.twixt.peg import BOARD_SIZE, Peg
from src.twixt.players import (
    AVAILABLE_PLAYER_NAMES,
    Player,
    home_coordinate,
    home_line_pegs,
    is_forbidden_for,
    opponent,
)


def test_available_player_names() -> None:
    assert AVAILABLE_PLAYER_NAMES == ["RED", "BLACK"]


def test_opponent() -> None:
    assert opponent(Player.RED) == Player.BLACK
    assert opponent(Player.BLACK) == Player.RED
    with pytest.raises(ValueError):
        opponent(Player.NONE)


def test_home_coordinate() -> None:
    """Red's home lines are rows (y), Black's are columns (x)"""
    peg = Peg(3, 17)
    assert home_coordinate(peg, Player.RED) == 17
    assert home_coordinate(peg, Player.BLACK) == 3
    with pytest.raises(ValueError):
        home_coordinate(peg, Player.NONE)


@pytest.mark.parametrize(
    "peg, player, forbidden",
    [
        (Peg(1, 5), Player.RED, True),
        (Peg(24, 5), Player.RED, True),
        (Peg(5, 1), Player.RED, False),
        (Peg(5, 24), Player.RED, False),
        (Peg(5, 1), Player.BLACK, True),
        (Peg(5, 24), Player.BLACK, True),
        (Peg(1, 5), Player.BLACK, False),
        (Peg(24, 5), Player.BLACK, False),
        (Peg(12, 12), Player.RED, False),
        (Peg(12, 12), Player.BLACK, False),
    ],
)
def test_forbidden_holes(peg: Peg, player: Player, forbidden: bool) -> None:
    """A player may not place pegs on the opponent's home lines"""
    assert is_forbidden_for(peg, player) is forbidden


def test_home_line_pegs() -> None:
    red_top = home_line_pegs(Player.RED, 1)
    black_right = home_line_pegs(Player.BLACK, BOARD_SIZE)
    assert len(red_top) == BOARD_SIZE
    assert all(peg.y == 1 for peg in red_top)
    assert len(black_right) == BOARD_SIZE
    assert all(peg.x == BOARD_SIZE for peg in black_right)
