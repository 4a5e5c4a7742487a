"""Unit tests for /src/twixt/peg.py"""

import pytest

from src.twixt.peg import BOARD_SIZE, Peg, all_pegs


def test_peg_within_bounds() -> None:
    """happy case: every hole on the 24x24 board"""
    for x in range(1, BOARD_SIZE + 1):
        for y in range(1, BOARD_SIZE + 1):
            assert Peg(x, y).is_within_bounds()


@pytest.mark.parametrize(
    "x, y", [(0, 1), (1, 0), (BOARD_SIZE + 1, 5), (5, BOARD_SIZE + 1), (-1, -1)]
)
def test_peg_out_of_bounds(x: int, y: int) -> None:
    assert not Peg(x, y).is_within_bounds()


def test_pegs_are_equal_by_value() -> None:
    assert Peg(3, 7) == Peg(3, 7)
    assert Peg(3, 7) != Peg(7, 3)
    assert len({Peg(3, 7), Peg(3, 7)}) == 1


@pytest.mark.parametrize(
    "smaller, larger",
    [
        (Peg(1, 24), Peg(2, 1)),  # x decides first
        (Peg(5, 3), Peg(5, 4)),  # same x: y decides
        (Peg(2, 2), Peg(3, 4)),
    ],
)
def test_lexical_ordering(smaller: Peg, larger: Peg) -> None:
    """Ordering is done first by x coordinate, then y coordinate"""
    assert smaller < larger
    assert larger > smaller
    assert not larger < smaller


def test_squared_distance_is_symmetric() -> None:
    assert Peg(2, 2).squared_distance(Peg(3, 4)) == 5
    assert Peg(3, 4).squared_distance(Peg(2, 2)) == 5
    assert Peg(2, 2).squared_distance(Peg(4, 4)) == 8


def test_tuple_conversion() -> None:
    peg = Peg.from_tuple((4, 9))
    assert peg == Peg(4, 9)
    assert peg.as_tuple() == (4, 9)


def test_all_pegs_covers_the_board_once() -> None:
    pegs = all_pegs()
    assert len(pegs) == BOARD_SIZE * BOARD_SIZE
    assert len(set(pegs)) == len(pegs)
    assert all(peg.is_within_bounds() for peg in pegs)
