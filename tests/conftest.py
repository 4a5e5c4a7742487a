"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Generator

import pytest

from src.db.memory_repository import InMemoryGameRepository
from src.twixt.board import Board
from src.twixt.peg import Peg
from src.twixt.players import Player

Coords = tuple[int, int]


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def board_with_pegs() -> Callable[[dict[Player, list[Coords]]], Board]:
    """Call the inner function with the pegs each player should have on the board (placed through the regular rules)"""

    def _create_board(pegs: dict[Player, list[Coords]]) -> Board:
        board = Board()
        for player, coords in pegs.items():
            for x, y in coords:
                assert board.place_peg(Peg(x, y), player)
        return board

    return _create_board


@pytest.fixture
def repository() -> Generator[InMemoryGameRepository, None, None]:
    """Fresh repository for every test"""
    repo = InMemoryGameRepository()
    try:
        yield repo
    finally:
        repo._games.clear()
