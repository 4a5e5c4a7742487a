from uuid import UUID, uuid4

import pytest

from src.api.models import (
    BarrierRequest,
    Coordinate,
    CreateGameRequest,
    GameResponse,
    PegRequest,
    PhaseRequest,
)
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Phase
from src.twixt.peg import Peg


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - Coordinate --
@pytest.mark.parametrize("x, y", [(1, 1), (24, 24), (1, 24), (12, 7)])
def test_valid_coordinates(x: int, y: int) -> None:
    coordinate = Coordinate(x=x, y=y)
    assert coordinate.to_peg() == Peg(x, y)


@pytest.mark.parametrize("x, y", [(0, 5), (5, 0), (25, 5), (5, 25), (-3, 12)])
def test_coordinates_off_the_board(x: int, y: int) -> None:
    with pytest.raises(InvalidRequestError):
        _ = Coordinate(x=x, y=y)


def test_peg_request_with_invalid_coordinate(mock_id: UUID) -> None:
    """Validation of the nested coordinate also applies when building the request"""
    with pytest.raises(InvalidRequestError):
        _ = PegRequest(
            game_id=mock_id, player_name="bladiblidiboo", peg={"x": 30, "y": 2}
        )


def test_barrier_request(mock_id: UUID) -> None:
    request = BarrierRequest(
        game_id=mock_id,
        player_name="bladiblidiboo",
        start={"x": 2, "y": 2},
        end={"x": 3, "y": 4},
    )
    assert request.start.to_peg() == Peg(2, 2)
    assert request.end.to_peg() == Peg(3, 4)


# -- Validation - player names --
@pytest.mark.parametrize("name", ["", "   "])
def test_blank_player_name(name: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = CreateGameRequest(player_name=name, color=Color.RED)


def test_create_game_request() -> None:
    request = CreateGameRequest(
        player_name="don't hate the player, hate the name.", color="black"
    )
    assert request.color == Color.BLACK


def test_phase_request_parses_phase(mock_id: UUID) -> None:
    request = PhaseRequest(
        game_id=mock_id, player_name="bladiblidiboo", phase="remove barrier"
    )
    assert request.phase == Phase.REMOVE_BARRIER


def test_game_response_barriers(mock_id: UUID) -> None:
    response = GameResponse(
        game_id=mock_id,
        players={"red": "a", "black": "b"},
        current_player="black",
        phase="place peg",
        status="in progress",
        winner=None,
        pegs={"red": [(2, 2), (3, 4)], "black": []},
        barriers={"red": [((2, 2), (3, 4))], "black": []},
    )
    assert response.current_player == Color.BLACK
    assert response.barriers["red"] == [((2, 2), (3, 4))]
