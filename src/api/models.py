"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Phase, Status
from src.twixt.peg import BOARD_SIZE, Peg

PegColor = str
PlayerName = str
PegTuple = tuple[int, int]


# --- SHARED ---
class Coordinate(BaseModel):
    """A hole on the board, as the UI reports it (1-24 in both directions)"""

    x: int
    y: int

    @field_validator(*["x", "y"])
    @classmethod
    def validate_on_board(cls, value: int) -> int:
        if not 1 <= value <= BOARD_SIZE:
            raise InvalidRequestError(
                f"Coordinate {value} is not on the board (1-{BOARD_SIZE})."
            )
        return value

    def to_peg(self) -> Peg:
        return Peg(self.x, self.y)


class PlayerRequest(BaseModel):
    player_name: str

    @field_validator("player_name")
    @classmethod
    def validate_player_name(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Player name cannot be empty.")
        return value


# --- REQUEST MODELS ---
class CreateGameRequest(PlayerRequest):
    color: Color


class JoinGameRequest(PlayerRequest):
    game_id: UUID


class TurnRequest(PlayerRequest):
    game_id: UUID


class PhaseRequest(TurnRequest):
    phase: Phase


class PegRequest(TurnRequest):
    peg: Coordinate


class BarrierRequest(TurnRequest):
    start: Coordinate
    end: Coordinate


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


class AdjacentPegsRequest(BaseModel):
    game_id: UUID
    peg: Coordinate


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    players: dict[PegColor, PlayerName]
    current_player: Color
    phase: Phase
    status: Status
    winner: Optional[PlayerName]
    pegs: dict[PegColor, list[PegTuple]]
    barriers: dict[PegColor, list[tuple[PegTuple, PegTuple]]]


class AdjacentPegsResponse(BaseModel):
    game_id: UUID
    peg: PegTuple
    adjacent_pegs: list[PegTuple]
