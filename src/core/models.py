"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain layer (lower) use the model(s) defined here to send to/receive from the Service.
The model is a read-only snapshot (e.g. to render the board). It is not used to rebuild a Game.
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
PegColor = str
PlayerName = str
PegTuple = tuple[int, int]
BarrierTuple = tuple[PegTuple, PegTuple]


@dataclass
class GameModel:
    """Transport-safe representation of a TwixT game used between API, Service and Game layers."""

    pegs: dict[PegColor, list[PegTuple]]
    barriers: dict[PegColor, list[BarrierTuple]]
    registered_players: dict[PegColor, PlayerName]
    current_player: PegColor
    phase: str
    status: str
    winner: Optional[PlayerName] = None
