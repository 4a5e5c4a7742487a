"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    WAITING_FOR_PLAYERS = "waiting for players"
    IN_PROGRESS = "in progress"
    FINISHED = "finished"


# --- NOTE Color does NOT contain an option for an empty hole. The domain layer uses src/twixt/players.py (Player.NONE) for that.


class Color(StrEnum):
    RED = "red"
    BLACK = "black"


class Phase(StrEnum):
    """What the player to move is currently doing within a turn."""

    PLACE_PEG = "place peg"
    PLACE_BARRIER = "place barrier"
    REMOVE_PEG = "remove peg"
    REMOVE_BARRIER = "remove barrier"
    GAME_OVER = "game over"
