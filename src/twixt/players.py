"""Defines the players and the home lines each of them connects"""

from enum import Enum, auto

from src.twixt.peg import BOARD_SIZE, Peg


class Player(Enum):
    NONE = auto()
    RED = auto()
    BLACK = auto()


AVAILABLE_PLAYER_NAMES: list[str] = [
    player.name for player in Player if player != Player.NONE
]

# Red connects the top row (y=1) to the bottom row (y=24), Black connects the left column (x=1) to the right column (x=24)
FIRST_HOME_LINE = 1
LAST_HOME_LINE = BOARD_SIZE
HOME_LINES = (FIRST_HOME_LINE, LAST_HOME_LINE)


def home_coordinate(peg: Peg, player: Player) -> int:
    """The coordinate that tells on which of the player's home lines (if any) the peg lies."""
    if player == Player.RED:
        return peg.y
    if player == Player.BLACK:
        return peg.x
    raise ValueError(f"{player} has no home lines")


def opponent(player: Player) -> Player:
    if player == Player.RED:
        return Player.BLACK
    if player == Player.BLACK:
        return Player.RED
    raise ValueError(f"{player} has no opponent")


def is_forbidden_for(peg: Peg, player: Player) -> bool:
    """A player may not place pegs on the opponent's home lines."""
    return home_coordinate(peg, opponent(player)) in HOME_LINES


def home_line_pegs(player: Player, line: int) -> list[Peg]:
    """All holes on one of the player's home lines (line=1 or line=24)."""
    if player == Player.RED:
        return [Peg(x, line) for x in range(1, BOARD_SIZE + 1)]
    return [Peg(line, y) for y in range(1, BOARD_SIZE + 1)]
