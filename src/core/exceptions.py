"""
Exceptions raised above the Board.

The Board itself only answers True/False. The Game and Service layers translate a refusal into one of these.
"""


class GameError(Exception):
    """Base class for everything that can go wrong while playing a game."""


class InvalidRequestError(GameError):
    """Request payload cannot be interpreted (raised from the API models' validators)."""


class GameStateError(GameError):
    """Action is not allowed in the current status / turn phase of the game."""


class NotYourTurnError(GameError):
    """The other player is to move (or the player is not registered to this game)."""


class IllegalMoveError(GameError):
    """The Board refused the peg or barrier placement/removal."""


class RepositoryError(GameError):
    """Game could not be found in the repository."""
