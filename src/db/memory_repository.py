"""Implementation of (Game)Repository keeping the live Game objects in a dictionary"""

import logging
from uuid import UUID, uuid4

from src.twixt.game import Game

logger = logging.getLogger(__name__)


class InMemoryGameRepository:
    """Games only live as long as the process does. Nothing is written to disk."""

    def __init__(self) -> None:
        self._games: dict[UUID, Game] = {}

    def get_game(self, game_id: UUID) -> Game | None:
        """Get game by ID, if it exists."""
        return self._games.get(game_id)

    def create_game(self, game: Game) -> tuple[Game, UUID]:
        """Store new game and return the stored game + newly created game ID."""
        new_id = uuid4()
        self._games[new_id] = game
        logger.info(f"Game created: {new_id}")
        return game, new_id

    def update_game(self, game_id: UUID, game: Game) -> Game | None:
        """Replace the stored game."""
        if game_id not in self._games:
            return None
        self._games[game_id] = game
        return game

    def delete_game(self, game_id: UUID) -> Game | None:
        """Forget a game."""
        game = self._games.pop(game_id, None)
        if game is not None:
            logger.info(f"Game deleted: {game_id}")
        return game

    def __len__(self) -> int:
        return len(self._games)
