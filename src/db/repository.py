"""Protocol repository (kept in memory for now: see src/db/memory_repository.py)"""

from typing import Protocol
from uuid import UUID

from src.twixt.game import Game


class GameRepository(Protocol):
    """Game session bookkeeping"""

    def get_game(self, game_id: UUID) -> Game | None:
        """Get game by ID, if it exists."""
        ...

    def create_game(self, game: Game) -> tuple[Game, UUID]:
        """Store new game and return the stored game + newly created game ID."""
        ...

    def update_game(self, game_id: UUID, game: Game) -> Game | None:
        """Replace the stored game."""
        ...

    def delete_game(self, game_id: UUID) -> Game | None:
        """Forget a game."""
        ...
