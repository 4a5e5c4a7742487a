"""Orchestration of communication from API router to business logic and repository layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    AdjacentPegsRequest,
    AdjacentPegsResponse,
    BarrierRequest,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    JoinGameRequest,
    PegRequest,
    PhaseRequest,
    TurnRequest,
)
from src.core.exceptions import RepositoryError
from src.db.repository import GameRepository
from src.twixt.game import Game

logger = logging.getLogger(__name__)


class TwixtService:
    """Orchestration of layers for a TwixT game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """First player requested to create a new game."""
        new_game = Game.new_game(player=request.player_name, color=request.color)
        stored_game, game_id = self.repo.create_game(new_game)
        logger.info(
            f"{request.player_name} created game {game_id} playing {request.color}"
        )
        return self._create_game_response(game_id, stored_game)

    def join_game(self, request: JoinGameRequest) -> GameResponse:
        """Second player requested to join a game."""
        game = self._fetch_game(request.game_id)
        game.register_player(request.player_name)
        return self._store(request.game_id, game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn, and to render pegs and barriers.
        """
        game = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game)

    def select_phase(self, request: PhaseRequest) -> GameResponse:
        """Player switches between placing / removing pegs and barriers."""
        game = self._fetch_game(request.game_id)
        game.select_phase(request.player_name, request.phase)
        return self._store(request.game_id, game)

    def place_peg(self, request: PegRequest) -> GameResponse:
        game = self._fetch_game(request.game_id)
        game.place_peg(request.player_name, request.peg.to_peg())
        return self._store(request.game_id, game)

    def place_barrier(self, request: BarrierRequest) -> GameResponse:
        """Placing a barrier can end the game: the response then carries the winner."""
        game = self._fetch_game(request.game_id)
        game.place_barrier(
            request.player_name, request.start.to_peg(), request.end.to_peg()
        )
        if game.winner is not None:
            logger.info(f"Game {request.game_id} won by {game.winner}")
        return self._store(request.game_id, game)

    def remove_peg(self, request: PegRequest) -> GameResponse:
        game = self._fetch_game(request.game_id)
        game.remove_peg(request.player_name, request.peg.to_peg())
        return self._store(request.game_id, game)

    def remove_barrier(self, request: BarrierRequest) -> GameResponse:
        game = self._fetch_game(request.game_id)
        game.remove_barrier(
            request.player_name, request.start.to_peg(), request.end.to_peg()
        )
        return self._store(request.game_id, game)

    def end_turn(self, request: TurnRequest) -> GameResponse:
        game = self._fetch_game(request.game_id)
        game.end_turn(request.player_name)
        return self._store(request.game_id, game)

    def restart_game(self, request: GetGameRequest) -> GameResponse:
        """Same players, new board. Only once the game is over."""
        game = self._fetch_game(request.game_id)
        game.restart()
        return self._store(request.game_id, game)

    def adjacent_pegs(self, request: AdjacentPegsRequest) -> AdjacentPegsResponse:
        """Pegs linked by a barrier to the requested one (e.g. to know if a barrier-removal drag can start there)."""
        game = self._fetch_game(request.game_id)
        peg = request.peg.to_peg()
        return AdjacentPegsResponse(
            game_id=request.game_id,
            peg=peg.as_tuple(),
            adjacent_pegs=[
                adjacent.as_tuple() for adjacent in sorted(game.adjacent_pegs(peg))
            ],
        )

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game."""
        self.repo.delete_game(request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, game: Game) -> GameResponse:
        """Convert the snapshot of the Game to a GameResponse (for game with given ID.)"""
        model = game.to_model()
        return GameResponse(
            game_id=game_id,
            players=model.registered_players,
            current_player=model.current_player,
            phase=model.phase,
            status=model.status,
            winner=model.winner,
            pegs=model.pegs,
            barriers=model.barriers,
        )

    def _store(self, game_id: UUID, game: Game) -> GameResponse:
        self.repo.update_game(game_id, game)
        return self._create_game_response(game_id, game)

    def _fetch_game(self, game_id: UUID) -> Game:
        """Attempt to find the game in the repository and raise error if it fails."""
        game = self.repo.get_game(game_id)
        if game is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game
