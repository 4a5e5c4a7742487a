"""
The Game class will be the entrypoint into the domain layer for the service layer.
It owns one Board and is responsible for orchestrating a turn of TwixT:

1. (optionally) remove some of your own pegs / barriers
2. place exactly one peg
3. place as many barriers as you like (every barrier may win the game)
4. end your turn

The Board only answers True/False. Here a refusal becomes an exception, which the service layer passes onwards to the API layer.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import (
    GameStateError,
    IllegalMoveError,
    NotYourTurnError,
)
from src.core.models import GameModel
from src.core.shared_types import Phase, Status
from src.twixt.board import PLAYING_COLORS, Board
from src.twixt.peg import Peg
from src.twixt.players import AVAILABLE_PLAYER_NAMES, Player, opponent

logger = logging.getLogger(__name__)

# Red always moves first
STARTING_PLAYER = Player.RED

# Which phases a player can switch to by hand (e.g. pressing a button in the UI). Once a peg has been placed the turn can
# only continue with barriers (or be ended).
PHASE_TRANSITIONS: dict[Phase, set[Phase]] = {
    Phase.PLACE_PEG: {Phase.PLACE_PEG, Phase.REMOVE_PEG, Phase.REMOVE_BARRIER},
    Phase.REMOVE_PEG: {Phase.PLACE_PEG, Phase.REMOVE_PEG, Phase.REMOVE_BARRIER},
    Phase.REMOVE_BARRIER: {Phase.PLACE_PEG, Phase.REMOVE_PEG, Phase.REMOVE_BARRIER},
    Phase.PLACE_BARRIER: {Phase.PLACE_BARRIER},
    Phase.GAME_OVER: set(),
}


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    players: dict[Player, str]
    board: Board = field(default_factory=Board)
    current_player: Player = STARTING_PLAYER
    phase: Phase = Phase.PLACE_PEG
    status: Status = Status.WAITING_FOR_PLAYERS
    winner_color: Optional[Player] = None

    @classmethod
    def new_game(cls, player: str, color: str) -> Self:
        """To start a new game with the player using the pegs with the indicated color."""
        if color.upper() not in AVAILABLE_PLAYER_NAMES:
            raise GameStateError(
                f"Cannot create new game. Color {color} not in {','.join([c.lower() for c in AVAILABLE_PLAYER_NAMES])}."
            )
        return cls(players={Player[color.upper()]: player})

    def to_model(self) -> GameModel:
        """Snapshot in a format the Service layer uses"""
        return GameModel(
            pegs={
                color.name.lower(): [
                    peg.as_tuple() for peg in self.board.locate_player(color)
                ]
                for color in PLAYING_COLORS
            },
            barriers={
                color.name.lower(): [
                    barrier.as_tuple() for barrier in self.board.barriers(color)
                ]
                for color in PLAYING_COLORS
            },
            registered_players={
                color.name.lower(): name for color, name in self.players.items()
            },
            current_player=self.current_player.name.lower(),
            phase=self.phase.value,
            status=self.status.value,
            winner=self.winner,
        )

    @property
    def winner(self) -> Optional[str]:
        if self.winner_color is None:
            return None
        return self.players[self.winner_color]

    def register_player(self, player: str) -> None:
        """Registering the 2nd player to an open game"""
        if self.status != Status.WAITING_FOR_PLAYERS:
            raise GameStateError(
                f"Cannot join this game. Game is not accepting new players. status: {self.status}"
            )
        if player in self.players.values():
            raise GameStateError(f"Player {player!r} already joined this game.")

        opponent_color = list(self.players.keys())[0]
        self.players[opponent(opponent_color)] = player
        self._start()
        logger.info(f"Player {player} joined, game in progress")

    def restart(self) -> None:
        """New game for the same players, on an empty board (Red starts again)."""
        if self.status != Status.FINISHED:
            raise GameStateError(
                f"Can only restart a finished game. status: {self.status}"
            )
        self.board = Board()
        self.winner_color = None
        self._start()
        logger.info("Game restarted")

    def select_phase(self, player: str, phase: Phase) -> None:
        """Switch between placing / removing pegs and barriers within your turn."""
        self._assert_in_progress()
        self._assert_your_turn(player)
        if phase not in PHASE_TRANSITIONS[self.phase]:
            raise GameStateError(
                f"Cannot switch from {self.phase.value!r} to {phase.value!r}."
            )
        self.phase = phase

    def place_peg(self, player: str, peg: Peg) -> None:
        self._assert_can_act(player, Phase.PLACE_PEG)
        if not self.board.place_peg(peg, self.current_player):
            raise IllegalMoveError(f"Cannot place a peg at {peg.as_tuple()}")

        logger.debug(f"{self.current_player.name} placed a peg at {peg.as_tuple()}")
        self.phase = Phase.PLACE_BARRIER

    def place_barrier(self, player: str, start: Peg, end: Peg) -> None:
        """A new barrier is the only way to complete a chain, so check for a winner right after."""
        self._assert_can_act(player, Phase.PLACE_BARRIER)
        if not self.board.place_barrier(start, end, self.current_player):
            raise IllegalMoveError(
                f"Cannot place a barrier between {start.as_tuple()} and {end.as_tuple()}"
            )

        logger.debug(
            f"{self.current_player.name} placed a barrier between {start.as_tuple()} and {end.as_tuple()}"
        )
        if self.board.game_won(self.current_player):
            self._finish(self.current_player)

    def remove_peg(self, player: str, peg: Peg) -> None:
        self._assert_can_act(player, Phase.REMOVE_PEG)
        if not self.board.remove_peg(peg, self.current_player):
            raise IllegalMoveError(f"No peg of yours to remove at {peg.as_tuple()}")
        logger.debug(f"{self.current_player.name} removed the peg at {peg.as_tuple()}")

    def remove_barrier(self, player: str, start: Peg, end: Peg) -> None:
        self._assert_can_act(player, Phase.REMOVE_BARRIER)
        if not self.board.remove_barrier(start, end, self.current_player):
            raise IllegalMoveError(
                f"No barrier of yours between {start.as_tuple()} and {end.as_tuple()}"
            )
        logger.debug(
            f"{self.current_player.name} removed the barrier between {start.as_tuple()} and {end.as_tuple()}"
        )

    def end_turn(self, player: str) -> None:
        """A turn is only complete once a peg has been placed."""
        self._assert_can_act(player, Phase.PLACE_BARRIER)
        self.current_player = opponent(self.current_player)
        self.phase = Phase.PLACE_PEG
        logger.info(f"Turn ended, {self.current_player.name} to move")

    def adjacent_pegs(self, peg: Peg) -> list[Peg]:
        return self.board.adjacent_pegs(peg)

    # -- PRIVATE HELPERS ---
    def _start(self) -> None:
        self.current_player = STARTING_PLAYER
        self.phase = Phase.PLACE_PEG
        self.status = Status.IN_PROGRESS

    def _finish(self, winner: Player) -> None:
        self.winner_color = winner
        self.phase = Phase.GAME_OVER
        self.status = Status.FINISHED
        logger.info(f"{winner.name} connected both home lines and won")

    def _get_turn_player(self) -> str:
        return self.players[self.current_player]

    def _assert_in_progress(self) -> None:
        if self.status != Status.IN_PROGRESS:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

    def _assert_your_turn(self, player: str) -> None:
        """You must wait for your turn before doing anything on the board."""
        player_to_move = self._get_turn_player()
        if player != player_to_move:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for player {player_to_move} to make a move first."
            )

    def _assert_phase(self, phase: Phase) -> None:
        if self.phase != phase:
            raise GameStateError(
                f"Cannot {phase.value} now. Current phase: {self.phase.value}"
            )

    def _assert_can_act(self, player: str, phase: Phase) -> None:
        self._assert_in_progress()
        self._assert_your_turn(player)
        self._assert_phase(phase)
