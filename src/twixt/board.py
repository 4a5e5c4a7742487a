"""The Game board implements all rules that effect the `position` (in TwixT: the pegs in their holes and the barriers between them)

Every mutating method checks all rules first and only then changes the board, answering True (done) or False (refused).
Nothing on the board raises for an illegal move: the Game class decides what a refusal means.
"""

from collections import deque
from dataclasses import dataclass, field

from src.twixt.barrier import Barrier
from src.twixt.peg import Peg, all_pegs
from src.twixt.players import (
    FIRST_HOME_LINE,
    LAST_HOME_LINE,
    Player,
    home_coordinate,
    home_line_pegs,
    is_forbidden_for,
)

PLAYING_COLORS = (Player.RED, Player.BLACK)


def _empty_position() -> dict[Peg, Player]:
    return {peg: Player.NONE for peg in all_pegs()}


@dataclass
class Board:
    position: dict[Peg, Player] = field(default_factory=_empty_position)
    red_barriers: list[Barrier] = field(default_factory=list)
    black_barriers: list[Barrier] = field(default_factory=list)

    # -- QUERIES ---
    def player_at(self, peg: Peg) -> Player:
        """Holes outside the board can never hold a peg"""
        return self.position.get(peg, Player.NONE)

    def locate_player(self, player: Player) -> list[Peg]:
        return sorted(peg for peg, owner in self.position.items() if owner == player)

    def barriers(self, player: Player) -> tuple[Barrier, ...]:
        """Read-only view of a player's barriers (e.g. for rendering)."""
        if player not in PLAYING_COLORS:
            return ()
        return tuple(self._barrier_list(player))

    def adjacent_pegs(self, peg: Peg) -> list[Peg]:
        """Pegs connected to the given one by a barrier of the peg's owner. An empty hole has no neighbours."""
        owner = self.player_at(peg)
        if owner == Player.NONE:
            return []
        return [
            barrier.other_end(peg)
            for barrier in self._barrier_list(owner)
            if barrier.touches(peg)
        ]

    def game_won(self, player: Player) -> bool:
        """
        Does a chain of barriers connect the player's first home line with the other one?

        Start from all the player's pegs on the first home line (Red: y=1, Black: x=1) and collect every peg reachable through
        the player's barriers. Won if one of those lies on the last home line (Red: y=24, Black: x=24).
        """
        if player not in PLAYING_COLORS:
            return False

        to_visit = deque(
            peg
            for peg in home_line_pegs(player, FIRST_HOME_LINE)
            if self.player_at(peg) == player
        )
        connected: set[Peg] = set()
        while to_visit:
            peg = to_visit.popleft()
            if peg in connected:
                continue
            connected.add(peg)
            to_visit.extend(
                neighbour
                for neighbour in self.adjacent_pegs(peg)
                if neighbour not in connected
            )

        return any(
            home_coordinate(peg, player) == LAST_HOME_LINE for peg in connected
        )

    # -- PEGS ---
    def place_peg(self, peg: Peg, player: Player) -> bool:
        """
        A peg goes into an empty hole on the board.
        Red may not use the columns x=1 and x=24, Black may not use the rows y=1 and y=24 (the opponent's home lines).
        """
        if player not in PLAYING_COLORS or not peg.is_within_bounds():
            return False

        if is_forbidden_for(peg, player):
            return False

        if self.player_at(peg) != Player.NONE:
            return False

        self.position[peg] = player
        return True

    def remove_peg(self, peg: Peg, player: Player) -> bool:
        """Only your own peg can be removed. All your barriers attached to it go with it."""
        if player not in PLAYING_COLORS or self.player_at(peg) != player:
            return False

        self._set_barrier_list(
            player,
            [
                barrier
                for barrier in self._barrier_list(player)
                if not barrier.touches(peg)
            ],
        )
        self.position[peg] = Player.NONE
        return True

    # -- BARRIERS ---
    def place_barrier(self, peg_a: Peg, peg_b: Peg, player: Player) -> bool:
        """
        A barrier is legal if:
        1. the pegs are a knight's move apart (squared distance 5)
        2. the player owns both pegs
        3. it is not already on the board, and it does not cross any barrier on the board (of either player)
        """
        if player not in PLAYING_COLORS:
            return False

        new_barrier = Barrier.between(peg_a, peg_b)
        if not new_barrier.has_valid_length():
            return False

        if self.player_at(peg_a) != player or self.player_at(peg_b) != player:
            return False

        if any(existing.blocks(new_barrier) for existing in self._all_barriers()):
            return False

        self._barrier_list(player).append(new_barrier)
        return True

    def remove_barrier(self, peg_a: Peg, peg_b: Peg, player: Player) -> bool:
        """Remove one of your barriers. The pegs stay where they are."""
        if player not in PLAYING_COLORS:
            return False

        barrier = Barrier.between(peg_a, peg_b)
        player_barriers = self._barrier_list(player)
        if barrier not in player_barriers:
            return False

        player_barriers.remove(barrier)
        return True

    # -- PRIVATE HELPERS ---
    def _barrier_list(self, player: Player) -> list[Barrier]:
        return self.red_barriers if player == Player.RED else self.black_barriers

    def _set_barrier_list(self, player: Player, barriers: list[Barrier]) -> None:
        if player == Player.RED:
            self.red_barriers = barriers
        else:
            self.black_barriers = barriers

    def _all_barriers(self) -> list[Barrier]:
        return self.red_barriers + self.black_barriers
