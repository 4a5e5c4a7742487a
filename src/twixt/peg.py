"""
A peg hole on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# TwixT is always played on a 24x24 grid of holes, numbered 1-24 in both directions
BOARD_SIZE = 24


@dataclass(frozen=True, order=True)
class Peg:
    """Board address. Ordering is lexical: first by x, then by y (the field order)."""

    x: int
    y: int

    @classmethod
    def from_tuple(cls, coords: tuple[int, int]) -> Peg:
        return cls(*coords)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def is_within_bounds(self) -> bool:
        return (1 <= self.x <= BOARD_SIZE) and (1 <= self.y <= BOARD_SIZE)

    def squared_distance(self, other: Peg) -> int:
        return (other.x - self.x) ** 2 + (other.y - self.y) ** 2


def all_pegs() -> list[Peg]:
    """Every hole on the board, column by column."""
    return [
        Peg(x, y) for x in range(1, BOARD_SIZE + 1) for y in range(1, BOARD_SIZE + 1)
    ]
