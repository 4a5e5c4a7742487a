"""
Barriers (links) between two pegs of the same player, and the geometry needed to check whether two barriers cross.

All checks use integer cross products: no slopes, no division, no floating point comparisons.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.twixt.peg import Peg

# a barrier spans a knight's move: 1^2 + 2^2
BARRIER_SQUARED_LENGTH = 5

Vector = tuple[int, int]


def _vector(start: Peg, end: Peg) -> Vector:
    return (end.x - start.x, end.y - start.y)


def _cross(u: Vector, v: Vector) -> int:
    """z-component of the cross product. Zero means the vectors are parallel; the sign gives the orientation."""
    return u[0] * v[1] - u[1] * v[0]


@dataclass(frozen=True, order=True)
class Barrier:
    """
    Endpoints are always stored in canonical order (start < end), so that two barriers between the same pegs are equal
    no matter in which order the endpoints were supplied. Use `Barrier.between` rather than the constructor.
    """

    start: Peg
    end: Peg

    @classmethod
    def between(cls, peg_a: Peg, peg_b: Peg) -> Barrier:
        return cls(peg_a, peg_b) if peg_a < peg_b else cls(peg_b, peg_a)

    def as_tuple(self) -> tuple[tuple[int, int], tuple[int, int]]:
        return (self.start.as_tuple(), self.end.as_tuple())

    def has_valid_length(self) -> bool:
        return self.start.squared_distance(self.end) == BARRIER_SQUARED_LENGTH

    def touches(self, peg: Peg) -> bool:
        return peg in (self.start, self.end)

    def other_end(self, peg: Peg) -> Peg:
        if peg == self.start:
            return self.end
        if peg == self.end:
            return self.start
        raise ValueError(f"{peg} is not an endpoint of {self}")

    def direction(self) -> Vector:
        return _vector(self.start, self.end)

    def is_parallel(self, other: Barrier) -> bool:
        return _cross(self.direction(), other.direction()) == 0

    def crosses(self, other: Barrier) -> bool:
        """
        True if the two barriers intersect strictly inside both of them.

        Touching in a shared endpoint is not crossing (many barriers may leave the same peg).
        Parallel barriers never cross: barriers of length sqrt(5) on the same line only ever share an endpoint.
        Checking whether they are the *same* barrier is left to the caller.
        """
        if self.is_parallel(other):
            return False

        # each barrier's endpoints must lie strictly on opposite sides of the other barrier's line
        own_direction = self.direction()
        other_direction = other.direction()
        side_other_start = _cross(own_direction, _vector(self.start, other.start))
        side_other_end = _cross(own_direction, _vector(self.start, other.end))
        side_own_start = _cross(other_direction, _vector(other.start, self.start))
        side_own_end = _cross(other_direction, _vector(other.start, self.end))
        return (side_other_start * side_other_end < 0) and (
            side_own_start * side_own_end < 0
        )

    def blocks(self, other: Barrier) -> bool:
        """An existing barrier blocks a new one if it is the same barrier or if the two would cross."""
        return self == other or self.crosses(other)
