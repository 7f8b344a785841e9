"""Hex-grid coordinate value types.

Cube coordinates (``q + r + s == 0``) are the canonical form; every other
encoding converts through :class:`Hex`.  See
https://www.redblobgames.com/grids/hexagons/ for the underlying algorithms.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .errors import InvalidCoordinate

EVEN = 1
ODD = -1


@dataclass(frozen=True, slots=True)
class Hex:
    """Integer cube coordinate.

    The constructor validates the caller's raw ``(q, r, s)`` triple and then
    stores ``s`` as ``-q - r``.  Equality and hashing only look at ``q`` and
    ``r``.
    """

    q: int
    r: int
    s: int = field(compare=False)

    def __post_init__(self) -> None:
        if self.q + self.r + self.s != 0:
            raise InvalidCoordinate(
                f"q + r + s must be 0, got ({self.q}, {self.r}, {self.s})"
            )
        object.__setattr__(self, "s", -self.q - self.r)

    @classmethod
    def axial(cls, q: int, r: int) -> Hex:
        """Build a hex from its two independent axes."""

        return cls(q, r, -q - r)

    def __iter__(self) -> Iterator[int]:
        yield self.q
        yield self.r
        yield self.s

    def __add__(self, other: Hex) -> Hex:
        return self.add(other)

    def __sub__(self, other: Hex) -> Hex:
        return self.subtract(other)

    def add(self, other: Hex) -> Hex:
        return Hex(self.q + other.q, self.r + other.r, self.s + other.s)

    def subtract(self, other: Hex) -> Hex:
        return Hex(self.q - other.q, self.r - other.r, self.s - other.s)

    def scale(self, k: int) -> Hex:
        return Hex(self.q * k, self.r * k, self.s * k)

    def rotate_left(self) -> Hex:
        """Rotate 60° about the origin (not about an arbitrary pivot)."""

        return Hex(-self.s, -self.q, -self.r)

    def rotate_right(self) -> Hex:
        """Rotate -60° about the origin (not about an arbitrary pivot)."""

        return Hex(-self.r, -self.s, -self.q)

    def neighbor(self, direction: int) -> Hex:
        return self.add(hex_direction(direction))

    def diagonal_neighbor(self, direction: int) -> Hex:
        return self.add(HEX_DIAGONALS[direction % 6])

    def length(self) -> int:
        return (abs(self.q) + abs(self.r) + abs(self.s)) // 2

    def distance(self, other: Hex) -> int:
        return self.subtract(other).length()

    def direction_to(self, neighbor: Hex) -> int | None:
        """Return the direction index leading to ``neighbor``.

        ``None`` is returned when ``neighbor`` is not adjacent, including
        when it is this hex.
        """

        for direction in range(6):
            candidate = self.neighbor(direction)
            if candidate.q == neighbor.q and candidate.r == neighbor.r:
                return direction
        return None


HEX_DIRECTIONS: tuple[Hex, ...] = (
    Hex(1, 0, -1),
    Hex(1, -1, 0),
    Hex(0, -1, 1),
    Hex(-1, 0, 1),
    Hex(-1, 1, 0),
    Hex(0, 1, -1),
)

HEX_DIAGONALS: tuple[Hex, ...] = (
    Hex(2, -1, -1),
    Hex(1, -2, 1),
    Hex(-1, -1, 2),
    Hex(-2, 1, 1),
    Hex(-1, 2, -1),
    Hex(1, 1, -2),
)


def hex_direction(direction: int) -> Hex:
    """Unit vector for ``direction``; indices wrap modulo six."""

    return HEX_DIRECTIONS[direction % 6]


@dataclass(frozen=True, slots=True)
class FractionalHex:
    """Real-valued cube coordinate used between pixel space and the grid."""

    q: float
    r: float
    s: float

    def __post_init__(self) -> None:
        if round(self.q + self.r + self.s) != 0:
            raise InvalidCoordinate(
                f"q + r + s must be 0, got ({self.q}, {self.r}, {self.s})"
            )

    @classmethod
    def from_hex(cls, h: Hex) -> FractionalHex:
        return cls(float(h.q), float(h.r), float(h.s))

    def hex_round(self) -> Hex:
        """Snap to the nearest integer hex.

        The axis with the largest rounding error is rebuilt from the other
        two; on a tie ``s`` is the one rebuilt.
        """

        qi = round(self.q)
        ri = round(self.r)
        si = round(self.s)
        q_diff = abs(qi - self.q)
        r_diff = abs(ri - self.r)
        s_diff = abs(si - self.s)
        if q_diff > r_diff and q_diff > s_diff:
            qi = -ri - si
        elif r_diff > s_diff:
            ri = -qi - si
        else:
            si = -qi - ri
        return Hex(qi, ri, si)

    def hex_lerp(self, other: FractionalHex, t: float) -> FractionalHex:
        return FractionalHex(
            self.q * (1.0 - t) + other.q * t,
            self.r * (1.0 - t) + other.r * t,
            self.s * (1.0 - t) + other.s * t,
        )


@dataclass(frozen=True, slots=True)
class OffsetCoord:
    """Column/row position; only meaningful together with its parity."""

    col: int
    row: int


@dataclass(frozen=True, slots=True)
class DoubledCoord:
    """Column/row position with either rows or columns doubled."""

    col: int
    row: int


__all__ = [
    "EVEN",
    "ODD",
    "HEX_DIAGONALS",
    "HEX_DIRECTIONS",
    "DoubledCoord",
    "FractionalHex",
    "Hex",
    "OffsetCoord",
    "hex_direction",
]
