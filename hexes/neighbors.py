from __future__ import annotations

from typing import Iterable

from .conversions import qoffset_from_cube, qoffset_to_cube
from .coords import HEX_DIAGONALS, HEX_DIRECTIONS, ODD, Hex, OffsetCoord


def neighbors(h: Hex) -> Iterable[Hex]:
    for d in HEX_DIRECTIONS:
        yield h.add(d)


def diagonal_neighbors(h: Hex) -> Iterable[Hex]:
    for d in HEX_DIAGONALS:
        yield h.add(d)


def rectangle_map(cols: int, rows: int, offset: int = ODD) -> list[Hex]:
    """Return every hex of a ``cols`` x ``rows`` q-offset grid, column by column."""

    if cols < 0 or rows < 0:
        raise ValueError("cols and rows must be non-negative")
    return [
        qoffset_to_cube(offset, OffsetCoord(col, row))
        for col in range(cols)
        for row in range(rows)
    ]


def in_rectangle(h: Hex, cols: int, rows: int, offset: int = ODD) -> bool:
    o = qoffset_from_cube(offset, h)
    return 0 <= o.col < cols and 0 <= o.row < rows


def neighbors_in_rectangle(
    h: Hex, cols: int, rows: int, offset: int = ODD
) -> Iterable[Hex]:
    for n in neighbors(h):
        if in_rectangle(n, cols, rows, offset):
            yield n


__all__ = [
    "diagonal_neighbors",
    "in_rectangle",
    "neighbors",
    "neighbors_in_rectangle",
    "rectangle_map",
]
