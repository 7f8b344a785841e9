"""Conversions between cube, offset and doubled coordinates.

Offset conversions take the parity (``EVEN`` or ``ODD``) as their first
argument; doubled conversions need none.  Halving truncates toward zero.
"""

from __future__ import annotations

from .coords import EVEN, ODD, DoubledCoord, Hex, OffsetCoord
from .errors import InvalidParity


def _check_parity(offset: int) -> None:
    if offset != EVEN and offset != ODD:
        raise InvalidParity(f"offset must be EVEN (+1) or ODD (-1), got {offset!r}")


def _half(n: int) -> int:
    return -(-n // 2) if n < 0 else n // 2


def qoffset_from_cube(offset: int, h: Hex) -> OffsetCoord:
    _check_parity(offset)
    parity = h.q & 1
    col = h.q
    row = h.r + _half(h.q + offset * parity)
    return OffsetCoord(col, row)


def qoffset_to_cube(offset: int, o: OffsetCoord) -> Hex:
    _check_parity(offset)
    parity = o.col & 1
    q = o.col
    r = o.row - _half(o.col + offset * parity)
    return Hex(q, r, -q - r)


def roffset_from_cube(offset: int, h: Hex) -> OffsetCoord:
    _check_parity(offset)
    parity = h.r & 1
    col = h.q + _half(h.r + offset * parity)
    row = h.r
    return OffsetCoord(col, row)


def roffset_to_cube(offset: int, o: OffsetCoord) -> Hex:
    _check_parity(offset)
    parity = o.row & 1
    q = o.col - _half(o.row + offset * parity)
    r = o.row
    return Hex(q, r, -q - r)


def qoffset_from_qdoubled(offset: int, d: DoubledCoord) -> OffsetCoord:
    _check_parity(offset)
    parity = d.col & 1
    return OffsetCoord(d.col, _half(d.row + offset * parity))


def qoffset_to_qdoubled(offset: int, o: OffsetCoord) -> DoubledCoord:
    _check_parity(offset)
    parity = o.col & 1
    return DoubledCoord(o.col, 2 * o.row - offset * parity)


def roffset_from_rdoubled(offset: int, d: DoubledCoord) -> OffsetCoord:
    _check_parity(offset)
    parity = d.row & 1
    return OffsetCoord(_half(d.col + offset * parity), d.row)


def roffset_to_rdoubled(offset: int, o: OffsetCoord) -> DoubledCoord:
    _check_parity(offset)
    parity = o.row & 1
    return DoubledCoord(2 * o.col - offset * parity, o.row)


def qdoubled_from_cube(h: Hex) -> DoubledCoord:
    return DoubledCoord(h.q, 2 * h.r + h.q)


def qdoubled_to_cube(d: DoubledCoord) -> Hex:
    q = d.col
    r = _half(d.row - d.col)
    return Hex(q, r, -q - r)


def rdoubled_from_cube(h: Hex) -> DoubledCoord:
    return DoubledCoord(2 * h.q + h.r, h.r)


def rdoubled_to_cube(d: DoubledCoord) -> Hex:
    q = _half(d.col - d.row)
    r = d.row
    return Hex(q, r, -q - r)


__all__ = [
    "qdoubled_from_cube",
    "qdoubled_to_cube",
    "qoffset_from_cube",
    "qoffset_from_qdoubled",
    "qoffset_to_cube",
    "qoffset_to_qdoubled",
    "rdoubled_from_cube",
    "rdoubled_to_cube",
    "roffset_from_cube",
    "roffset_from_rdoubled",
    "roffset_to_cube",
    "roffset_to_rdoubled",
]
