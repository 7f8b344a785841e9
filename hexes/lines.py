"""Discrete lines across the hex grid."""

from __future__ import annotations

from .coords import FractionalHex, Hex

# Pushes points lying exactly on a hex edge or vertex consistently to one side.
_NUDGE = (1e-06, 1e-06, -2e-06)


def _nudged(h: Hex) -> FractionalHex:
    dq, dr, ds = _NUDGE
    return FractionalHex(h.q + dq, h.r + dr, h.s + ds)


def hex_linedraw(a: Hex, b: Hex) -> list[Hex]:
    """Return the hexes on the line from ``a`` to ``b``, both inclusive.

    The result always holds ``a.distance(b) + 1`` hexes, so ``a == b`` yields
    a single element.
    """

    n = a.distance(b)
    a_nudge = _nudged(a)
    b_nudge = _nudged(b)
    step = 1.0 / max(n, 1)
    return [a_nudge.hex_lerp(b_nudge, step * i).hex_round() for i in range(n + 1)]


__all__ = ["hex_linedraw"]
