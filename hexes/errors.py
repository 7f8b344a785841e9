"""Exceptions raised for out-of-contract hex coordinate input."""

from __future__ import annotations


class InvalidCoordinate(ValueError):
    """A cube or fractional triple whose components do not sum to zero."""


class InvalidParity(ValueError):
    """An offset parity argument that is neither ``EVEN`` nor ``ODD``."""


__all__ = ["InvalidCoordinate", "InvalidParity"]
