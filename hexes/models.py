"""Pydantic models for exchanging coordinates as JSON."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from pydantic import BaseModel, ConfigDict, model_validator

from .coords import DoubledCoord, Hex, OffsetCoord


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray)


class HexModel(BaseModel):
    """Serializable cube coordinate, written as ``{"q": .., "r": .., "s": ..}``."""

    model_config = ConfigDict(extra="forbid")

    q: int = 0
    r: int = 0
    s: int | None = None

    @model_validator(mode="before")
    @classmethod
    def _coerce_input(cls, value: object) -> Mapping[str, object] | object:
        if isinstance(value, Hex):
            return {"q": value.q, "r": value.r, "s": value.s}
        if isinstance(value, Mapping):
            return value
        if _is_sequence(value):
            sequence = list(value)  # type: ignore[arg-type]
            if len(sequence) in (2, 3):
                return dict(zip(("q", "r", "s"), sequence))
        return value

    @model_validator(mode="after")
    def _check_invariant(self) -> HexModel:
        # Raises InvalidCoordinate, which pydantic reports as a validation error.
        self.s = Hex(self.q, self.r, -self.q - self.r if self.s is None else self.s).s
        return self

    @classmethod
    def from_hex(cls, h: Hex) -> HexModel:
        return cls(q=h.q, r=h.r, s=h.s)

    def to_hex(self) -> Hex:
        return Hex.axial(self.q, self.r)


class _ColRowModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    col: int
    row: int

    @model_validator(mode="before")
    @classmethod
    def _coerce_pair(cls, value: object) -> Mapping[str, object] | object:
        if isinstance(value, OffsetCoord | DoubledCoord):
            return {"col": value.col, "row": value.row}
        if _is_sequence(value):
            sequence = list(value)  # type: ignore[arg-type]
            if len(sequence) == 2:
                return {"col": sequence[0], "row": sequence[1]}
        return value


class OffsetCoordModel(_ColRowModel):
    """Serializable offset coordinate; the parity travels separately."""

    @classmethod
    def from_offset(cls, o: OffsetCoord) -> OffsetCoordModel:
        return cls(col=o.col, row=o.row)

    def to_offset(self) -> OffsetCoord:
        return OffsetCoord(self.col, self.row)


class DoubledCoordModel(_ColRowModel):
    """Serializable doubled coordinate."""

    @classmethod
    def from_doubled(cls, d: DoubledCoord) -> DoubledCoordModel:
        return cls(col=d.col, row=d.row)

    def to_doubled(self) -> DoubledCoord:
        return DoubledCoord(self.col, self.row)


__all__ = ["DoubledCoordModel", "HexModel", "OffsetCoordModel"]
