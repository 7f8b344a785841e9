"""Mapping between hex coordinates and screen pixels."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

from .coords import FractionalHex, Hex


class Point(NamedTuple):
    x: float
    y: float


# Orientation matrices from Red Blob (do not alter)
@dataclass(frozen=True, slots=True)
class Orientation:
    f0: float; f1: float; f2: float; f3: float  # axial(q,r) -> pixel
    b0: float; b1: float; b2: float; b3: float  # pixel -> axial
    start_angle: float                           # for polygon corners, in sixths of a turn


# Pointy-top and Flat-top
layout_pointy = Orientation(
    f0 =  math.sqrt(3.0), f1 =  math.sqrt(3.0)/2.0,
    f2 =  0.0,            f3 =  3.0/2.0,
    b0 =  math.sqrt(3.0)/3.0, b1 = -1.0/3.0,
    b2 =  0.0,                b3 =  2.0/3.0,
    start_angle = 0.5,
)
layout_flat = Orientation(
    f0 =  3.0/2.0,            f1 = 0.0,
    f2 =  math.sqrt(3.0)/2.0, f3 = math.sqrt(3.0),
    b0 =  2.0/3.0,  b1 = 0.0,
    b2 = -1.0/3.0,  b3 = math.sqrt(3.0)/3.0,
    start_angle = 0.0,
)


@dataclass(frozen=True, slots=True)
class Layout:
    """Binds an orientation to a per-axis hex size and a pixel origin."""

    orientation: Orientation
    size: Point
    origin: Point = Point(0.0, 0.0)

    def __post_init__(self) -> None:
        # Accept plain (x, y) tuples.
        object.__setattr__(self, "size", Point(*self.size))
        object.__setattr__(self, "origin", Point(*self.origin))
        if self.size.x == 0 or self.size.y == 0:
            raise ValueError(f"size components must be non-zero, got {tuple(self.size)}")

    def hex_to_pixel(self, h: Hex) -> Point:
        M = self.orientation
        x = (M.f0 * h.q + M.f1 * h.r) * self.size.x
        y = (M.f2 * h.q + M.f3 * h.r) * self.size.y
        return Point(x + self.origin.x, y + self.origin.y)

    def pixel_to_hex_fractional(self, p: Point) -> FractionalHex:
        M = self.orientation
        px = (p[0] - self.origin.x) / self.size.x
        py = (p[1] - self.origin.y) / self.size.y
        q = M.b0 * px + M.b1 * py
        r = M.b2 * px + M.b3 * py
        return FractionalHex(q, r, -q - r)

    def pixel_to_hex_rounded(self, p: Point) -> Hex:
        return self.pixel_to_hex_fractional(p).hex_round()

    def hex_corner_offset(self, corner: int) -> Point:
        angle = 2.0 * math.pi * (self.orientation.start_angle - corner) / 6.0
        return Point(self.size.x * math.cos(angle), self.size.y * math.sin(angle))

    def polygon_corners(self, h: Hex) -> list[Point]:
        """Return the six corners of ``h`` in ascending corner order.

        The order fixes the winding direction seen by polygon fills.
        """

        center = self.hex_to_pixel(h)
        corners: list[Point] = []
        for i in range(6):
            offset = self.hex_corner_offset(i)
            corners.append(Point(center.x + offset.x, center.y + offset.y))
        return corners


__all__ = ["Layout", "Orientation", "Point", "layout_flat", "layout_pointy"]
