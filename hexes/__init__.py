"""Hex-grid coordinates, conversions and pixel layout."""

from .coords import (
    EVEN,
    HEX_DIAGONALS,
    HEX_DIRECTIONS,
    ODD,
    DoubledCoord,
    FractionalHex,
    Hex,
    OffsetCoord,
    hex_direction,
)
from .conversions import (
    qdoubled_from_cube,
    qdoubled_to_cube,
    qoffset_from_cube,
    qoffset_from_qdoubled,
    qoffset_to_cube,
    qoffset_to_qdoubled,
    rdoubled_from_cube,
    rdoubled_to_cube,
    roffset_from_cube,
    roffset_from_rdoubled,
    roffset_to_cube,
    roffset_to_rdoubled,
)
from .errors import InvalidCoordinate, InvalidParity
from .layout import Layout, Orientation, Point, layout_flat, layout_pointy
from .lines import hex_linedraw
from .neighbors import (
    diagonal_neighbors,
    in_rectangle,
    neighbors,
    neighbors_in_rectangle,
    rectangle_map,
)

__version__ = "0.1.0"

__all__ = [
    "EVEN",
    "ODD",
    "HEX_DIAGONALS",
    "HEX_DIRECTIONS",
    "DoubledCoord",
    "FractionalHex",
    "Hex",
    "InvalidCoordinate",
    "InvalidParity",
    "Layout",
    "OffsetCoord",
    "Orientation",
    "Point",
    "diagonal_neighbors",
    "hex_direction",
    "hex_linedraw",
    "in_rectangle",
    "layout_flat",
    "layout_pointy",
    "neighbors",
    "neighbors_in_rectangle",
    "qdoubled_from_cube",
    "qdoubled_to_cube",
    "qoffset_from_cube",
    "qoffset_from_qdoubled",
    "qoffset_to_cube",
    "qoffset_to_qdoubled",
    "rdoubled_from_cube",
    "rdoubled_to_cube",
    "rectangle_map",
    "roffset_from_cube",
    "roffset_from_rdoubled",
    "roffset_to_cube",
    "roffset_to_rdoubled",
]
