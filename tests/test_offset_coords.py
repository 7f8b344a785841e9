import pytest

from hexes import (
    EVEN,
    ODD,
    DoubledCoord,
    Hex,
    InvalidParity,
    OffsetCoord,
    qdoubled_from_cube,
    qoffset_from_cube,
    qoffset_from_qdoubled,
    qoffset_to_cube,
    qoffset_to_qdoubled,
    rdoubled_from_cube,
    roffset_from_cube,
    roffset_from_rdoubled,
    roffset_to_cube,
    roffset_to_rdoubled,
)

SAMPLE = [Hex(q, r, -q - r) for q in range(-4, 5) for r in range(-4, 5)]


def test_origin_maps_to_origin():
    assert qoffset_from_cube(ODD, Hex(0, 0, 0)) == OffsetCoord(0, 0)
    assert roffset_from_cube(EVEN, Hex(0, 0, 0)) == OffsetCoord(0, 0)


@pytest.mark.parametrize(
    ("offset", "h", "expected"),
    [
        (EVEN, Hex(1, 2, -3), OffsetCoord(1, 3)),
        (ODD, Hex(1, 2, -3), OffsetCoord(1, 2)),
        (EVEN, Hex(-1, 0, 1), OffsetCoord(-1, 0)),
        (ODD, Hex(-1, 0, 1), OffsetCoord(-1, -1)),
    ],
)
def test_qoffset_known_values(offset: int, h: Hex, expected: OffsetCoord):
    assert qoffset_from_cube(offset, h) == expected
    assert qoffset_to_cube(offset, expected) == h


@pytest.mark.parametrize(
    ("offset", "h", "expected"),
    [
        (EVEN, Hex(1, 2, -3), OffsetCoord(2, 2)),
        (ODD, Hex(1, 2, -3), OffsetCoord(2, 2)),
        (EVEN, Hex(0, -1, 1), OffsetCoord(0, -1)),
        (ODD, Hex(0, -1, 1), OffsetCoord(-1, -1)),
    ],
)
def test_roffset_known_values(offset: int, h: Hex, expected: OffsetCoord):
    assert roffset_from_cube(offset, h) == expected
    assert roffset_to_cube(offset, expected) == h


@pytest.mark.parametrize("offset", [EVEN, ODD])
def test_offset_roundtrip(offset: int):
    for h in SAMPLE:
        assert qoffset_to_cube(offset, qoffset_from_cube(offset, h)) == h
        assert roffset_to_cube(offset, roffset_from_cube(offset, h)) == h


@pytest.mark.parametrize("offset", [EVEN, ODD])
def test_offset_grid_roundtrip(offset: int):
    for col in range(-3, 4):
        for row in range(-3, 4):
            o = OffsetCoord(col, row)
            assert qoffset_from_cube(offset, qoffset_to_cube(offset, o)) == o
            assert roffset_from_cube(offset, roffset_to_cube(offset, o)) == o


@pytest.mark.parametrize("bad", [0, 2, -2])
@pytest.mark.parametrize(
    "convert",
    [
        lambda p: qoffset_from_cube(p, Hex(0, 0, 0)),
        lambda p: roffset_from_cube(p, Hex(0, 0, 0)),
        lambda p: qoffset_to_cube(p, OffsetCoord(0, 0)),
        lambda p: roffset_to_cube(p, OffsetCoord(0, 0)),
        lambda p: qoffset_from_qdoubled(p, DoubledCoord(0, 0)),
        lambda p: qoffset_to_qdoubled(p, OffsetCoord(0, 0)),
        lambda p: roffset_from_rdoubled(p, DoubledCoord(0, 0)),
        lambda p: roffset_to_rdoubled(p, OffsetCoord(0, 0)),
    ],
)
def test_invalid_parity_is_rejected(convert, bad: int):
    with pytest.raises(InvalidParity):
        convert(bad)


def test_invalid_parity_is_value_error():
    with pytest.raises(ValueError):
        qoffset_from_cube(0, Hex(0, 0, 0))


def test_qoffset_qdoubled_known_values():
    d = qdoubled_from_cube(Hex(1, 2, -3))
    assert qoffset_from_qdoubled(EVEN, d) == OffsetCoord(1, 3)
    assert qoffset_from_qdoubled(ODD, d) == OffsetCoord(1, 2)
    assert qoffset_to_qdoubled(EVEN, OffsetCoord(1, 3)) == d
    assert qoffset_to_qdoubled(ODD, OffsetCoord(1, 2)) == d


def test_roffset_rdoubled_known_values():
    d = rdoubled_from_cube(Hex(0, -1, 1))
    assert d == DoubledCoord(-1, -1)
    assert roffset_from_rdoubled(EVEN, d) == OffsetCoord(0, -1)
    assert roffset_from_rdoubled(ODD, d) == OffsetCoord(-1, -1)
    assert roffset_to_rdoubled(ODD, OffsetCoord(-1, -1)) == d


@pytest.mark.parametrize("offset", [EVEN, ODD])
def test_offset_doubled_agree_with_cube_path(offset: int):
    for h in SAMPLE:
        assert qoffset_from_qdoubled(offset, qdoubled_from_cube(h)) == qoffset_from_cube(offset, h)
        assert roffset_from_rdoubled(offset, rdoubled_from_cube(h)) == roffset_from_cube(offset, h)
        assert qoffset_to_qdoubled(offset, qoffset_from_cube(offset, h)) == qdoubled_from_cube(h)
        assert roffset_to_rdoubled(offset, roffset_from_cube(offset, h)) == rdoubled_from_cube(h)
