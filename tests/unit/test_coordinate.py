import pytest
from pydantic import ValidationError

from cardchess.core.primitives import Coordinate


def test_from_index_and_algebraic():
    c = Coordinate.from_index({"x": 0, "y": 0})
    assert c.index == {"x": 0, "y": 0}
    assert c.algebraic == "A1"

    c = Coordinate.from_algebraic("B3")
    assert c.index == {"x": 1, "y": 2}
    assert Coordinate.from_algebraic("b3") == c
    assert Coordinate.from_index((1, 2)) == c


def test_round_trip_all_files():
    for x in range(26):
        for y in range(0, 40, 7):
            c = Coordinate.from_index({"x": x, "y": y})
            assert Coordinate.from_algebraic(c.algebraic).index == {"x": x, "y": y}


def test_structural_equality_and_hashing():
    a = Coordinate.from_algebraic("A1")
    b = Coordinate.from_index((0, 0))
    assert a == b and b == a
    assert len({a, b, Coordinate(x=0, y=1)}) == 2


def test_invalid_algebraic_rejected():
    for bad in ("Z0", "AA1", "1A", "", "A"):
        with pytest.raises(ValueError):
            Coordinate.from_algebraic(bad)


def test_algebraic_limited_to_26_files():
    with pytest.raises(ValueError, match="X out of bounds"):
        Coordinate(x=26, y=0).algebraic


def test_immutable_copies_are_explicit():
    c = Coordinate(x=3, y=4)
    with pytest.raises(ValidationError):
        c.x = 5
    d = c.model_copy()
    assert d == c and d is not c
    assert c.offset(1, -1) == Coordinate(x=4, y=3)
