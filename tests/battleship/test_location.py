"""Unit tests for /src/battleship/location.py"""

import pytest

from src.battleship.location import (
    GRID_DIMENSIONS,
    Location,
    locations_from_text,
    locations_to_text,
)
from src.core.exceptions import DecodeError, InvalidLocationError


def test_to_text_is_column_first() -> None:
    location = Location(row=5, col=7)
    assert location.to_text() == "7,5"


def test_from_text_is_column_first() -> None:
    location = Location.from_text("9,11")
    assert location == Location(row=11, col=9)


def test_display_is_column_first() -> None:
    """The human readable form used in messages"""
    assert str(Location(row=1, col=2)) == "(2, 1)"


@pytest.mark.parametrize("text", ["", "1", "a,b", "1,b", "1,2,3", "-1,2"])
def test_from_text_needs_two_unsigned_integers(text: str) -> None:
    with pytest.raises(InvalidLocationError, match="Expected 2 , separated values"):
        _ = Location.from_text(text)


def test_location_errors_are_decode_errors() -> None:
    with pytest.raises(DecodeError):
        _ = Location.from_text("nope")


def test_locations_to_text() -> None:
    locations = [
        Location(row=0, col=0),
        Location(row=1, col=2),
        Location(row=3, col=4),
    ]
    assert locations_to_text(locations) == "0,0;2,1;4,3"


def test_locations_from_text() -> None:
    expected = [
        Location(row=6, col=5),
        Location(row=8, col=7),
        Location(row=10, col=9),
    ]
    assert locations_from_text("5,6;7,8;9,10") == expected


@pytest.mark.parametrize("text", ["0,0;bad", "0,0;", ";", "0,0;1;2,2"])
def test_locations_from_text_rejects_partial_sequences(text: str) -> None:
    """A sequence only decodes if every segment decodes."""
    with pytest.raises(InvalidLocationError, match="Expected to deserialize"):
        _ = locations_from_text(text)


def test_location_within_bounds() -> None:
    """happy case: every cell of the grid"""
    for row in range(GRID_DIMENSIONS[0]):
        for col in range(GRID_DIMENSIONS[1]):
            assert Location(row, col).is_within_bounds()


@pytest.mark.parametrize(
    "row, col", [(10, 0), (0, 10), (10, 10), (-1, 0), (0, -1), (42, 3)]
)
def test_location_out_of_bounds(row: int, col: int) -> None:
    """The type itself allows any coordinates, only is_within_bounds tells."""
    assert not Location(row, col).is_within_bounds()
