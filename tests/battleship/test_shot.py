"""Unit tests for /src/battleship/shot.py"""

import pytest

from src.battleship.location import Location
from src.battleship.shot import Shot
from src.core.exceptions import DecodeError, InvalidShotError


def test_shot_to_text() -> None:
    shot = Shot(location=Location(row=3, col=5), hit=False)
    assert shot.to_text() == "5,3|false"

    shot = Shot(location=Location(row=3, col=5), hit=True)
    assert shot.to_text() == "5,3|true"


def test_shot_from_text() -> None:
    shot = Shot.from_text("5,2|true")
    assert shot.location == Location(row=2, col=5)
    assert shot.hit


@pytest.mark.parametrize(
    "token, hit",
    [
        ("true", True),
        ("True", True),
        ("false", False),
        ("TRUE", False),
        ("1", False),
        ("yes", False),
        ("", False),
    ],
)
def test_lenient_hit_token(token: str, hit: bool) -> None:
    """Only 'true' and 'True' are hits. Anything else is a miss rather than an error."""
    assert Shot.from_text(f"0,0|{token}").hit is hit


@pytest.mark.parametrize("text", ["5,2", "5,2|true|extra"])
def test_shot_needs_two_fields(text: str) -> None:
    with pytest.raises(InvalidShotError, match="Expected to find 2 fields"):
        _ = Shot.from_text(text)


def test_shot_with_invalid_location() -> None:
    with pytest.raises(DecodeError):
        _ = Shot.from_text("x|true")
