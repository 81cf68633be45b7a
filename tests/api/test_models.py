from uuid import UUID, uuid4

import pytest

from src.api.models import FireRequest, PlaceShipRequest, RemoveShipRequest
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Direction, Player, ShipClass


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - locations --
@pytest.mark.parametrize("location", ["0,0", "9,9", "10,3", " 3,4 "])
def test_valid_locations(mock_id: UUID, location: str) -> None:
    """Shape is checked here, bounds are a rule of the game (checked by the engine)."""
    request = FireRequest(game_id=mock_id, player=Player.PLAYER_1, location=location)
    assert request.location == location.strip()


@pytest.mark.parametrize("location", ["", "3", "a,b", "1,2,3", "-1,2", "1;2", "(1, 2)"])
def test_invalid_locations(mock_id: UUID, location: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = FireRequest(game_id=mock_id, player=Player.PLAYER_2, location=location)

    with pytest.raises(InvalidRequestError):
        _ = PlaceShipRequest(
            game_id=mock_id,
            player=Player.PLAYER_1,
            ship_class=ShipClass.CARRIER,
            location=location,
            direction=Direction.DOWN,
        )

    with pytest.raises(InvalidRequestError):
        _ = RemoveShipRequest(
            game_id=mock_id,
            player=Player.PLAYER_1,
            ship_class=ShipClass.CARRIER,
            location=location,
        )


def test_enums_from_plain_strings(mock_id: UUID) -> None:
    """Requests arrive as JSON, so enum fields get plain strings."""
    request = PlaceShipRequest.model_validate(
        {
            "game_id": str(mock_id),
            "player": "player_2",
            "ship_class": "Submarine",
            "location": "0,0",
            "direction": "down",
        }
    )
    assert request.game_id == mock_id
    assert request.player == Player.PLAYER_2
    assert request.ship_class == ShipClass.SUBMARINE
    assert request.direction == Direction.DOWN
