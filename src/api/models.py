"""Requests and Response models"""

from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Direction, Player, ShipClass, Status, Turn


def _validate_location(value: str) -> str:
    """Locations travel as 'col,row': two unsigned integers separated by a comma."""
    parts = value.strip().split(",")
    if len(parts) != 2 or not all(part.isascii() and part.isdigit() for part in parts):
        raise InvalidRequestError(
            f"Cannot interpret {value!r} as a location. Expected 'col,row'."
        )
    return value.strip()


# --- REQUEST MODELS ---
class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


class StartGameRequest(BaseModel):
    game_id: UUID


class PlaceShipRequest(BaseModel):
    game_id: UUID
    player: Player
    ship_class: ShipClass
    location: str
    direction: Direction

    @field_validator("location")
    @classmethod
    def validate_location(cls, value: str) -> str:
        return _validate_location(value)


class RemoveShipRequest(BaseModel):
    game_id: UUID
    player: Player
    ship_class: ShipClass
    location: str

    @field_validator("location")
    @classmethod
    def validate_location(cls, value: str) -> str:
        return _validate_location(value)


class FireRequest(BaseModel):
    game_id: UUID
    player: Player
    location: str

    @field_validator("location")
    @classmethod
    def validate_location(cls, value: str) -> str:
        return _validate_location(value)


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    result: Status
    turn: Turn
    ships: dict[Player, str]
    shots: dict[Player, list[str]]
    ready: dict[Player, bool]
    messages: list[str]
