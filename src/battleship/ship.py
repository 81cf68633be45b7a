"""Defines the ship classes and the ships making up a fleet"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Self

from src.battleship.location import Location, locations_from_text, locations_to_text
from src.core.exceptions import InvalidLocationError, InvalidShipError

FIELD_SEPARATOR = "|"
FLEET_SEPARATOR = "&"


class ShipType(Enum):
    """Values are the names used in the text encoding."""

    CARRIER = "Carrier"
    BATTLESHIP = "Battleship"
    CRUISER = "Cruiser"
    SUBMARINE = "Submarine"
    DESTROYER = "Destroyer"

    def __str__(self) -> str:
        return self.value

    @property
    def size(self) -> int:
        return SHIP_SIZES[self]

    @classmethod
    def from_name(cls, name: str) -> Self:
        try:
            return cls(name)
        except ValueError:
            raise InvalidShipError(f"Could not convert {name} to ShipType") from None


SHIP_SIZES: dict[ShipType, int] = {
    ShipType.CARRIER: 5,
    ShipType.BATTLESHIP: 4,
    ShipType.CRUISER: 3,
    ShipType.SUBMARINE: 2,
    ShipType.DESTROYER: 2,
}

# NOTE: the cruiser exists, but is not part of a standard fleet (reserved for custom setups)
DEFAULT_FLEET: tuple[ShipType, ...] = (
    ShipType.BATTLESHIP,
    ShipType.CARRIER,
    ShipType.CARRIER,
    ShipType.SUBMARINE,
    ShipType.SUBMARINE,
    ShipType.DESTROYER,
    ShipType.DESTROYER,
)


@dataclass
class Ship:
    type: ShipType
    locations: list[Location] = field(default_factory=list)
    hits: int = 0

    @property
    def sunk(self) -> bool:
        return self.hits == self.type.size

    @property
    def is_placed(self) -> bool:
        return len(self.locations) > 0

    def occupies(self, location: Location) -> bool:
        return location in self.locations

    @classmethod
    def from_text(cls, text: str) -> Self:
        """
        Decode '<class name>|<hits>|<locations>'
        ----

        ex) 'Destroyer|2|0,0;2,1' is a sunk destroyer on row 0 col 0 and row 1 col 2.
        An empty locations field ('Destroyer|0|') is a ship that has not been placed yet.
        NOTE the locations are checked to be distinct and on the grid, not to form a line (see the example above).
        """
        parts = text.split(FIELD_SEPARATOR)
        if len(parts) != 3:
            raise InvalidShipError(
                f"Expected serialized ship to contain 3 {FIELD_SEPARATOR} separated values, found {len(parts)}"
            )
        name, hits_str, locations_str = parts

        ship_type = ShipType.from_name(name)

        if not (hits_str.isascii() and hits_str.isdigit()):
            raise InvalidShipError(
                f"Could not parse hits, expected a non-negative integer, found {hits_str}"
            )
        hits = int(hits_str)

        if locations_str == "":
            if hits != 0:
                raise InvalidShipError(
                    f"A {ship_type} that has not been placed cannot have {hits} hits"
                )
            return cls(ship_type, [], hits)

        locations = locations_from_text(locations_str)
        if len(locations) != ship_type.size:
            raise InvalidShipError(
                f"Expected {ship_type.size} serialized locations, found {len(locations)}"
            )
        if len(set(locations)) != len(locations):
            raise InvalidShipError(
                f"A {ship_type} cannot occupy the same location twice: {locations_str}"
            )
        if not all(location.is_within_bounds() for location in locations):
            raise InvalidShipError(
                f"A {ship_type} cannot be placed off the grid: {locations_str}"
            )
        if hits > ship_type.size:
            raise InvalidShipError(
                f"A {ship_type} can take at most {ship_type.size} hits, found {hits}"
            )
        return cls(ship_type, locations, hits)

    def to_text(self) -> str:
        return FIELD_SEPARATOR.join(
            [self.type.value, str(self.hits), locations_to_text(self.locations)]
        )


def new_fleet(ship_types: tuple[ShipType, ...] = DEFAULT_FLEET) -> list[Ship]:
    return [Ship(ship_type) for ship_type in ship_types]


def ships_to_text(ships: list[Ship]) -> str:
    return FLEET_SEPARATOR.join(ship.to_text() for ship in ships)


def ships_from_text(text: str) -> list[Ship]:
    """Every '&' separated segment must decode, otherwise the whole fleet is rejected."""
    segments = text.split(FLEET_SEPARATOR)
    ships: list[Ship] = []
    for segment in segments:
        try:
            ships.append(Ship.from_text(segment))
        except (InvalidShipError, InvalidLocationError):
            continue

    if len(ships) != len(segments):
        raise InvalidShipError(
            f"Expected to deserialize {len(segments)} ships but only deserialized {len(ships)}"
        )
    return ships
