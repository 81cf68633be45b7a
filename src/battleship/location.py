"""
A cell on the grid

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.exceptions import InvalidLocationError

# (rows, columns). The classic game is played on a 10x10 grid
GRID_DIMENSIONS = (10, 10)

LOCATION_SEPARATOR = ","
SEQUENCE_SEPARATOR = ";"


@dataclass(frozen=True)
class Location:
    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.col}, {self.row})"

    @classmethod
    def from_text(cls, text: str) -> Location:
        """Text encoding is 'col,row', so '7,5' gets converted to row 5, col 7"""
        # NOTE tokens that are not unsigned integers are dropped before counting
        parts = [
            int(token)
            for token in text.split(LOCATION_SEPARATOR)
            if token.isascii() and token.isdigit()
        ]
        if len(parts) != 2:
            raise InvalidLocationError(
                f"Expected 2 {LOCATION_SEPARATOR} separated values but found {len(parts)}"
            )
        col, row = parts
        return cls(row=row, col=col)

    def to_text(self) -> str:
        return f"{self.col}{LOCATION_SEPARATOR}{self.row}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < GRID_DIMENSIONS[0]) and (
            0 <= self.col < GRID_DIMENSIONS[1]
        )


def locations_to_text(locations: list[Location]) -> str:
    return SEQUENCE_SEPARATOR.join(location.to_text() for location in locations)


def locations_from_text(text: str) -> list[Location]:
    """Every ';' separated segment must decode, otherwise the whole sequence is rejected."""
    segments = text.split(SEQUENCE_SEPARATOR)
    locations: list[Location] = []
    for segment in segments:
        try:
            locations.append(Location.from_text(segment))
        except InvalidLocationError:
            continue

    if len(locations) != len(segments):
        raise InvalidLocationError(
            f"Expected to deserialize {len(segments)} locations but only deserialized {len(locations)}"
        )
    return locations
