"""A single fired shot. Recorded in the shooting player's history, never changed afterwards."""

from dataclasses import dataclass
from typing import Self

from src.battleship.location import Location
from src.core.exceptions import InvalidShotError

FIELD_SEPARATOR = "|"
HIT_TOKENS = {"true", "True"}


@dataclass(frozen=True)
class Shot:
    location: Location
    hit: bool

    @classmethod
    def from_text(cls, text: str) -> Self:
        """'5,2|true' -> hit at row 2, col 5. Anything but 'true' / 'True' counts as a miss."""
        parts = text.split(FIELD_SEPARATOR)
        if len(parts) != 2:
            raise InvalidShotError(f"Expected to find 2 fields, found {len(parts)}.")
        location = Location.from_text(parts[0])
        return cls(location=location, hit=parts[1] in HIT_TOKENS)

    def to_text(self) -> str:
        hit = "true" if self.hit else "false"
        return f"{self.location.to_text()}{FIELD_SEPARATOR}{hit}"
