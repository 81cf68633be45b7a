"""
Type definitions used across layers
"""

from enum import StrEnum

# --- NOTE Member names match the domain enums in src/battleship, so conversion is simply DomainEnum[value.name]


class Status(StrEnum):
    IN_SETUP = "in_setup"
    IN_PROGRESS = "in_progress"
    PLAYER_1_WIN = "player_1_win"
    PLAYER_2_WIN = "player_2_win"


class Player(StrEnum):
    PLAYER_1 = "player_1"
    PLAYER_2 = "player_2"


class Turn(StrEnum):
    PLAYER_1 = "player_1"
    PLAYER_2 = "player_2"
    EITHER = "either"
    NEITHER = "neither"


class ShipClass(StrEnum):
    CARRIER = "Carrier"
    BATTLESHIP = "Battleship"
    CRUISER = "Cruiser"
    SUBMARINE = "Submarine"
    DESTROYER = "Destroyer"


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
