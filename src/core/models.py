"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass

# Type aliases to make GameModel easier to read
EncodedFleet = str
EncodedShot = str


@dataclass
class GameModel:
    """Transport-safe representation of a battleship game used between API, Service, DB, and Game layers."""

    p1_ships: EncodedFleet
    p2_ships: EncodedFleet
    p1_shots: list[EncodedShot]
    p2_shots: list[EncodedShot]
    result: str
    turn: str
    messages: list[str]
