"""Custom exceptions raised across layers. Every domain error derives from GameError."""


class GameError(Exception):
    """Top-level exception for anything that goes wrong while playing a game."""


# --- RULE VIOLATIONS ---
class GameStateError(GameError):
    """The requested transition is not allowed in the current state of the game."""


class NotInSetupError(GameStateError):
    """Ships can only be placed / removed while the game is in setup."""


class NotEnoughRoomError(GameStateError):
    """The ship would run off the edge of the grid."""


class OverlapError(GameStateError):
    """The ship would overlap a ship that is already placed."""


class NoShipsLeftError(GameStateError):
    """Every ship of the requested class has already been placed."""


class ShipNotFoundError(GameStateError):
    """No ship of the requested class occupies the given location."""


class NotReadyError(GameStateError):
    """Cannot start the game before both fleets are fully placed."""


class NotInProgressError(GameStateError):
    """Shots can only be fired while the game is in progress."""


class NotYourTurnError(GameStateError):
    """Wait for your turn."""


class OutOfBoundsError(GameStateError):
    """Coordinates outside of the grid."""


class AlreadyFiredError(GameStateError):
    """A player cannot fire at the same location twice."""


# --- TEXT ENCODING ---
class DecodeError(GameError):
    """Stored / transported text could not be decoded."""


class InvalidLocationError(DecodeError):
    pass


class InvalidShipError(DecodeError):
    pass


class InvalidShotError(DecodeError):
    pass


class InvalidStateError(DecodeError):
    """Unknown result or turn name in a GameModel."""


# --- BOUNDARIES ---
class InvalidRequestError(GameError):
    """Raised by the request models when external input does not validate."""


class RepositoryError(GameError):
    """Persistence layer could not find / store the game."""
