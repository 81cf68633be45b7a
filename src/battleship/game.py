"""
The game engine: the state of a single game of battleship and the transitions between states.

Every transition takes a GameState and returns a brand-new GameState, or raises a GameStateError.
The state handed in is never modified, so a failed transition leaves the caller with exactly what they had.
"""

import logging
from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

from src.battleship.location import GRID_DIMENSIONS, Location
from src.battleship.player import PlayerTurn, PlayerType
from src.battleship.ship import Ship, ShipType, new_fleet, ships_from_text, ships_to_text
from src.battleship.shot import Shot
from src.core.exceptions import (
    AlreadyFiredError,
    InvalidStateError,
    NoShipsLeftError,
    NotEnoughRoomError,
    NotInProgressError,
    NotInSetupError,
    NotReadyError,
    NotYourTurnError,
    OutOfBoundsError,
    OverlapError,
    ShipNotFoundError,
)
from src.core.models import GameModel

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Players, please place your ships to begin the game!"


class GameResult(Enum):
    IN_SETUP = auto()
    IN_PROGRESS = auto()
    PLAYER_1_WIN = auto()
    PLAYER_2_WIN = auto()

    @classmethod
    def player_win(cls, player: PlayerType) -> Self:
        return cls[f"{player.name}_WIN"]


class Direction(Enum):
    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"

    def __str__(self) -> str:
        return self.value


@dataclass
class GameState:
    p1_ships: list[Ship]
    p2_ships: list[Ship]
    p1_shots: list[Shot] = field(default_factory=list)
    p2_shots: list[Shot] = field(default_factory=list)
    result: GameResult = GameResult.IN_SETUP
    turn: PlayerTurn = PlayerTurn.EITHER
    messages: list[str] = field(default_factory=list)

    @classmethod
    def new(cls) -> Self:
        """Two fresh (unplaced) standard fleets, waiting for the players to place their ships."""
        return cls(
            p1_ships=new_fleet(),
            p2_ships=new_fleet(),
            result=GameResult.IN_SETUP,
            turn=PlayerTurn.EITHER,
            messages=[WELCOME_MESSAGE],
        )

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a GameState from the information the Service layer actually has"""

        # Validation
        result_name = model.result.upper()
        if result_name not in GameResult.__members__:
            raise InvalidStateError(
                f"Invalid result: {model.result!r}. \nPick one from {','.join([r.name.lower() for r in GameResult])}"
            )
        turn_name = model.turn.upper()
        if turn_name not in PlayerTurn.__members__:
            raise InvalidStateError(
                f"Invalid turn: {model.turn!r}. \nPick one from {','.join([t.name.lower() for t in PlayerTurn])}"
            )

        return cls(
            p1_ships=ships_from_text(model.p1_ships),
            p2_ships=ships_from_text(model.p2_ships),
            p1_shots=[Shot.from_text(shot) for shot in model.p1_shots],
            p2_shots=[Shot.from_text(shot) for shot in model.p2_shots],
            result=GameResult[result_name],
            turn=PlayerTurn[turn_name],
            messages=list(model.messages),
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            p1_ships=ships_to_text(self.p1_ships),
            p2_ships=ships_to_text(self.p2_ships),
            p1_shots=[shot.to_text() for shot in self.p1_shots],
            p2_shots=[shot.to_text() for shot in self.p2_shots],
            result=self.result.name.lower(),
            turn=self.turn.name.lower(),
            messages=list(self.messages),
        )

    def ships(self, player: PlayerType) -> list[Ship]:
        match player:
            case PlayerType.PLAYER_1:
                return self.p1_ships
            case PlayerType.PLAYER_2:
                return self.p2_ships

    def shots(self, player: PlayerType) -> list[Shot]:
        match player:
            case PlayerType.PLAYER_1:
                return self.p1_shots
            case PlayerType.PLAYER_2:
                return self.p2_shots

    @property
    def last_message(self) -> Optional[str]:
        return self.messages[-1] if self.messages else None


# --- VALIDATION HELPERS ---
def ready(game: GameState, player: PlayerType) -> bool:
    """Has the player placed all of their ships (and are we still in setup)?"""
    if game.result != GameResult.IN_SETUP:
        return False
    return all(ship.is_placed for ship in game.ships(player))


def expand(anchor: Location, ship_type: ShipType, direction: Direction) -> list[Location]:
    """
    The cells a ship of the given type would occupy.
    ----

    * DOWN / RIGHT run forward from the anchor: the anchor is the first cell.
    * UP / LEFT run backward from the anchor: the anchor is the last cell.

    Cells are always returned in increasing row / column order.
    """
    size = ship_type.size
    row, col = anchor.row, anchor.col
    match direction:
        case Direction.UP:
            cells = [Location(r, col) for r in range(row - size + 1, row + 1)]
        case Direction.DOWN:
            cells = [Location(r, col) for r in range(row, row + size)]
        case Direction.LEFT:
            cells = [Location(row, c) for c in range(col - size + 1, col + 1)]
        case Direction.RIGHT:
            cells = [Location(row, c) for c in range(col, col + size)]

    if not all(cell.is_within_bounds() for cell in cells):
        raise NotEnoughRoomError(
            f"Not enough room to place a {ship_type} at {anchor} {direction}"
        )
    return cells


def ship_at(game: GameState, location: Location) -> bool:
    """NOTE: checks the ships of BOTH players, they share a single occupancy check."""
    return any(
        ship.occupies(location) for ship in [*game.p1_ships, *game.p2_ships]
    )


# --- TRANSITIONS ---
def place(
    game: GameState,
    player: PlayerType,
    ship_type: ShipType,
    anchor: Location,
    direction: Direction,
) -> GameState:
    """
    Place the first unplaced ship of the given type in the player's fleet.
    ----

    1. Only during setup
    2. The ship must fit on the grid
    3. It must not overlap any placed ship (of either player)
    4. The player must have a ship of that type left to place
    """
    if game.result != GameResult.IN_SETUP:
        raise NotInSetupError("Cannot place ships after the game has started.")

    cells = expand(anchor, ship_type, direction)
    if any(ship_at(game, cell) for cell in cells):
        raise OverlapError(
            f"Cannot place a ship at {anchor} {direction}, as it would overlap another ship."
        )

    # only ever work on a copy
    next_state = deepcopy(game)
    for ship in next_state.ships(player):
        if ship.type == ship_type and not ship.is_placed:
            ship.locations = cells
            logger.debug("%s placed a %s at %s %s", player, ship_type, anchor, direction)
            return next_state

    raise NoShipsLeftError(f"There are no ships of class {ship_type} left to place")


def remove(
    game: GameState, player: PlayerType, ship_type: ShipType, location: Location
) -> GameState:
    """Take a placed ship (occupying the given location) back off the grid."""
    if game.result != GameResult.IN_SETUP:
        raise NotInSetupError("Cannot remove ships after the game has started.")

    next_state = deepcopy(game)
    for ship in next_state.ships(player):
        if ship.type == ship_type and ship.occupies(location):
            ship.locations = []
            logger.debug("%s removed the %s at %s", player, ship_type, location)
            return next_state

    raise ShipNotFoundError(f"Could not find a {ship_type} at {location}")


def start(game: GameState) -> GameState:
    """Leave the setup phase once both fleets are fully placed. Player 1 fires first."""
    if game.result != GameResult.IN_SETUP:
        raise NotInSetupError("Cannot start a game that has already started.")

    for player in PlayerType:
        if not ready(game, player):
            raise NotReadyError(
                f"Cannot start the game, {player} has not placed all of their ships."
            )

    next_state = deepcopy(game)
    next_state.result = GameResult.IN_PROGRESS
    next_state.turn = PlayerTurn.PLAYER_1
    next_state.messages.append(f"All ships placed. {PlayerType.PLAYER_1} fires first.")
    return next_state


def fire(game: GameState, player: PlayerType, location: Location) -> GameState:
    """
    Fire a shot at the opponent's grid
    ----

    Validation (first failure wins):
    1. game in progress
    2. player's turn
    3. location on the grid
    4. player has not fired there before

    Then: record the shot, log a single sunk / hit / miss message, and either hand the turn to the opponent or end the game.
    """
    if game.result != GameResult.IN_PROGRESS:
        raise NotInProgressError("Cannot fire when game is not in progress")

    if game.turn != PlayerTurn.from_player(player):
        raise NotYourTurnError(f"{player} cannot fire, it is not their turn.")

    if not location.is_within_bounds():
        last_cell = Location(GRID_DIMENSIONS[0] - 1, GRID_DIMENSIONS[1] - 1)
        raise OutOfBoundsError(
            f"Invalid fire coordinates {location}, must be between {Location(0, 0)} and {last_cell}."
        )

    if any(shot.location == location for shot in game.shots(player)):
        raise AlreadyFiredError(
            f"Cannot fire on {location}, you have already fired there!"
        )

    next_state = deepcopy(game)
    opponent = player.other()

    # placement never lets ships overlap, so at most one ship can be hit
    hit_ship = next(
        (ship for ship in next_state.ships(opponent) if ship.occupies(location)), None
    )
    if hit_ship is not None:
        hit_ship.hits += 1

    next_state.shots(player).append(Shot(location=location, hit=hit_ship is not None))

    if hit_ship is not None and hit_ship.sunk:
        next_state.messages.append(f"{player} sunk {opponent}'s {hit_ship.type}!")
    elif hit_ship is not None:
        next_state.messages.append(
            f"{player} fires at {location} and hits {opponent}'s ship!"
        )
    else:
        next_state.messages.append(f"{player} fires at {location} and misses!")

    # check for the end of the game
    if all(ship.sunk for ship in next_state.ships(opponent)):
        next_state.result = GameResult.player_win(player)
        next_state.messages.append(f"Game over. {player} wins!")
        next_state.turn = PlayerTurn.NEITHER
        logger.info(
            "Game over. %s wins after %d shots", player, len(next_state.shots(player))
        )
    else:
        next_state.turn = PlayerTurn.from_player(opponent)

    return next_state
