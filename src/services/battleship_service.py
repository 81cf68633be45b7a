"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from typing import Callable
from uuid import UUID

from src.api.models import (
    DeleteGameRequest,
    FireRequest,
    GameResponse,
    GetGameRequest,
    PlaceShipRequest,
    RemoveShipRequest,
    StartGameRequest,
)
from src.battleship.game import Direction, GameState, fire, place, ready, remove, start
from src.battleship.location import Location
from src.battleship.player import PlayerType
from src.battleship.ship import ShipType
from src.core.exceptions import GameStateError, RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Player, Status, Turn
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)

Transition = Callable[[GameState], GameState]


class BattleshipService:
    """
    Orchestration of layers for a battleship game.

    The repository is the single authoritative holder of a game's state: every request loads the stored game,
    applies exactly one transition and stores the result. A rejected transition never reaches the repository.
    """

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self) -> GameResponse:
        """Set up a new game with two empty grids."""
        created_game_data = GameState.new().to_model()
        stored_game, game_id = self.repo.create_game(created_game_data)
        logger.info("Created game %s", game_id)
        return self._create_game_response(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def place_ship(self, request: PlaceShipRequest) -> GameResponse:
        player = PlayerType[request.player.name]
        ship_type = ShipType[request.ship_class.name]
        anchor = Location.from_text(request.location)
        direction = Direction[request.direction.name]
        return self._apply(
            request.game_id,
            lambda game: place(game, player, ship_type, anchor, direction),
        )

    def remove_ship(self, request: RemoveShipRequest) -> GameResponse:
        player = PlayerType[request.player.name]
        ship_type = ShipType[request.ship_class.name]
        location = Location.from_text(request.location)
        return self._apply(
            request.game_id, lambda game: remove(game, player, ship_type, location)
        )

    def start_game(self, request: StartGameRequest) -> GameResponse:
        """Both players placed their fleets: on to the shooting."""
        return self._apply(request.game_id, start)

    def fire(self, request: FireRequest) -> GameResponse:
        player = PlayerType[request.player.name]
        location = Location.from_text(request.location)
        return self._apply(request.game_id, lambda game: fire(game, player, location))

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record. Unknown ids raise like every other request."""
        _ = self._fetch_game(request.game_id)
        self.repo.delete_game(request.game_id)
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _apply(self, game_id: UUID, transition: Transition) -> GameResponse:
        """Load -> transition -> store. Errors propagate before anything is stored."""
        stored_model = self._fetch_game(game_id)
        game = GameState.from_model(stored_model)

        try:
            next_state = transition(game)
        except GameStateError as error:
            logger.debug("Rejected move in game %s: %s", game_id, error)
            raise

        updated_model = next_state.to_model()
        self.repo.update_game(game_id, updated_model)
        return self._create_game_response(game_id, updated_model)

    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        game = GameState.from_model(model)
        return GameResponse(
            game_id=game_id,
            result=Status(model.result),
            turn=Turn(model.turn),
            ships={Player.PLAYER_1: model.p1_ships, Player.PLAYER_2: model.p2_ships},
            shots={Player.PLAYER_1: model.p1_shots, Player.PLAYER_2: model.p2_shots},
            ready={
                Player[player.name]: ready(game, player) for player in PlayerType
            },
            messages=model.messages,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            logger.warning("Game %s not found", game_id)
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
