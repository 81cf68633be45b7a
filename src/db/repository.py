"""
Protocol repository: the single authoritative holder of every stored game.

The service loads a game, applies one transition and stores the result, so implementations only ever see complete, valid states.
"""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """Persistence of encoded battleship games"""

    def get_game(self, game_id: UUID) -> GameModel | None:
        """The stored game, or None for an unknown id."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store a freshly set up game. Returns what got stored + the new game ID."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Replace the stored state after a successful transition. None for an unknown id."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record, returning what was stored (if anything)."""
        ...
