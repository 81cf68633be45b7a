"""Who is playing, and whose turn it is."""

from enum import Enum
from typing import Self


class PlayerType(Enum):
    PLAYER_1 = "Player 1"
    PLAYER_2 = "Player 2"

    def __str__(self) -> str:
        return self.value

    def other(self) -> "PlayerType":
        match self:
            case PlayerType.PLAYER_1:
                return PlayerType.PLAYER_2
            case PlayerType.PLAYER_2:
                return PlayerType.PLAYER_1


class PlayerTurn(Enum):
    """
    PLAYER_1 / PLAYER_2 designate who fires next.
    EITHER: during setup both players may place ships in any order.
    NEITHER: the game is over.
    """

    PLAYER_1 = "Player 1"
    PLAYER_2 = "Player 2"
    EITHER = "Either Player"
    NEITHER = "Neither Player"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_player(cls, player: PlayerType) -> Self:
        return cls[player.name]
