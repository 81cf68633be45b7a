"""Unit tests for /src/battleship/player.py"""

import pytest

from src.battleship.player import PlayerTurn, PlayerType


def test_other_player() -> None:
    assert PlayerType.PLAYER_1.other() == PlayerType.PLAYER_2
    assert PlayerType.PLAYER_2.other() == PlayerType.PLAYER_1


@pytest.mark.parametrize("player", list(PlayerType))
def test_other_twice_is_identity(player: PlayerType) -> None:
    assert player.other().other() == player


@pytest.mark.parametrize(
    "player, turn",
    [
        (PlayerType.PLAYER_1, PlayerTurn.PLAYER_1),
        (PlayerType.PLAYER_2, PlayerTurn.PLAYER_2),
    ],
)
def test_turn_from_player(player: PlayerType, turn: PlayerTurn) -> None:
    assert PlayerTurn.from_player(player) == turn


def test_display_names() -> None:
    assert str(PlayerType.PLAYER_1) == "Player 1"
    assert str(PlayerType.PLAYER_2) == "Player 2"
    assert str(PlayerTurn.EITHER) == "Either Player"
    assert str(PlayerTurn.NEITHER) == "Neither Player"
