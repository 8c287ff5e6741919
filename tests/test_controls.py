from __future__ import annotations

import pygame  # type: ignore
import pytest

from snake.config import Difficulty, Direction
from snake.controls import map_key
from snake.machine import GameState, Play, PlayAgain, SelectDifficulty, TogglePause, Turn


@pytest.mark.parametrize(
    "key, direction",
    [
        (pygame.K_UP, Direction.UP),
        (pygame.K_DOWN, Direction.DOWN),
        (pygame.K_LEFT, Direction.LEFT),
        (pygame.K_RIGHT, Direction.RIGHT),
    ],
)
def test_arrows_turn_while_playing(key, direction) -> None:
    assert map_key(key, GameState.PLAYING) == Turn(direction)


@pytest.mark.parametrize(
    "state",
    [GameState.HOME, GameState.IDLE, GameState.COUNTDOWN, GameState.PAUSED, GameState.GAME_OVER],
)
def test_arrows_ignored_outside_play(state) -> None:
    assert map_key(pygame.K_UP, state) is None


def test_space_only_pauses_or_resumes() -> None:
    assert map_key(pygame.K_SPACE, GameState.PLAYING) == TogglePause()
    assert map_key(pygame.K_SPACE, GameState.PAUSED) == TogglePause()
    assert map_key(pygame.K_SPACE, GameState.COUNTDOWN) is None
    assert map_key(pygame.K_SPACE, GameState.HOME) is None


def test_menu_keys() -> None:
    assert map_key(pygame.K_RETURN, GameState.HOME) == Play()
    assert map_key(pygame.K_1, GameState.IDLE) == SelectDifficulty(Difficulty.EASY)
    assert map_key(pygame.K_2, GameState.IDLE) == SelectDifficulty(Difficulty.MEDIUM)
    assert map_key(pygame.K_3, GameState.IDLE) == SelectDifficulty(Difficulty.HARD)
    assert map_key(pygame.K_r, GameState.GAME_OVER) == PlayAgain()
    assert map_key(pygame.K_RETURN, GameState.GAME_OVER) == PlayAgain()


def test_unknown_keys_map_to_nothing() -> None:
    assert map_key(pygame.K_q, GameState.PLAYING) is None
    assert map_key(pygame.K_1, GameState.PLAYING) is None
    assert map_key(pygame.K_r, GameState.IDLE) is None
