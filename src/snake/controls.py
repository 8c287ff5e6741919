# controls.py
from typing import Optional

import pygame # type: ignore

from .config import Difficulty, Direction
from .machine import (
    GameState, Play, SelectDifficulty, Turn, TogglePause, PlayAgain,
)

ARROWS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}

DIFFICULTY_KEYS = {
    pygame.K_1: Difficulty.EASY,
    pygame.K_2: Difficulty.MEDIUM,
    pygame.K_3: Difficulty.HARD,
}

CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


def map_key(key: int, state: GameState):
    """Translate a key press into a machine event, or None if the key means nothing in `state`."""
    event: Optional[object] = None
    if state is GameState.PLAYING and key in ARROWS:
        event = Turn(ARROWS[key])
    elif key == pygame.K_SPACE and state in (GameState.PLAYING, GameState.PAUSED):
        event = TogglePause()
    elif state is GameState.HOME and key in CONFIRM_KEYS:
        event = Play()
    elif state is GameState.IDLE and key in DIFFICULTY_KEYS:
        event = SelectDifficulty(DIFFICULTY_KEYS[key])
    elif state is GameState.GAME_OVER and (key in CONFIRM_KEYS or key == pygame.K_r):
        event = PlayAgain()
    return event
