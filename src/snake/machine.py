# machine.py
"""
Screen/mode state machine.

`transition` is a pure function: it takes the current Machine and one event
and returns the next Machine plus a list of effects for the collaborators
(audio, high score store). Timers and rendering live outside; the driver in
main.py turns timer expiry and key presses into events.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import List, Optional, Tuple
import random

from .config import COUNTDOWN_LABELS, Difficulty, Direction
from .game import RoundState, Outcome, new_round_state, step_round, is_opposite


class GameState(Enum):
    HOME = auto()
    IDLE = auto()
    PLAYING = auto()
    GAME_OVER = auto()
    PAUSED = auto()
    COUNTDOWN = auto()


class Effect(Enum):
    EAT_SOUND = auto()
    GAME_OVER_SOUND = auto()
    SAVE_HIGH_SCORE = auto()


# ---------- Events ----------
@dataclass(frozen=True)
class FactLoaded:
    text: str

@dataclass(frozen=True)
class Play:
    pass

@dataclass(frozen=True)
class SelectDifficulty:
    difficulty: Difficulty

@dataclass(frozen=True)
class CountdownStep:
    pass

@dataclass(frozen=True)
class Tick:
    pass

@dataclass(frozen=True)
class Turn:
    direction: Direction

@dataclass(frozen=True)
class TogglePause:
    pass

@dataclass(frozen=True)
class PlayAgain:
    pass


# ---------- Machine ----------
@dataclass(frozen=True)
class Machine:
    state: GameState = GameState.HOME
    round: RoundState = field(default_factory=new_round_state)
    difficulty: Difficulty = Difficulty.MEDIUM
    countdown_index: int = 0
    high_score: int = 0
    fact: str = ""
    fact_ready: bool = False

    @property
    def countdown_label(self) -> Optional[str]:
        if self.state is not GameState.COUNTDOWN:
            return None
        return COUNTDOWN_LABELS[self.countdown_index]


def new_machine(high_score: int = 0) -> Machine:
    return Machine(high_score=max(0, high_score))


def transition(machine: Machine, event, rng: random.Random | None = None) -> Tuple[Machine, List[Effect]]:
    """Apply one event. Events that do not apply to the current state are ignored."""
    state = machine.state

    if state is GameState.HOME:
        if isinstance(event, FactLoaded):
            return replace(machine, fact=event.text, fact_ready=True), []
        if isinstance(event, Play) and machine.fact_ready:
            return replace(machine, state=GameState.IDLE), []

    elif state is GameState.IDLE:
        if isinstance(event, SelectDifficulty):
            return replace(
                machine,
                state=GameState.COUNTDOWN,
                round=new_round_state(),
                difficulty=event.difficulty,
                countdown_index=0,
            ), []

    elif state is GameState.COUNTDOWN:
        if isinstance(event, CountdownStep):
            nxt = machine.countdown_index + 1
            if nxt >= len(COUNTDOWN_LABELS):
                return replace(machine, state=GameState.PLAYING, countdown_index=0), []
            return replace(machine, countdown_index=nxt), []

    elif state is GameState.PLAYING:
        if isinstance(event, Tick):
            return _tick(machine, rng)
        if isinstance(event, Turn):
            # Checked against the live direction, so two quick turns can still reverse
            if is_opposite(event.direction, machine.round.direction):
                return machine, []
            return replace(machine, round=replace(machine.round, direction=event.direction)), []
        if isinstance(event, TogglePause):
            return replace(machine, state=GameState.PAUSED), []

    elif state is GameState.PAUSED:
        if isinstance(event, TogglePause):
            return replace(machine, state=GameState.PLAYING), []

    elif state is GameState.GAME_OVER:
        if isinstance(event, PlayAgain):
            return replace(machine, state=GameState.IDLE, round=new_round_state()), []

    return machine, []


def _tick(machine: Machine, rng: random.Random | None) -> Tuple[Machine, List[Effect]]:
    rnd, outcome = step_round(machine.round, rng)

    if outcome.is_fatal:
        return replace(machine, state=GameState.GAME_OVER), [Effect.GAME_OVER_SOUND]

    effects: List[Effect] = []
    high_score = machine.high_score
    if outcome in (Outcome.ATE, Outcome.FILLED_BOARD):
        effects.append(Effect.EAT_SOUND)
        if rnd.score > high_score:
            high_score = rnd.score
            effects.append(Effect.SAVE_HIGH_SCORE)

    # No cell left for food: the round ends with the board full
    if outcome is Outcome.FILLED_BOARD:
        effects.append(Effect.GAME_OVER_SOUND)
        return replace(machine, state=GameState.GAME_OVER, round=rnd, high_score=high_score), effects
    return replace(machine, round=rnd, high_score=high_score), effects
