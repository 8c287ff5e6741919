# game.py
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Tuple
import random

from .config import GRID_SIZE, INITIAL_SNAKE, INITIAL_FOOD, Direction, CFG
from .errors import BoardFullError

Point = Tuple[int, int]

# ---------- Helpers ----------
def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE

def is_opposite(a: Direction, b: Direction) -> bool:
    return a.opposite is b

def spawn_food(snake: List[Point], rng: random.Random | None = None) -> Point:
    """
    Pick a uniformly random free cell by rejection sampling.
    After CFG.food_attempts misses, scan row by row for the first free cell.
    """
    rng = rng or random
    occupied = set(snake)
    for _ in range(CFG.food_attempts):
        fx = rng.randrange(GRID_SIZE)
        fy = rng.randrange(GRID_SIZE)
        if (fx, fy) not in occupied:
            return (fx, fy)

    for fy in range(GRID_SIZE):
        for fx in range(GRID_SIZE):
            if (fx, fy) not in occupied:
                return (fx, fy)
    raise BoardFullError(f"no free cell left for food ({len(occupied)} segments)")

# ---------- State ----------
class Outcome(Enum):
    MOVED = "moved"
    ATE = "ate"
    HIT_WALL = "hit_wall"
    HIT_SELF = "hit_self"
    FILLED_BOARD = "filled_board"   # ate the last free cell, round over

    @property
    def is_fatal(self) -> bool:
        return self in (Outcome.HIT_WALL, Outcome.HIT_SELF)

@dataclass(frozen=True)
class RoundState:
    snake: List[Point] = field(default_factory=lambda: list(INITIAL_SNAKE))   # head at index 0
    direction: Direction = Direction.RIGHT
    food: Point = INITIAL_FOOD
    score: int = 0

    @property
    def head(self) -> Point:
        return self.snake[0]

def new_round_state() -> RoundState:
    return RoundState()

# ---------- Tick ----------
def step_round(state: RoundState, rng: random.Random | None = None) -> Tuple[RoundState, Outcome]:
    """
    Advance the snake by one cell.
    Returns the next round and what happened. On a collision the round
    comes back unchanged; `state` itself is never modified.
    """
    hx, hy = state.head
    dx, dy = state.direction.value
    nx, ny = hx + dx, hy + dy

    # Wall collision
    if not in_bounds(nx, ny):
        return state, Outcome.HIT_WALL

    new_head = (nx, ny)

    # Self collision, against the pre-move body including the tail
    if new_head in state.snake:
        return state, Outcome.HIT_SELF

    # Move / grow
    snake = [new_head] + state.snake
    if new_head == state.food:
        if len(snake) == GRID_SIZE * GRID_SIZE:
            return replace(state, snake=snake, score=state.score + 1), Outcome.FILLED_BOARD
        food = spawn_food(snake, rng)
        return replace(state, snake=snake, food=food, score=state.score + 1), Outcome.ATE

    snake.pop()
    return replace(state, snake=snake), Outcome.MOVED
