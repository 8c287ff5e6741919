from dataclasses import dataclass
from enum import Enum

# ----- Window & grid -----
GRID_SIZE = 20
CELL_SIZE = 30
HUD_HEIGHT = 40
WIDTH, HEIGHT = GRID_SIZE * CELL_SIZE, GRID_SIZE * CELL_SIZE + HUD_HEIGHT

# ----- Colors -----
BG    = (20, 20, 24)
BOARD = (31, 41, 55)
GREEN = (22, 163, 74)
HEAD  = (74, 222, 128)
RED   = (239, 68, 68)
GOLD  = (250, 204, 21)
TEXT  = (220, 220, 230)

# ----- Round setup -----
INITIAL_SNAKE = [(10, 10), (9, 10), (8, 10)]
INITIAL_FOOD = (15, 15)
COUNTDOWN_LABELS = ("3", "2", "1", "Go!")


# ----- Directions (dx, dy), y grows downward -----
class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


# ----- Difficulty -> tick interval in ms -----
class Difficulty(Enum):
    EASY = 200
    MEDIUM = 150
    HARD = 100

    @property
    def interval_ms(self) -> int:
        return self.value


# ----- Tunables -----
@dataclass
class Config:
    seed: int | None = None
    countdown_ms: int = 1000
    food_attempts: int = 1000          # random draws before falling back to a scan
    highscore_path: str = "highscore.txt"
    fact_url: str | None = None        # no URL -> always use the fallback fact
    fact_timeout_s: float = 5.0
    fact_prompt: str = "Tell me a short, fun fact about snakes in one sentence."
    sound: bool = True

CFG = Config()
