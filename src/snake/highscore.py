# highscore.py
from pathlib import Path


class HighScoreStore:
    """
    Keeps the high score as a base-10 integer string in a single file.
    Storage problems are never fatal: a failed read gives 0 and a failed
    write is reported and dropped.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> int:
        try:
            raw = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return 0
        except OSError as e:
            print(f"[SCORE] Could not read {self.path}: {e}")
            return 0

        try:
            value = int(raw, 10)
        except ValueError:
            print(f"[SCORE] Ignoring malformed high score {raw!r} in {self.path}")
            return 0
        return max(0, value)

    def save(self, value: int) -> bool:
        """Write `value`; returns False if storage was unavailable."""
        try:
            self.path.write_text(str(int(value)), encoding="utf-8")
        except OSError as e:
            print(f"[SCORE] Could not write {self.path}: {e}")
            return False
        return True
