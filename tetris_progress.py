
"""Score, level and gravity progression"""
from dataclasses import dataclass
from tetris_config import (MAX_LEVEL, POINTS_PER_LEVEL, START_INTERVAL_MS,
                           MIN_INTERVAL_MS, INTERVAL_STEP_MS)

# Points per clear, multiplied by the current level
SCORE_TABLE = (0, 40, 100, 300, 1200)


def level_for(score: int) -> int:
    return min(MAX_LEVEL, 1 + score // POINTS_PER_LEVEL)


def drop_interval_for(level: int) -> int:
    return max(MIN_INTERVAL_MS, START_INTERVAL_MS - (level - 1) * INTERVAL_STEP_MS)


@dataclass
class Progress:
    score: int = 0
    level: int = 1
    lines: int = 0
    drop_interval: int = START_INTERVAL_MS
    game_over: bool = False
    paused: bool = False

    def award(self, rows: int) -> int:
        """Apply a clear of `rows` rows and return the points gained."""
        if rows <= 0:
            return 0
        points = SCORE_TABLE[rows] * self.level
        self.score += points
        self.lines += rows
        self.level = level_for(self.score)
        self.drop_interval = drop_interval_for(self.level)
        # a clear proves the board is playable again
        self.game_over = False
        return points

    def reset(self):
        self.score = 0
        self.level = 1
        self.lines = 0
        self.drop_interval = START_INTERVAL_MS
