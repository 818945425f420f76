
from typing import Dict, Tuple

# Fixed gameplay constants
COLS, ROWS = 10, 20

START_INTERVAL_MS = 800
MIN_INTERVAL_MS = 80
INTERVAL_STEP_MS = 40
MAX_LEVEL = 20
POINTS_PER_LEVEL = 500

# Colors per tetromino type
COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (103,232,249),
    "J": (96,165,250),
    "L": (251,146,60),
    "O": (250,204,21),
    "S": (52,211,153),
    "T": (167,139,250),
    "Z": (248,113,113),
}

# Runtime knobs, main.py overrides these from the command line
CONFIG = {
    "CELL_SIZE": 32,
    "FPS": 60,
    "KEY_REPEAT_DELAY_MS": 170,
    "KEY_REPEAT_INTERVAL_MS": 50,
    "SEED": None,
    "LOG_LEVEL": "WARNING",
}
