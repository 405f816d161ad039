"""Tunable gameplay numbers and JSON overrides"""
import json
from typing import Any, Dict

CONFIG: Dict[str, Any] = {
    # Board
    "BOARD_WIDTH": 10,
    "BOARD_HEIGHT": 20,
    "CELL_SIZE": 30,

    # Gravity (ms between drops)
    "INITIAL_SPEED": 1000,
    "SPEED_DECREASE_PER_LEVEL": 50,
    "MIN_SPEED": 100,
    "LOCK_DELAY_MS": 500,

    # Input feel
    "DAS_MS": 170,          # Delayed Auto Shift before repeats start
    "ARR_MS": 50,           # Auto Repeat Rate once DAS has elapsed
    "SOFT_DROP_MS": 50,     # Soft drop repeat while held

    "LINES_PER_LEVEL": 10,
    "NEXT_PIECES_COUNT": 3,

    "STORAGE_KEY": "tetrisHighScore",
    "HIGH_SCORE_PATH": "~/.tetris/highscore.json",
    "BAG_SEED": None,       # int for a reproducible piece sequence
}

POINTS = {
    "SOFT_DROP": 1,   # per cell
    "HARD_DROP": 2,   # per cell
    "SINGLE": 100,
    "DOUBLE": 300,
    "TRIPLE": 500,
    "TETRIS": 800,
}

# Lines cleared at once -> POINTS key
LINE_CLEAR_KEYS = {1: "SINGLE", 2: "DOUBLE", 3: "TRIPLE", 4: "TETRIS"}


def load_config(path: str) -> Dict[str, Any]:
    """Merge a JSON object of overrides into CONFIG and return CONFIG.

    Only keys that already exist may be overridden, so a typo in the file
    fails loudly instead of being ignored.
    """
    with open(path, "r", encoding="utf-8") as f:
        overrides = json.load(f)
    for key, value in overrides.items():
        if key not in CONFIG:
            raise KeyError(f"Unknown config key: {key}")
        CONFIG[key] = value
    return CONFIG
