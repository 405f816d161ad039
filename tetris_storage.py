"""High score persistence (JSON under ~/.tetris)"""
import json
import logging
import os
from typing import Optional

from tetris_config import CONFIG

log = logging.getLogger(__name__)


class HighScoreStore:
    """
    Keeps a single integer high score in a small JSON file.

    The file holds one object keyed by CONFIG["STORAGE_KEY"]. A missing or
    unreadable file reads as 0 so a broken save never blocks a new game.
    """

    def __init__(self, path: Optional[str] = None, key: Optional[str] = None):
        self.path = os.path.expanduser(path or CONFIG["HIGH_SCORE_PATH"])
        self.key = key or CONFIG["STORAGE_KEY"]

    def load(self) -> int:
        if not os.path.exists(self.path):
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return max(0, int(data.get(self.key, 0)))
        except (OSError, ValueError, TypeError, AttributeError) as e:
            log.warning("could not read high score from %s: %s", self.path, e)
            return 0

    def save(self, score: int) -> None:
        data = {}
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    data = {}
            except (OSError, ValueError):
                data = {}
        data[self.key] = int(score)
        try:
            os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f)
        except OSError as e:
            log.warning("could not save high score to %s: %s", self.path, e)
            return
        log.info("high score %d saved", score)
