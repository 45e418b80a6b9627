"""Persistent storage of the best score."""

from __future__ import annotations

import json
from pathlib import Path

import platformdirs

_KEY = "highScore"


def default_path() -> Path:
    """Where the high score lives for the current user."""
    return Path(platformdirs.user_data_dir("sandsnake")) / "highscore.json"


class HighScoreStore:
    """Reads and writes the high score as a small JSON file."""

    def __init__(self, path=None):
        self.path = Path(path) if path is not None else default_path()

    def load(self) -> int:
        """The saved high score, or 0 when none can be read."""
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return 0
        if not isinstance(data, dict):
            return 0
        value = data.get(_KEY, 0)
        if isinstance(value, bool) or not isinstance(value, int):
            return 0
        return value

    def save(self, score: int) -> None:
        """Write score as the new high score."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({_KEY: int(score)}), encoding="utf-8")