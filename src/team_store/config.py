"""Environment-variable-based configuration for the team data store."""

from __future__ import annotations

import os
from pathlib import Path

DATA_DIR: Path = Path(os.environ.get("TEAM_DATA_DIR", "~/.team_load")).expanduser()
WEIGHT_INCREMENT_KG: float = float(os.environ.get("WEIGHT_INCREMENT_KG", "2.5"))
ACUTE_WINDOW_DAYS: int = int(os.environ.get("ACUTE_WINDOW_DAYS", "7"))
CHRONIC_WINDOW_DAYS: int = int(os.environ.get("CHRONIC_WINDOW_DAYS", "28"))
