"""Configuration read from environment variables.

Defaults are provided for every field. ``get_settings`` builds a fresh
instance on each call so the environment is read when a command runs,
not when this module is imported.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    data_dir: Path = field(
        default_factory=lambda: Path(os.getenv("SCM_DATA_DIR", str(_DEFAULT_DATA_DIR)))
    )
    state_file: str = field(
        default_factory=lambda: os.getenv("SCM_STATE_FILE", "world_state.json")
    )
    log_level: str = field(default_factory=lambda: os.getenv("SCM_LOG_LEVEL", "WARNING"))

    # Optional path for a log file in addition to console output.
    log_file: str = field(default_factory=lambda: os.getenv("SCM_LOG_FILE", ""))

    @property
    def state_path(self) -> Path:
        return self.data_dir / self.state_file


def get_settings() -> Settings:
    return Settings()
