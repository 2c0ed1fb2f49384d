"""Environment configuration for the player API.

Single source of truth for settings that vary between deployments. Values
are read from the environment each time load_settings() is called.

Variables:
    PLAYER_API_STORAGE    "memory" (default) or "json"
    PLAYER_API_DATA_FILE  JSON store path (default: <repo>/data/players.json)
    PLAYER_API_LOG_LEVEL  logging level name (default: INFO)
    PLAYER_API_CONFIG     override path of the JSON configuration file
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Repo root directory (parent of player_api/)
_REPO_ROOT = Path(__file__).resolve().parent.parent

STORAGE_MEMORY = "memory"
STORAGE_JSON = "json"
STORAGE_BACKENDS = (STORAGE_MEMORY, STORAGE_JSON)

DEFAULT_DATA_FILE = _REPO_ROOT / "data" / "players.json"


@dataclass(frozen=True)
class Settings:
    """Deployment settings resolved from the environment."""
    storage: str
    data_file: Path
    log_level: str
    config_path: Optional[Path]


def load_settings() -> Settings:
    """Read settings from environment variables.

    Raises:
        ValueError: If PLAYER_API_STORAGE names an unknown backend
    """
    storage = os.environ.get("PLAYER_API_STORAGE", STORAGE_MEMORY).strip().lower()
    if storage not in STORAGE_BACKENDS:
        raise ValueError(
            f"Unknown PLAYER_API_STORAGE '{storage}'. Valid: {', '.join(STORAGE_BACKENDS)}"
        )

    config_path = os.environ.get("PLAYER_API_CONFIG")

    return Settings(
        storage=storage,
        data_file=Path(os.environ.get("PLAYER_API_DATA_FILE", str(DEFAULT_DATA_FILE))),
        log_level=os.environ.get("PLAYER_API_LOG_LEVEL", "INFO").upper(),
        config_path=Path(config_path) if config_path else None,
    )
