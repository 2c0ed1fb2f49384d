"""Pytest configuration and fixtures."""

import sys
from datetime import datetime, timezone
from pathlib import Path

# Add repo root for imports when the package is not installed
repo_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(repo_root))

import pytest

from player_api.models.domain import Player, Race, Profession
from player_api.services.config_service import reset_config_service
from player_api.services.validation import compute_level, compute_until_next_level


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate every test from PLAYER_API_* variables and cached singletons."""
    for var in ("PLAYER_API_STORAGE", "PLAYER_API_DATA_FILE", "PLAYER_API_LOG_LEVEL", "PLAYER_API_CONFIG"):
        monkeypatch.delenv(var, raising=False)

    import player_api.api as api_module
    api_module.reset_dependencies()
    reset_config_service()

    yield

    api_module.reset_dependencies()
    reset_config_service()


@pytest.fixture
def make_player():
    """Factory for Player entities with consistent derived fields."""
    def _make_player(
        id=1,
        name="Ninelle",
        title="Queen of the Rain",
        race=Race.ELF,
        profession=Profession.SORCERER,
        birthday=datetime(2005, 6, 15, tzinfo=timezone.utc),
        experience=1000,
        banned=False,
    ):
        level = compute_level(experience)
        return Player(
            id=id,
            name=name,
            title=title,
            race=race,
            profession=profession,
            birthday=birthday,
            experience=experience,
            level=level,
            until_next_level=compute_until_next_level(level, experience),
            banned=banned,
        )

    return _make_player

