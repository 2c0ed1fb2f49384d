"""
Configuration service for player listing settings.

Provides a single source of truth for the defaults applied when a listing
request omits ordering or paging parameters.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional

from player_api.env_config import load_settings
from player_api.models.domain import PlayerOrder


class ConfigService:
    """Service for loading and providing player API configuration."""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize the configuration service.

        Args:
            config_path: Path to configuration JSON file.
                        Defaults to player_api/config/players_config.json
        """
        if config_path is None:
            package_dir = Path(__file__).parent.parent
            config_path = package_dir / "config" / "players_config.json"

        self.config_path = config_path
        self._config = None

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from JSON file.

        Returns:
            Dictionary containing all configuration

        Raises:
            FileNotFoundError: If config file doesn't exist
            json.JSONDecodeError: If config file is invalid JSON
        """
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as f:
            return json.load(f)

    @property
    def config(self) -> Dict[str, Any]:
        """Get the full configuration (cached)."""
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def get_listing_config(self) -> Dict[str, Any]:
        """Get listing configuration.

        Returns:
            Dictionary with listing defaults (camelCase keys)
        """
        return self.config.get("listing", {})

    def get_default_order(self) -> PlayerOrder:
        return PlayerOrder(self.get_listing_config().get("defaultOrder", PlayerOrder.ID.value))

    def get_default_page_number(self) -> int:
        return int(self.get_listing_config().get("defaultPageNumber", 0))

    def get_default_page_size(self) -> int:
        return int(self.get_listing_config().get("defaultPageSize", 3))


# Global instance for easy import
_config_service = None


def get_config_service(config_path: Optional[Path] = None) -> ConfigService:
    """Get the global configuration service instance.

    Args:
        config_path: Used only when the instance is first created.
                    Defaults to PLAYER_API_CONFIG, then the bundled file

    Returns:
        ConfigService instance
    """
    global _config_service
    if _config_service is None:
        if config_path is None:
            config_path = load_settings().config_path
        _config_service = ConfigService(config_path)
    return _config_service


def reset_config_service() -> None:
    """Drop the global instance so the next call reloads configuration."""
    global _config_service
    _config_service = None
