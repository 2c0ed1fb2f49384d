"""Player repository - in-memory implementation."""

from typing import Optional, Dict, List

from player_api.models.domain import Player
from player_api.repositories.base import Repository


class PlayerRepository(Repository[Player]):
    """
    Repository for player records.

    Current implementation: In-memory (dict keyed by id, insertion ordered)
    Rationale: Default backend for development and tests
    """

    def __init__(self):
        self._players: Dict[int, Player] = {}

    def get(self, id: int) -> Optional[Player]:
        """Get player by id."""
        return self._players.get(id)

    def list(self) -> List[Player]:
        """List all players."""
        return list(self._players.values())

    def save(self, player: Player) -> Player:
        """Save player to memory."""
        self._players[player.id] = player
        return player

    def delete(self, id: int) -> bool:
        """Delete player from memory."""
        if id in self._players:
            del self._players[id]
            return True
        return False

    def exists(self, id: int) -> bool:
        return id in self._players

    def count(self) -> int:
        return len(self._players)
