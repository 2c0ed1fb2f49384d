"""Player repository - JSON file implementation."""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from player_api.models.domain import Player, Race, Profession
from player_api.repositories.player_repository import PlayerRepository
from player_api.utils.timestamps import from_epoch_millis, to_epoch_millis

logger = logging.getLogger(__name__)


class JsonPlayerRepository(PlayerRepository):
    """
    Repository for player records persisted to a single JSON file.

    Records are held in memory and the whole file is rewritten after every
    save or delete. A missing file starts an empty store; an unreadable one
    raises at construction.
    """

    def __init__(self, data_file: Path):
        super().__init__()
        self.data_file = data_file
        self.data_file.parent.mkdir(parents=True, exist_ok=True)
        self._load()

    def save(self, player: Player) -> Player:
        """Save player; memory changes only once the file has been written."""
        players = dict(self._players)
        players[player.id] = player
        self._flush(players)
        self._players = players
        return player

    def delete(self, id: int) -> bool:
        """Delete player; memory changes only once the file has been written."""
        if id not in self._players:
            return False
        players = dict(self._players)
        del players[id]
        self._flush(players)
        self._players = players
        return True

    def _load(self) -> None:
        """Load players from the data file."""
        if not self.data_file.exists():
            logger.debug("No player store at %s, starting empty", self.data_file)
            return

        with open(self.data_file, encoding='utf-8') as f:
            records = json.load(f)

        for record in records:
            player = self._from_record(record)
            self._players[player.id] = player

        logger.debug("Loaded %d players from %s", len(self._players), self.data_file)

    def _flush(self, players: Dict[int, Player]) -> None:
        """Write the given players to the data file, replacing its contents."""
        records = [self._to_record(p) for p in players.values()]

        tmp_file = self.data_file.with_suffix(self.data_file.suffix + ".tmp")
        with open(tmp_file, "w", encoding='utf-8') as f:
            json.dump(records, f, indent=2)
        tmp_file.replace(self.data_file)

        logger.debug("Wrote %d players to %s", len(records), self.data_file)

    @staticmethod
    def _to_record(player: Player) -> Dict[str, Any]:
        return {
            "id": player.id,
            "name": player.name,
            "title": player.title,
            "race": player.race.value,
            "profession": player.profession.value,
            "birthday": to_epoch_millis(player.birthday),
            "experience": player.experience,
            "level": player.level,
            "until_next_level": player.until_next_level,
            "banned": player.banned,
        }

    @staticmethod
    def _from_record(record: Dict[str, Any]) -> Player:
        return Player(
            id=int(record["id"]),
            name=record["name"],
            title=record["title"],
            race=Race(record["race"]),
            profession=Profession(record["profession"]),
            birthday=from_epoch_millis(record["birthday"]),
            experience=int(record["experience"]),
            level=int(record["level"]),
            until_next_level=int(record["until_next_level"]),
            banned=bool(record.get("banned", False)),
        )
