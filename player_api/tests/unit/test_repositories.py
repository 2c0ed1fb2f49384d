"""Unit tests for repositories."""

import json

import pytest

from player_api.models.domain import Race
from player_api.repositories.json_player_repository import JsonPlayerRepository
from player_api.repositories.player_repository import PlayerRepository


class TestPlayerRepository:
    """Test PlayerRepository in-memory operations."""

    def test_save_and_get_player(self, make_player):
        repo = PlayerRepository()

        saved = repo.save(make_player(id=1))
        assert saved.id == 1

        retrieved = repo.get(1)
        assert retrieved is not None
        assert retrieved.name == "Ninelle"
        assert repo.exists(1)
        assert not repo.exists(2)

    def test_save_replaces_existing_player(self, make_player):
        repo = PlayerRepository()
        repo.save(make_player(id=1))

        repo.save(make_player(id=1, name="Renamed"))

        assert repo.get(1).name == "Renamed"
        assert repo.count() == 1

    def test_list_keeps_insertion_order(self, make_player):
        repo = PlayerRepository()
        for player_id in (3, 1, 2):
            repo.save(make_player(id=player_id))

        assert [p.id for p in repo.list()] == [3, 1, 2]
        assert repo.count() == 3

    def test_delete_player(self, make_player):
        repo = PlayerRepository()
        repo.save(make_player(id=1))

        assert repo.delete(1) is True
        assert repo.get(1) is None
        assert repo.delete(1) is False

    def test_next_id_skips_taken_ids(self, make_player):
        repo = PlayerRepository()
        repo.save(make_player(id=2))

        assert repo.next_id() == 3


class TestJsonPlayerRepository:
    """Test JsonPlayerRepository file persistence."""

    def test_missing_file_starts_empty(self, tmp_path):
        repo = JsonPlayerRepository(tmp_path / "store" / "players.json")
        assert repo.list() == []
        assert (tmp_path / "store").is_dir()

    def test_save_persists_across_instances(self, tmp_path, make_player):
        data_file = tmp_path / "players.json"
        original = make_player(id=1, race=Race.GIANT, banned=True)

        JsonPlayerRepository(data_file).save(original)

        reloaded = JsonPlayerRepository(data_file).get(1)
        assert reloaded == original

    def test_file_stores_epoch_millis(self, tmp_path, make_player):
        data_file = tmp_path / "players.json"
        JsonPlayerRepository(data_file).save(make_player(id=1))

        records = json.loads(data_file.read_text(encoding="utf-8"))
        assert records[0]["birthday"] == 1118793600000
        assert records[0]["race"] == "ELF"

    def test_delete_persists(self, tmp_path, make_player):
        data_file = tmp_path / "players.json"
        repo = JsonPlayerRepository(data_file)
        repo.save(make_player(id=1))
        repo.save(make_player(id=2))

        assert repo.delete(1) is True

        reloaded = JsonPlayerRepository(data_file)
        assert [p.id for p in reloaded.list()] == [2]

    def test_failed_write_leaves_memory_unchanged(self, tmp_path, make_player, monkeypatch):
        data_file = tmp_path / "players.json"
        repo = JsonPlayerRepository(data_file)
        repo.save(make_player(id=1))

        def failing_flush(players):
            raise OSError("disk full")

        monkeypatch.setattr(repo, "_flush", failing_flush)

        with pytest.raises(OSError):
            repo.save(make_player(id=2))
        with pytest.raises(OSError):
            repo.save(make_player(id=1, name="Renamed"))
        with pytest.raises(OSError):
            repo.delete(1)

        assert [p.id for p in repo.list()] == [1]
        assert repo.get(1).name == "Ninelle"
        assert [p.id for p in JsonPlayerRepository(data_file).list()] == [1]

    def test_corrupt_file_raises(self, tmp_path):
        data_file = tmp_path / "players.json"
        data_file.write_text("{not json", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError):
            JsonPlayerRepository(data_file)
