"""Player service - business logic for the player registry."""

import logging
import re
from dataclasses import replace
from datetime import datetime
from operator import attrgetter
from typing import Optional, List

from player_api.exceptions import BadRequestError, PlayerNotFoundError
from player_api.models.domain import Player, PlayerFilter, PlayerOrder
from player_api.models.dto import PlayerDTO, PlayerCreateRequest, PlayerUpdateRequest
from player_api.repositories.base import Repository
from player_api.services.validation import (
    compute_level,
    compute_until_next_level,
    is_birthday_valid,
    is_experience_valid,
    is_name_valid,
    is_profession_valid,
    is_race_valid,
    is_title_valid,
)
from player_api.utils.timestamps import from_epoch_millis, to_epoch_millis

logger = logging.getLogger(__name__)

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
MAX_PLAYER_ID = 2 ** 63 - 1


class PlayerService:
    """
    Service for player registry business logic.

    Responsibilities:
    - Filter, sort and paginate player listings
    - Validate new players and partial updates
    - Keep level and until_next_level in step with experience
    - Convert between domain entities and DTOs

    Does NOT:
    - Handle HTTP requests (that's API layer)
    - Store records (that's repository layer)
    """

    def __init__(self, player_repo: Repository[Player]):
        self.player_repo = player_repo

    def get_players(self, player_filter: PlayerFilter) -> List[Player]:
        """Players satisfying every supplied filter, in storage order."""
        return [p for p in self.player_repo.list() if player_filter.matches(p)]

    def count_players(self, player_filter: PlayerFilter) -> int:
        """Number of players satisfying the filter (unsorted, unpaginated)."""
        return len(self.get_players(player_filter))

    @staticmethod
    def sorted_players(
        players: List[Player],
        order: Optional[PlayerOrder] = PlayerOrder.ID
    ) -> List[Player]:
        """Sort players in place, ascending and stable. None leaves the order as is."""
        if order is not None:
            players.sort(key=attrgetter(order.field_name))
        return players

    @staticmethod
    def get_page(
        players: List[Player],
        page_number: int = 0,
        page_size: int = 3
    ) -> List[Player]:
        """
        Slice one page out of an already filtered and sorted list.

        A page starting past the end of the list is empty.

        Raises:
            BadRequestError: If page_number is negative or page_size is not positive
        """
        if page_number < 0:
            raise BadRequestError(f"pageNumber must be >= 0, got {page_number}")
        if page_size < 1:
            raise BadRequestError(f"pageSize must be >= 1, got {page_size}")

        start = page_number * page_size
        return players[start:start + page_size]

    def create_new_player(self, request: PlayerCreateRequest) -> Player:
        """
        Create and store a new player.

        Business rules:
        - name 1-12 chars, title 1-30 chars
        - race and profession required
        - experience within 0..10,000,000
        - birthday strictly between 2000-01-01 and 3000-12-31
        - banned defaults to False

        Raises:
            BadRequestError: If any rule is violated
        """
        birthday = self._parse_birthday(request.birthday)

        invalid = [
            field for field, valid in (
                ("name", is_name_valid(request.name)),
                ("title", is_title_valid(request.title)),
                ("race", is_race_valid(request.race)),
                ("profession", is_profession_valid(request.profession)),
                ("experience", is_experience_valid(request.experience)),
                ("birthday", is_birthday_valid(birthday)),
            )
            if not valid
        ]
        if invalid:
            logger.warning("Rejected new player, invalid fields: %s", ", ".join(invalid))
            raise BadRequestError(f"Invalid fields: {', '.join(invalid)}")

        level = compute_level(request.experience)
        player = Player(
            id=self.player_repo.next_id(),
            name=request.name,
            title=request.title,
            race=request.race,
            profession=request.profession,
            birthday=birthday,
            experience=request.experience,
            level=level,
            until_next_level=compute_until_next_level(level, request.experience),
            banned=bool(request.banned),
        )

        player = self.save_player(player)
        logger.info("Created player %d (%s)", player.id, player.name)
        return player

    def update_player(self, old: Player, patch: PlayerUpdateRequest) -> Player:
        """
        Apply a partial update to a stored player.

        Business rules:
        - An empty patch returns the player untouched
        - Invalid name or title is ignored
        - race, profession and banned are taken whenever present
        - Invalid experience or birthday rejects the whole update

        Raises:
            BadRequestError: If experience or birthday is present but invalid
        """
        if not patch.model_dump(exclude_none=True):
            return old

        updated = replace(old)

        if is_name_valid(patch.name):
            updated.name = patch.name

        if is_title_valid(patch.title):
            updated.title = patch.title

        if patch.race is not None:
            updated.race = patch.race

        if patch.profession is not None:
            updated.profession = patch.profession

        if patch.experience is not None:
            if not is_experience_valid(patch.experience):
                logger.warning("Rejected update of player %d: experience %d", old.id, patch.experience)
                raise BadRequestError(f"Invalid experience: {patch.experience}")
            updated.experience = patch.experience

        if patch.birthday is not None:
            birthday = self._parse_birthday(patch.birthday)
            if not is_birthday_valid(birthday):
                logger.warning("Rejected update of player %d: birthday %d", old.id, patch.birthday)
                raise BadRequestError(f"Invalid birthday: {patch.birthday}")
            updated.birthday = birthday

        if patch.banned is not None:
            updated.banned = patch.banned

        updated.level = compute_level(updated.experience)
        updated.until_next_level = compute_until_next_level(updated.level, updated.experience)

        updated = self.save_player(updated)
        logger.info("Updated player %d", updated.id)
        return updated

    def get_player_by_id(self, raw_id: str) -> Player:
        """
        Look up a player by the id as it appears in the request path.

        Raises:
            BadRequestError: If the id is not a positive 64-bit integer
            PlayerNotFoundError: If no player has that id
        """
        if not _ID_PATTERN.fullmatch(raw_id):
            raise BadRequestError(f"Malformed player id: {raw_id!r}")

        player_id = int(raw_id)
        if player_id <= 0 or player_id > MAX_PLAYER_ID:
            raise BadRequestError(f"Player id out of range: {raw_id}")

        player = self.player_repo.get(player_id)
        if player is None:
            raise PlayerNotFoundError(player_id)

        return player

    def delete_player(self, player: Player) -> None:
        """Remove a player from storage."""
        self.player_repo.delete(player.id)
        logger.info("Deleted player %d", player.id)

    def save_player(self, player: Player) -> Player:
        """Store a player (create or replace)."""
        return self.player_repo.save(player)

    @staticmethod
    def _parse_birthday(millis: Optional[int]) -> Optional[datetime]:
        """Epoch milliseconds to datetime; None when absent or out of range."""
        try:
            return from_epoch_millis(millis)
        except OverflowError:
            return None

    @staticmethod
    def to_dto(player: Player) -> PlayerDTO:
        """Convert domain entity to DTO."""
        return PlayerDTO(
            id=player.id,
            name=player.name,
            title=player.title,
            race=player.race,
            profession=player.profession,
            birthday=to_epoch_millis(player.birthday),
            banned=player.banned,
            experience=player.experience,
            level=player.level,
            until_next_level=player.until_next_level,
        )
