"""REST API endpoints for the player registry."""

import logging
from typing import Optional, List

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from player_api.env_config import STORAGE_JSON, load_settings
from player_api.exceptions import BadRequestError, PlayerNotFoundError
from player_api.models.domain import (
    PageRequest,
    PlayerFilter,
    PlayerOrder,
    Profession,
    Race,
)
from player_api.models.dto import (
    ConfigResponse,
    ListingDefaults,
    PlayerCreateRequest,
    PlayerDTO,
    PlayerUpdateRequest,
)
from player_api.repositories.base import Repository
from player_api.repositories.json_player_repository import JsonPlayerRepository
from player_api.repositories.player_repository import PlayerRepository
from player_api.services.config_service import get_config_service
from player_api.services.player_service import PlayerService
from player_api.utils.timestamps import from_epoch_millis

logger = logging.getLogger(__name__)

router = APIRouter()

_player_repo = None
_player_service = None


def get_player_repo() -> Repository:
    """Get player repository instance for the configured storage backend."""
    global _player_repo
    if _player_repo is None:
        settings = load_settings()
        if settings.storage == STORAGE_JSON:
            _player_repo = JsonPlayerRepository(settings.data_file)
        else:
            _player_repo = PlayerRepository()
        logger.info("Using %s player storage", settings.storage)
    return _player_repo


def get_player_service(
    player_repo: Repository = Depends(get_player_repo)
) -> PlayerService:
    """Get player service instance."""
    global _player_service
    if _player_service is None:
        _player_service = PlayerService(player_repo)
    return _player_service


def reset_dependencies() -> None:
    """Forget the cached repository and service (used by tests and reloads)."""
    global _player_repo, _player_service
    _player_repo = None
    _player_service = None


def get_player_filter(
    name: Optional[str] = None,
    title: Optional[str] = None,
    race: Optional[Race] = None,
    profession: Optional[Profession] = None,
    after: Optional[int] = Query(None, description="Earliest birthday, epoch millis (inclusive)"),
    before: Optional[int] = Query(None, description="Latest birthday, epoch millis (exclusive)"),
    banned: Optional[bool] = None,
    min_experience: Optional[int] = Query(None, alias="minExperience"),
    max_experience: Optional[int] = Query(None, alias="maxExperience"),
    min_level: Optional[int] = Query(None, alias="minLevel"),
    max_level: Optional[int] = Query(None, alias="maxLevel"),
) -> PlayerFilter:
    """Parse listing filters from the query string."""
    try:
        after_date = from_epoch_millis(after)
        before_date = from_epoch_millis(before)
    except OverflowError:
        raise HTTPException(status_code=400, detail="Birthday filter out of range")

    return PlayerFilter(
        name=name,
        title=title,
        race=race,
        profession=profession,
        after=after_date,
        before=before_date,
        banned=banned,
        min_experience=min_experience,
        max_experience=max_experience,
        min_level=min_level,
        max_level=max_level,
    )


def get_page_request(
    order: Optional[PlayerOrder] = None,
    page_number: Optional[int] = Query(None, alias="pageNumber"),
    page_size: Optional[int] = Query(None, alias="pageSize"),
) -> PageRequest:
    """Parse ordering and paging from the query string, filling in configured defaults."""
    config_service = get_config_service()

    return PageRequest(
        order=order if order is not None else config_service.get_default_order(),
        page_number=page_number if page_number is not None else config_service.get_default_page_number(),
        page_size=page_size if page_size is not None else config_service.get_default_page_size(),
    )


@router.get("/players", response_model=List[PlayerDTO], response_model_by_alias=True)
async def list_players(
    player_filter: PlayerFilter = Depends(get_player_filter),
    page: PageRequest = Depends(get_page_request),
    player_service: PlayerService = Depends(get_player_service),
):
    """List players matching the filters, ordered and paginated."""
    players = player_service.get_players(player_filter)
    players = player_service.sorted_players(players, page.order)

    try:
        players = player_service.get_page(players, page.page_number, page.page_size)
    except BadRequestError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return [player_service.to_dto(p) for p in players]


@router.post("/players", response_model=PlayerDTO, response_model_by_alias=True)
async def create_player(
    request: PlayerCreateRequest,
    player_service: PlayerService = Depends(get_player_service),
):
    """Create a new player."""
    try:
        player = player_service.create_new_player(request)
    except BadRequestError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return player_service.to_dto(player)


@router.get("/players/count", response_model=int)
async def count_players(
    player_filter: PlayerFilter = Depends(get_player_filter),
    player_service: PlayerService = Depends(get_player_service),
):
    """Count players matching the filters."""
    return player_service.count_players(player_filter)


@router.get("/players/{player_id}", response_model=PlayerDTO, response_model_by_alias=True)
async def get_player(
    player_id: str,
    player_service: PlayerService = Depends(get_player_service),
):
    """Get a single player."""
    try:
        player = player_service.get_player_by_id(player_id)
    except BadRequestError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PlayerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return player_service.to_dto(player)


@router.post("/players/{player_id}", response_model=PlayerDTO, response_model_by_alias=True)
async def update_player(
    player_id: str,
    patch: PlayerUpdateRequest,
    player_service: PlayerService = Depends(get_player_service),
):
    """Partially update a player."""
    try:
        player = player_service.get_player_by_id(player_id)
        player = player_service.update_player(player, patch)
    except BadRequestError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PlayerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return player_service.to_dto(player)


@router.delete("/players/{player_id}")
async def delete_player(
    player_id: str,
    player_service: PlayerService = Depends(get_player_service),
):
    """Delete a player."""
    try:
        player = player_service.get_player_by_id(player_id)
    except BadRequestError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PlayerNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    player_service.delete_player(player)
    return Response(status_code=200)


@router.get("/config", response_model=ConfigResponse, response_model_by_alias=True)
async def get_config():
    """Get listing defaults and the accepted enum values."""
    config_service = get_config_service()
    return ConfigResponse(
        listing=ListingDefaults(
            default_order=config_service.get_default_order(),
            default_page_number=config_service.get_default_page_number(),
            default_page_size=config_service.get_default_page_size(),
        ),
        races=list(Race),
        professions=list(Profession),
        orders=list(PlayerOrder),
    )
