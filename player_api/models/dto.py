"""Data Transfer Objects - API contracts."""

from typing import Optional, List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from player_api.models.domain import Race, Profession, PlayerOrder


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PlayerDTO(CamelModel):
    """Player data for API responses. Birthday is epoch milliseconds."""
    id: int
    name: str
    title: str
    race: Race
    profession: Profession
    birthday: int
    banned: bool
    experience: int
    level: int
    until_next_level: int


class PlayerCreateRequest(CamelModel):
    """Request to create a new player.

    Every field is optional at the schema level so that missing or
    out-of-range values are reported by the service as a bad request.
    """
    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    birthday: Optional[int] = None
    banned: Optional[bool] = None
    experience: Optional[int] = None


class PlayerUpdateRequest(CamelModel):
    """Partial update of an existing player. Null fields are left untouched."""
    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    birthday: Optional[int] = None
    banned: Optional[bool] = None
    experience: Optional[int] = None


class ListingDefaults(CamelModel):
    """Default ordering and paging applied to player listings."""
    default_order: PlayerOrder
    default_page_number: int
    default_page_size: int


class ConfigResponse(CamelModel):
    """Registry configuration exposed to clients."""
    listing: ListingDefaults
    races: List[Race]
    professions: List[Profession]
    orders: List[PlayerOrder]
