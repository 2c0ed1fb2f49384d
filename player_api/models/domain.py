"""Domain entities - internal representation (framework-agnostic)."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class Race(str, Enum):
    """Player race enumeration."""
    HUMAN = "HUMAN"
    DWARF = "DWARF"
    ELF = "ELF"
    GIANT = "GIANT"
    ORC = "ORC"
    TROLL = "TROLL"
    HOBBIT = "HOBBIT"


class Profession(str, Enum):
    """Player profession enumeration."""
    WARRIOR = "WARRIOR"
    ROGUE = "ROGUE"
    SORCERER = "SORCERER"
    CLERIC = "CLERIC"
    PALADIN = "PALADIN"
    NAZGUL = "NAZGUL"
    WARLOCK = "WARLOCK"
    DRUID = "DRUID"


class PlayerOrder(str, Enum):
    """Sort order for player listings."""
    ID = "ID"
    NAME = "NAME"
    EXPERIENCE = "EXPERIENCE"
    BIRTHDAY = "BIRTHDAY"

    @property
    def field_name(self) -> str:
        """Player attribute this order sorts by."""
        return self.value.lower()


@dataclass
class Player:
    """Player domain entity."""
    id: int
    name: str
    title: str
    race: Race
    profession: Profession
    birthday: datetime
    experience: int
    level: int
    until_next_level: int
    banned: bool = False


@dataclass(frozen=True)
class PlayerFilter:
    """Optional predicates narrowing a player listing.

    A None field imposes no constraint. The birthday range is half-open:
    after <= birthday < before.
    """
    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    after: Optional[datetime] = None
    before: Optional[datetime] = None
    banned: Optional[bool] = None
    min_experience: Optional[int] = None
    max_experience: Optional[int] = None
    min_level: Optional[int] = None
    max_level: Optional[int] = None

    def matches(self, player: Player) -> bool:
        """Return True if the player satisfies every supplied predicate."""
        if self.name is not None and self.name not in player.name:
            return False
        if self.title is not None and self.title not in player.title:
            return False
        if self.race is not None and player.race != self.race:
            return False
        if self.profession is not None and player.profession != self.profession:
            return False
        if self.after is not None and player.birthday < self.after:
            return False
        if self.before is not None and player.birthday >= self.before:
            return False
        if self.banned is not None and player.banned != self.banned:
            return False
        if self.min_experience is not None and player.experience < self.min_experience:
            return False
        if self.max_experience is not None and player.experience > self.max_experience:
            return False
        if self.min_level is not None and player.level < self.min_level:
            return False
        if self.max_level is not None and player.level > self.max_level:
            return False
        return True


@dataclass(frozen=True)
class PageRequest:
    """Ordering and paging for a listing."""
    order: Optional[PlayerOrder] = PlayerOrder.ID
    page_number: int = 0
    page_size: int = 3
