"""Field validation rules and progression formulas for players.

Every rule is a pure predicate over a single scalar value so that it can be
shared between creation (all rules must pass) and partial updates (each
field is judged on its own).
"""

import math
from datetime import datetime, timezone
from typing import Optional

from player_api.models.domain import Race, Profession

NAME_MAX_LENGTH = 12
TITLE_MAX_LENGTH = 30
EXPERIENCE_MIN = 0
EXPERIENCE_MAX = 10_000_000

# Exclusive bounds.
BIRTHDAY_LOWER = datetime(2000, 1, 1, tzinfo=timezone.utc)
BIRTHDAY_UPPER = datetime(3000, 12, 31, tzinfo=timezone.utc)


def is_name_valid(name: Optional[str]) -> bool:
    return name is not None and 0 < len(name) <= NAME_MAX_LENGTH


def is_title_valid(title: Optional[str]) -> bool:
    return title is not None and 0 < len(title) <= TITLE_MAX_LENGTH


def is_race_valid(race: Optional[Race]) -> bool:
    return race is not None


def is_profession_valid(profession: Optional[Profession]) -> bool:
    return profession is not None


def is_experience_valid(experience: Optional[int]) -> bool:
    return experience is not None and EXPERIENCE_MIN <= experience <= EXPERIENCE_MAX


def is_birthday_valid(birthday: Optional[datetime]) -> bool:
    return birthday is not None and BIRTHDAY_LOWER < birthday < BIRTHDAY_UPPER


def compute_level(experience: int) -> int:
    """Level reached with the given experience.

    level = floor((sqrt(2500 + 200 * experience) - 50) / 100)

    Integer square root keeps the result exact at level boundaries, where
    2500 + 200 * experience is a perfect square.
    """
    return (math.isqrt(2500 + 200 * experience) - 50) // 100


def compute_until_next_level(level: int, experience: int) -> int:
    """Experience still required to reach level + 1."""
    return 50 * (level + 1) * (level + 2) - experience
