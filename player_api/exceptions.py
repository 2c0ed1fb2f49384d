"""Errors raised by the player service.

The API layer maps BadRequestError to HTTP 400 and PlayerNotFoundError to
HTTP 404.
"""


class BadRequestError(ValueError):
    """Request data violates a player rule or cannot be parsed."""


class PlayerNotFoundError(LookupError):
    """No player is stored under the requested id."""

    def __init__(self, player_id: int):
        super().__init__(f"Player {player_id} not found")
        self.player_id = player_id
