"""Player API utilities package."""

from .timestamps import (
    from_epoch_millis,
    to_epoch_millis,
)

__all__ = [
    "from_epoch_millis",
    "to_epoch_millis",
]
