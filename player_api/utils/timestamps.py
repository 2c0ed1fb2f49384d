"""Epoch-millisecond conversions for birthdays on the wire."""

from datetime import datetime, timedelta, timezone
from typing import Optional

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def from_epoch_millis(millis: Optional[int]) -> Optional[datetime]:
    """Convert milliseconds since the Unix epoch to an aware UTC datetime.

    Args:
        millis: Milliseconds since 1970-01-01T00:00:00Z, or None

    Returns:
        UTC datetime, or None if millis is None

    Raises:
        OverflowError: If the value lies outside the datetime range
    """
    if millis is None:
        return None
    return EPOCH + timedelta(milliseconds=millis)


def to_epoch_millis(moment: datetime) -> int:
    """Convert a datetime to whole milliseconds since the Unix epoch.

    Naive datetimes are treated as UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (moment - EPOCH) // timedelta(milliseconds=1)
