"""
Shared field types for request and response models.

Datetimes are stored as naive UTC and rendered back to clients as UTC.
"""
from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive values, convert aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def as_naive_utc(value: datetime) -> datetime:
    return as_utc(value).replace(tzinfo=None)


# Incoming datetimes, normalized before they reach the database
StoredDateTime = Annotated[datetime, AfterValidator(as_naive_utc)]

# Outgoing datetimes, serialized with a trailing "Z"
UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]


class MessageResponse(BaseModel):
    """Confirmation body returned by deletes."""
    message: str


# SQLite INTEGER range; ids outside it cannot be bound as query parameters
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1
