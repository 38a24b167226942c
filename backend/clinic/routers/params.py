"""
Path and query parameter parsing shared by the routers.
"""
from typing import Annotated, Optional

from fastapi import Path

from clinic.exceptions import ValidationError
from clinic.models.common import MIN_ID, MAX_ID

# Record identifier taken from the URL path
RecordId = Annotated[int, Path(ge=MIN_ID, le=MAX_ID)]


def optional_id(name: str, value: Optional[str]) -> Optional[int]:
    """Parse an ID filter; an absent or empty parameter means no filter."""
    if value is None or value == "":
        return None
    try:
        parsed = int(value)
    except ValueError:
        raise ValidationError(f"Validation failed: {name}: must be an integer", [name])
    if not MIN_ID <= parsed <= MAX_ID:
        raise ValidationError(f"Validation failed: {name}: out of range", [name])
    return parsed


def optional_text(value: Optional[str]) -> Optional[str]:
    return value if value else None
