"""
Utility helper functions
"""
from datetime import date, datetime, timezone
from typing import Optional, Union
from uuid import UUID


def utcnow() -> datetime:
    """Naive UTC now, matching the TIMESTAMP columns"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def format_date(value: Optional[Union[date, datetime]], format_str: str = "%Y-%m-%d") -> Optional[str]:
    """Format date/datetime object"""
    if not value:
        return None
    return value.strftime(format_str)


def to_date(value: Union[date, datetime]) -> date:
    """Truncate a datetime to its calendar date; dates pass through"""
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_iso_date(value: Union[str, date, datetime, None]) -> Optional[date]:
    """
    Accept 'YYYY-MM-DD' or a full ISO timestamp ('2025-01-06T09:30:00Z')
    and return the calendar date.
    """
    if value is None or value == "":
        return None
    if isinstance(value, (date, datetime)):
        return to_date(value)
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return date.fromisoformat(text[:10])


def parse_uuid(value: Union[str, UUID, None]) -> Optional[UUID]:
    """UUID from a string id, or None when it isn't one"""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        return None
