"""
Timezone-safe datetime utilities.

Every timestamp that leaves the parser is timezone-aware and normalized to UTC.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

# Wall-clock offset the Notion export was written in. Fixed, not looked up.
SOURCE_UTC_OFFSET = timezone(timedelta(hours=1))

ISO_UTC_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def ensure_utc(dt: datetime) -> datetime:
    """
    Convert any datetime to UTC.

    If the datetime is naive (no timezone info), it's assumed to be UTC.
    If it has timezone info, it's converted to UTC.

    Args:
        dt: Input datetime (naive or timezone-aware)

    Returns:
        datetime: UTC datetime (timezone-aware)
    """
    if dt.tzinfo is None:
        # Naive datetime - assume UTC
        return dt.replace(tzinfo=timezone.utc)
    else:
        # Convert to UTC
        return dt.astimezone(timezone.utc)


def assume_source_offset(dt: datetime) -> datetime:
    """
    Attach the export's fixed UTC offset to a naive wall-clock datetime
    and return the same instant in UTC.

    Example:
        >>> assume_source_offset(datetime(1970, 1, 1, 1, 1))
        datetime.datetime(1970, 1, 1, 0, 1, tzinfo=datetime.timezone.utc)
    """
    if dt.tzinfo is not None:
        raise ValueError("Expected a naive wall-clock datetime")
    return dt.replace(tzinfo=SOURCE_UTC_OFFSET).astimezone(timezone.utc)


def serialize_datetime(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime to an ISO8601 UTC string with 'Z' suffix, second precision.

    Args:
        dt: Datetime to serialize (can be None)

    Returns:
        str: e.g. '1970-01-01T00:00:01Z', or None if input is None
    """
    if dt is None:
        return None

    return ensure_utc(dt).strftime(ISO_UTC_FORMAT)
