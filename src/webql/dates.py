"""Date parsing shared by comparison coercion and vendor responses."""

from datetime import datetime, timezone
from typing import Any, Optional


def parse_datetime(value: Any) -> datetime:
    """Parse an ISO 8601 / RFC 3339 timestamp into an aware UTC datetime.

    Naive timestamps are taken as UTC. A trailing ``Z`` is accepted.

    Args:
        value: Timestamp text

    Returns:
        Timezone-aware datetime normalized to UTC

    Raises:
        ValueError: If value is not a string or is not a timestamp

    Examples:
        >>> parse_datetime("2022-10-01T12:00:00Z")
        datetime.datetime(2022, 10, 1, 12, 0, tzinfo=datetime.timezone.utc)
    """
    if not isinstance(value, str):
        raise ValueError(f"could not convert date: {value!r} is not a string")

    text = value.strip()
    if not text:
        raise ValueError("could not convert date: empty string")
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError as e:
        raise ValueError(f"could not convert date: {value!r} is out of range") from e


def try_parse_datetime(value: Any) -> Optional[datetime]:
    """Like parse_datetime, but return None instead of raising."""
    try:
        return parse_datetime(value)
    except ValueError:
        return None


def to_rfc3339(value: datetime) -> str:
    """Render an aware datetime the way the GitHub API expects it."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()
