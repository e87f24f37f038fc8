from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo

from reachout.core.config import settings


def get_local_zone(name: str | None = None) -> tzinfo:
    name = name or settings.LOCAL_TIMEZONE
    if name.upper() in ("UTC", "Z"):
        return timezone.utc
    return ZoneInfo(name)


def to_utc(value: datetime) -> datetime:
    """Naive values coming back from the store are already UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """
    Render a timestamp in the canonical form used on the wire,
    e.g. ``2024-01-07T10:00:00.000Z``.
    """
    value = to_utc(value)
    return value.strftime("%Y-%m-%dT%H:%M:%S") + f".{value.microsecond // 1000:03d}Z"


def parse_local_datetime(value: str, zone: str | None = None) -> datetime:
    """
    Parse a ``datetime-local`` form value (``YYYY-MM-DDTHH:MM``, seconds
    optional) entered in the configured zone and return it as aware UTC.
    Values that already carry an offset keep it.
    """
    text = value.strip()
    if not text:
        raise ValueError("date is required")
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=get_local_zone(zone))
    return parsed.astimezone(timezone.utc)


def format_local_input(value: datetime, zone: str | None = None) -> str:
    """Inverse of parse_local_datetime, used to pre-fill edit forms."""
    return to_utc(value).astimezone(get_local_zone(zone)).strftime("%Y-%m-%dT%H:%M")
