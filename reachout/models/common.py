from datetime import datetime, timezone


def utcnow() -> datetime:
    """Timezone-aware 'now' used for column defaults."""
    return datetime.now(timezone.utc)
