from datetime import datetime, timezone

from sqlalchemy import DateTime

# Column type for audit timestamps; values are always timezone-aware UTC
TIMESTAMP = DateTime(timezone=True)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
