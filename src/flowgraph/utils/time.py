from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Returns current UTC time.
    """
    return datetime.now(timezone.utc)


def seconds_since(moment: datetime, now: datetime | None = None) -> float:
    if now is None:
        now = utc_now()
    return (now - moment).total_seconds()
