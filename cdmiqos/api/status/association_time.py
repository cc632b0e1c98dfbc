"""Capability association timestamps."""

from datetime import datetime, timezone


def association_time(now: datetime | None = None) -> str:
    """Format ``now`` (default: current time) as a UTC minute-precision timestamp."""
    if now is None:
        now = datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%MZ")
