from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

# odds-api `commence_time` with dateFormat=iso, always UTC.
PROVIDER_START_TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def parse_provider_start_time(value: Any) -> datetime | None:
    """
    Parse a provider start time into a tz-aware UTC datetime.

    Only the fixed provider format is accepted. Returns None for anything else so
    batch callers can decide how to fail.
    """
    if not isinstance(value, str):
        return None
    try:
        dt = datetime.strptime(value.strip(), PROVIDER_START_TIME_FORMAT)
    except ValueError:
        return None
    return dt.replace(tzinfo=UTC)
