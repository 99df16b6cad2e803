from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def parse_rfc3339(value: str) -> datetime:
    """
    Parse a Drive timestamp (e.g. '2025-01-01T12:34:56.123Z') into UTC.

    Offsets other than Z are converted; values without any offset are rejected.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError("RFC3339 value must be a non-empty string")

    text = value.strip()
    if text[-1] in "zZ":
        # fromisoformat only learned 'Z' in 3.11
        text = text[:-1] + "+00:00"

    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        raise ValueError(f"RFC3339 value has no UTC offset: {value!r}")
    return parsed.astimezone(timezone.utc)


def to_epoch_ms(dt: Optional[datetime]) -> Optional[int]:
    """
    Convert a datetime to milliseconds since the Unix epoch.

    Naive datetimes are read as UTC, which is how google-auth stores
    credential expiry.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(dt.timestamp() * 1000)


def from_epoch_ms(value: Optional[int]) -> Optional[datetime]:
    if value is None:
        return None
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


def timestamp_name(prefix: str) -> str:
    """Synthetic name like 'Text_file_1735689600000' for unnamed uploads."""
    return f"{prefix}_{to_epoch_ms(now_utc())}"
