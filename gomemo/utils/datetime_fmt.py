"""Datetime formatting utilities for memo timestamps."""

from __future__ import annotations

from datetime import datetime

# Sortable local timestamp: "YYYY-MM-DD-HH:MM:SS"
_MEMO_FORMAT = "%Y-%m-%d-%H:%M:%S"


def now_memo_timestamp() -> str:
    """Return the current local time formatted for a memo.

    Example: "2025-01-31-09:15:42"
    """

    return to_memo_timestamp(datetime.now())


def to_memo_timestamp(dt: datetime) -> str:
    """Format ``dt`` in local time. Aware datetimes are converted first."""

    if dt.tzinfo is not None:
        dt = dt.astimezone()
    return dt.strftime(_MEMO_FORMAT)
