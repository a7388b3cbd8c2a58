"""
Event identity: one hackathon per virtual month.

An event id is the ``YYYY-MM`` of a UTC calendar month. Its cutoff is the
last second of that month.
"""

import calendar
import re
from datetime import datetime, timezone
from typing import Optional

_EVENT_ID_RE = re.compile(r"(\d{4})-(\d{2})")


class InvalidEventIdError(ValueError):
    def __init__(self, event_id: str):
        self.event_id = event_id
        super().__init__(f"Invalid hackathon id '{event_id}', expected YYYY-MM")


def current_event_id(now: Optional[datetime] = None) -> str:
    """Hackathon id for the month containing ``now`` (UTC wall clock by default)"""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return f"{now.year:04d}-{now.month:02d}"


def parse_event_id(event_id: str) -> tuple:
    """Return (year, month) for a well-formed id"""
    match = _EVENT_ID_RE.fullmatch(event_id or "")
    if not match:
        raise InvalidEventIdError(event_id)
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise InvalidEventIdError(event_id)
    return year, month


def event_cutoff(event_id: str) -> datetime:
    year, month = parse_event_id(event_id)
    last_day = calendar.monthrange(year, month)[1]
    return datetime(year, month, last_day, 23, 59, 59, tzinfo=timezone.utc)
