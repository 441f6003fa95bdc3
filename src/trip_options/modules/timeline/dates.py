"""Best-effort date parsing and ordering for timeline items."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from trip_options.core.models import TimelineEntry, TimelineKind

LOG = logging.getLogger(__name__)

FULL_DATE_FORMATS = ("%Y-%m-%d", "%b %d, %Y", "%Y-%m-%d %H:%M")
# "Nov 28" carries no year; pin it so comparisons stay deterministic
PARTIAL_DATE_FORMAT = "%b %d %Y"
PARTIAL_DATE_YEAR = 2000


def parse_item_date(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    text = value.strip()
    for fmt in FULL_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    try:
        return datetime.strptime(f"{text} {PARTIAL_DATE_YEAR}", PARTIAL_DATE_FORMAT)
    except ValueError:
        LOG.debug("Unparseable timeline date %r", value)
        return None


def _cmp(left: object, right: object) -> int:
    return (left > right) - (left < right)  # type: ignore[operator]


def compare_entries(left: TimelineEntry, right: TimelineEntry) -> int:
    """Dates when both sides have one; otherwise flights first, then raw time text."""
    if left.when is not None and right.when is not None:
        return _cmp(left.when, right.when)
    if left.kind is not right.kind:
        return -1 if left.kind is TimelineKind.FLIGHT else 1
    return _cmp(left.time, right.time)
