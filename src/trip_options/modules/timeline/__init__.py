"""Timeline module."""

from trip_options.modules.timeline.dates import compare_entries, parse_item_date
from trip_options.modules.timeline.merger import flight_title, merge_timeline

__all__ = ["compare_entries", "flight_title", "merge_timeline", "parse_item_date"]
