"""Partition transport segments into booking groups and individual segments."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Dict, List, NamedTuple, Sequence

from trip_options.core.models import BookingGroup, GroupedSegments, Segment, SegmentBlock, ViewMode


class _GroupKey(NamedTuple):
    synthesized: bool
    value: str


def _group_key(segment: Segment) -> _GroupKey:
    if segment.group_id:
        return _GroupKey(False, segment.group_id)
    return _GroupKey(True, f"individual_{segment.id}")


def _sequence(segment: Segment) -> int:
    return segment.display_sequence if segment.display_sequence is not None else 0


def _compare_travel_order(left: Segment, right: Segment) -> int:
    if left.display_sequence is not None and right.display_sequence is not None:
        return (left.display_sequence > right.display_sequence) - (left.display_sequence < right.display_sequence)
    return (left.date > right.date) - (left.date < right.date)


def sort_sequential(segments: Sequence[Segment]) -> List[Segment]:
    """Travel order: display sequence when both sides have one, else raw date."""
    return sorted(segments, key=cmp_to_key(_compare_travel_order))


def group_segments(segments: Sequence[Segment]) -> GroupedSegments:
    buckets: Dict[_GroupKey, List[Segment]] = {}
    for segment in sort_sequential(segments):
        buckets.setdefault(_group_key(segment), []).append(segment)

    booking_groups: List[BookingGroup] = []
    individuals: List[Segment] = []
    for key, members in buckets.items():
        # a group id alone is not enough, siblings are required
        if not key.synthesized and len(members) > 1:
            booking_groups.append(BookingGroup(group_id=key.value, segments=sorted(members, key=_sequence)))
        else:
            individuals.extend(members)

    booking_groups.sort(key=lambda group: group.group_id)
    individuals.sort(key=_sequence)
    return GroupedSegments(booking_groups=booking_groups, individual_segments=individuals)


def layout_segments(segments: Sequence[Segment], mode: ViewMode = ViewMode.SEQUENTIAL) -> List[SegmentBlock]:
    if mode is ViewMode.SEQUENTIAL:
        return list(sort_sequential(segments))
    grouped = group_segments(segments)
    blocks: List[SegmentBlock] = list(grouped.booking_groups)
    blocks.extend(grouped.individual_segments)
    return blocks
