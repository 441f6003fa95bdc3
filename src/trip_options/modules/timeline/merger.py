"""Chronological merge of flights and local transportation."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from trip_options.core.models import FlightItem, LocalTransportItem, TimelineEntry, TimelineKind
from trip_options.modules.timeline.dates import compare_entries, parse_item_date


def flight_title(index: int, total: int) -> str:
    if total == 1:
        return "Flight"
    if total == 2:
        return "Outbound" if index == 0 else "Return"
    return f"Flight {index + 1}"


def _local_date(item: LocalTransportItem) -> Optional[str]:
    # older payloads fold the date into the time string ("2025-03-01 09:30")
    return item.date or item.time


def _undated_key(entry: TimelineEntry) -> Tuple[int, str]:
    return (0 if entry.kind is TimelineKind.FLIGHT else 1, entry.time)


def _interleave(dated: List[TimelineEntry], undated: List[TimelineEntry]) -> List[TimelineEntry]:
    """Merge two ordered runs, using the fallback rule only across them.

    Dated entries never get compared to each other here, so they stay in
    ascending date order whatever the undated entries look like.
    """
    merged: List[TimelineEntry] = []
    i = j = 0
    while i < len(dated) and j < len(undated):
        if compare_entries(undated[j], dated[i]) < 0:
            merged.append(undated[j])
            j += 1
        else:
            merged.append(dated[i])
            i += 1
    merged.extend(dated[i:])
    merged.extend(undated[j:])
    return merged


def merge_timeline(
    flights: Sequence[FlightItem],
    local_transportation: Sequence[LocalTransportItem],
) -> List[TimelineEntry]:
    entries: List[TimelineEntry] = []
    for index, flight in enumerate(flights):
        entries.append(
            TimelineEntry(
                kind=TimelineKind.FLIGHT,
                item=flight,
                time=flight.time,
                when=parse_item_date(flight.date),
                title=flight_title(index, len(flights)),
            )
        )
    for transport in local_transportation:
        entries.append(
            TimelineEntry(
                kind=TimelineKind.LOCAL_TRANSPORTATION,
                item=transport,
                time=transport.time,
                when=parse_item_date(_local_date(transport)),
            )
        )
    # stable sorts: equal dates keep flights before local transport, in input order
    dated = sorted((e for e in entries if e.when is not None), key=lambda e: e.when)
    undated = sorted((e for e in entries if e.when is None), key=_undated_key)
    return _interleave(dated, undated)
