"""Pipeline step wiring."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from trip_options.core.models import (
    CostTotals,
    GroupedSegments,
    Option,
    Recommendation,
    SegmentBlock,
    TimelineEntry,
    TravelSummary,
    ViewMode,
)
from trip_options.modules.costs.aggregator import aggregate_cost, summarize_travel
from trip_options.modules.grouping.grouper import group_segments, layout_segments
from trip_options.modules.selection.ranking import visible_options
from trip_options.modules.selection.resolution import effective_selection
from trip_options.modules.selection.store import OptionStore
from trip_options.modules.timeline.merger import merge_timeline


def run_rank(
    recommendation: Recommendation,
    store: OptionStore,
    show_all_options: bool = False,
) -> Tuple[Dict[str, List[Option]], Dict[str, Optional[str]]]:
    visible: Dict[str, List[Option]] = {}
    selections: Dict[str, Optional[str]] = {}
    for segment in list(recommendation.transport_segments) + list(recommendation.destinations):
        visible[segment.id] = visible_options(segment, store, show_all_options)
        selections[segment.id] = effective_selection(segment, store)
    return visible, selections


def run_group(recommendation: Recommendation, mode: ViewMode) -> Tuple[List[SegmentBlock], GroupedSegments]:
    segments = recommendation.transport_segments
    return layout_segments(segments, mode), group_segments(segments)


def run_timeline(recommendation: Recommendation) -> List[TimelineEntry]:
    return merge_timeline(recommendation.flights, recommendation.local_transportation)


def run_costs(recommendation: Recommendation, store: OptionStore) -> Tuple[TravelSummary, CostTotals]:
    return (
        summarize_travel(recommendation.transport_segments, store),
        aggregate_cost(recommendation.destinations, store),
    )
