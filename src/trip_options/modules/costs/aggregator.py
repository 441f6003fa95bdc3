"""Cash and points totals for the selected options of a set of segments."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from trip_options.core.models import CostTotals, Option, Segment, TravelSummary
from trip_options.modules.selection.resolution import selected_option
from trip_options.modules.selection.store import OptionStore


def option_amounts(segment: Segment, option: Option) -> Tuple[float, Optional[int], Optional[str]]:
    """Cash, points and points program an option adds for its segment.

    A stay priced per night is multiplied by the segment's nights; anything
    else uses the option's flat cost.
    """
    rate = option.nightly_rate
    if rate is not None and segment.nights is not None:
        points = rate.points_per_night * segment.nights if rate.points_per_night is not None else None
        return rate.price_per_night * segment.nights, points, rate.loyalty_program
    cost = option.cost
    return cost.cash, cost.points_amount, cost.points_program


def aggregate_cost(segments: Sequence[Segment], store: OptionStore) -> CostTotals:
    """Sum the effective option of every segment.

    Points from different programs are added into one number; the
    per-program split is reported alongside and does not change ``points``.
    """
    totals = CostTotals()
    for segment in segments:
        option = selected_option(segment, store)
        if option is None:
            continue
        cash, points, program = option_amounts(segment, option)
        totals.cash += cash
        if points is not None:
            totals.points += points
            totals.points_by_program[program] = totals.points_by_program.get(program, 0) + points
    return totals


def summarize_travel(segments: Sequence[Segment], store: OptionStore) -> TravelSummary:
    return TravelSummary(
        total_segments=len(segments),
        round_trip_segments=sum(1 for segment in segments if segment.has_round_trip_option),
        totals=aggregate_cost(segments, store),
    )
