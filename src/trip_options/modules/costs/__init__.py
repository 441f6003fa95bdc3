"""Costs module."""

from trip_options.modules.costs.aggregator import aggregate_cost, option_amounts, summarize_travel

__all__ = ["aggregate_cost", "option_amounts", "summarize_travel"]
