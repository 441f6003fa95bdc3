"""Display ordering for the options of a segment."""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from trip_options.core.models import Option, Segment
from trip_options.modules.selection.resolution import effective_selection
from trip_options.modules.selection.store import OptionStore

LOG = logging.getLogger(__name__)


def _rank_key(option: Option) -> Tuple[int, int]:
    return (0 if option.recommended_selection is True else 1, option.priority)


def rank_options(options: Sequence[Option]) -> List[Option]:
    # sorted() is stable, equal keys keep their payload order
    return sorted(options, key=_rank_key)


def visible_options(segment: Segment, store: OptionStore, show_all_options: bool = False) -> List[Option]:
    ranked = rank_options(segment.options)
    selection = effective_selection(segment, store)
    if show_all_options or selection is None:
        return ranked
    matched = [option for option in ranked if option.id == selection]
    if not matched:
        LOG.warning("Stale selection %s on segment %s, showing all options", selection, segment.id)
        return ranked
    return matched
