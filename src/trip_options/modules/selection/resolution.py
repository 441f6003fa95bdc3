"""Effective selection: local override, then server choice, then default."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from trip_options.core.models import Option, Segment
from trip_options.modules.selection.store import OptionStore

LOG = logging.getLogger(__name__)


def effective_selection(segment: Segment, store: OptionStore) -> Optional[str]:
    local = store.for_kind(segment.kind).get(segment.id)
    if local is not None:
        return local
    return segment.selected_option_id


def default_option(options: Iterable[Option]) -> Optional[Option]:
    """Lowest priority wins; the recommendation flag plays no part here."""
    best: Optional[Option] = None
    for option in options:
        if best is None or option.priority < best.priority:
            best = option
    return best


def selected_option(segment: Segment, store: OptionStore) -> Optional[Option]:
    selection = effective_selection(segment, store)
    if selection is None:
        return default_option(segment.options)
    option = segment.option(selection)
    if option is None:
        LOG.warning("Segment %s selects unknown option %s", segment.id, selection)
    return option
