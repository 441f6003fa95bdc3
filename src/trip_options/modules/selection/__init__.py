"""Selection module."""

from trip_options.modules.selection.ranking import rank_options, visible_options
from trip_options.modules.selection.resolution import default_option, effective_selection, selected_option
from trip_options.modules.selection.store import OptionStore, override_key

__all__ = [
    "OptionStore",
    "default_option",
    "effective_selection",
    "override_key",
    "rank_options",
    "selected_option",
    "visible_options",
]
