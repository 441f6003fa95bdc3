"""Grouping module."""

from trip_options.modules.grouping.grouper import group_segments, layout_segments, sort_sequential

__all__ = ["group_segments", "layout_segments", "sort_sequential"]
