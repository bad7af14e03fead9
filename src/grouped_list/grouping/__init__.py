"""Grouped List Grouping

The :mod:`grouped_list.grouping` package partitions a collection of records into
deterministically ordered groups of rendered items. It knows nothing about
fetching or caching.
"""

from .build_grouped import (
    FormatFn,
    GroupedEntry,
    GroupedResult,
    KeyFn,
    TitleMap,
    build_grouped,
    resolve_title,
)

__all__ = [
    "FormatFn",
    "GroupedEntry",
    "GroupedResult",
    "KeyFn",
    "TitleMap",
    "build_grouped",
    "resolve_title",
]
