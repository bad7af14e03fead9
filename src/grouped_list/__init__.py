"""Grouped List

A library that loads a remote collection once and serves grouped views of it.

The cache fetches its collection lazily, on the first request, and serves all later
requests from memory until a reload is requested. Requests arriving while the
collection is being fetched share that single fetch::

    cache = CollectionCache("https://example.com/persons.json", format_person)
    by_initial = await cache.get_grouped(lambda person: person["lastName"][:1])

The grouped result is a list of ``(title, items)`` pairs, sorted by title, with the
rendered items of every group sorted as well.
"""

# The version of this library
from .version import version as __version__, version_info as __version_info__

# Errors
from .error import (
    ConfigurationError,
    FetchError,
    GroupedListError,
    LoadError,
    MalformedDataError,
)

# Grouping of collections
from .grouping import (
    FormatFn,
    GroupedEntry,
    GroupedResult,
    KeyFn,
    TitleMap,
    build_grouped,
    resolve_title,
)

# Fetching of collections
from .fetch import Fetch, FetchSettings, HttpFetcher

# Caching of collections
from .cache import CollectionCache, LoadState

# Views of cached collections
from .view import GroupedView, print_grouped

__all__ = [
    "__version__",
    "__version_info__",
    "CollectionCache",
    "ConfigurationError",
    "Fetch",
    "FetchError",
    "FetchSettings",
    "FormatFn",
    "GroupedEntry",
    "GroupedListError",
    "GroupedResult",
    "GroupedView",
    "HttpFetcher",
    "KeyFn",
    "LoadError",
    "LoadState",
    "MalformedDataError",
    "TitleMap",
    "build_grouped",
    "print_grouped",
    "resolve_title",
]
