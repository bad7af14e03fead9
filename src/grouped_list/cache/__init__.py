"""Grouped List Cache

The :mod:`grouped_list.cache` package holds the cache that loads a remote
collection once and serves grouped views of it.
"""

from .collection_cache import CollectionCache, LoadState

__all__ = ["CollectionCache", "LoadState"]
