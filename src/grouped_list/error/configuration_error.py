"""Configuration Error"""

from __future__ import annotations

from .grouped_list_error import GroupedListError

__all__ = ["ConfigurationError"]


class ConfigurationError(GroupedListError, TypeError):
    """Invalid arguments or caller-supplied functions.

    Raised synchronously for bad constructor or call arguments, and raised from
    grouping when a key function or formatter fails for an item.
    """
