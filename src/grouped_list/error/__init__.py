"""Grouped List Errors

The :mod:`grouped_list.error` package contains the errors raised for invalid
arguments and reported for failed load cycles.
"""

from .grouped_list_error import GroupedListError

from .configuration_error import ConfigurationError

from .load_error import FetchError, LoadError, MalformedDataError

__all__ = [
    "ConfigurationError",
    "FetchError",
    "GroupedListError",
    "LoadError",
    "MalformedDataError",
]
