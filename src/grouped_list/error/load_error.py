"""Errors reported for a load cycle"""

from __future__ import annotations

from ..pyutils import inspect
from .grouped_list_error import GroupedListError

__all__ = ["FetchError", "LoadError", "MalformedDataError"]


class LoadError(GroupedListError):
    """A load cycle of a collection did not produce a record sequence.

    The error is reported to every request that waited for the load cycle.
    """

    source: str
    """The source of the collection that could not be loaded"""

    __slots__ = ("source",)

    def __init__(
        self, message: str, source: str, original_error: Exception | None = None
    ) -> None:
        super().__init__(message, original_error)
        self.source = source

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, LoadError)
            and super().__eq__(other)
            and self.source == other.source
        )

    __hash__ = GroupedListError.__hash__


class FetchError(LoadError):
    """Retrieving the collection from its source failed."""

    def __init__(self, source: str, original_error: Exception) -> None:
        cause = str(original_error) or inspect(original_error)
        super().__init__(
            f"Unable to load from {source}: {cause}", source, original_error
        )


class MalformedDataError(LoadError):
    """The source responded with a payload that is not a record sequence."""

    def __init__(self, source: str) -> None:
        super().__init__(f"Data loaded from {source} has unknown format", source)
