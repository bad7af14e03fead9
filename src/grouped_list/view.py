"""Grouped view of a cached collection"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Mapping

from .cache import CollectionCache
from .error import ConfigurationError, LoadError
from .pyutils import inspect

if TYPE_CHECKING:
    from .grouping import GroupedResult, KeyFn, TitleMap

__all__ = ["GroupedView", "print_grouped"]

logger = logging.getLogger(__name__)


class GroupedView:
    """A view showing the collection of a cache grouped in a particular way.

    Several views can share one cache, each with its own key function and group
    titles. The cache is only fetched once for all of them.
    """

    cache: CollectionCache
    key_fn: KeyFn
    title_map: TitleMap | None
    result: GroupedResult | None

    def __init__(
        self,
        cache: CollectionCache,
        key_fn: KeyFn,
        title_map: TitleMap | None = None,
    ) -> None:
        if not isinstance(cache, CollectionCache):
            raise ConfigurationError(
                f"Expected a collection cache, got {inspect(cache)}."
            )
        self.cache = cache
        self.key_fn = _check_key_fn(key_fn)
        self.title_map = _check_title_map(title_map)
        self.result = None

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} of {self.cache.source!r}>"

    async def update(
        self,
        key_fn: KeyFn | None = None,
        title_map: TitleMap | None = None,
        reload: bool = False,
    ) -> GroupedResult:
        """Update the view.

        A new key function or new group titles replace the ones used so far, while
        omitted options keep their previous values. With ``reload`` set, the cache
        fetches the collection again.
        """
        if key_fn is not None:
            self.key_fn = _check_key_fn(key_fn)
        if title_map is not None:
            self.title_map = _check_title_map(title_map)
        try:
            result = await self.cache.get_grouped(
                self.key_fn, reload, title_map=self.title_map
            )
        except LoadError as error:
            logger.warning("Cannot update view: %s", error)
            raise
        self.result = result
        return result

    def __str__(self) -> str:
        return print_grouped(self.result or [])


def print_grouped(result: GroupedResult) -> str:
    """Print a grouped result as plain text.

    Each group is printed as its title followed by its items, indented by two
    spaces. Groups are separated by blank lines.
    """
    return "\n\n".join(
        "\n".join([title, *(f"  {item}" for item in items)]) for title, items in result
    )


def _check_key_fn(key_fn: KeyFn) -> KeyFn:
    if not callable(key_fn):
        raise ConfigurationError(
            f"Expected a callable key function, got {inspect(key_fn)}."
        )
    return key_fn


def _check_title_map(title_map: TitleMap | None) -> TitleMap | None:
    if title_map is not None and not isinstance(title_map, Mapping):
        raise ConfigurationError(
            f"Expected a mapping of group titles, got {inspect(title_map)}."
        )
    return title_map
