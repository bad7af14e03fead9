"""Lazily loaded, request coalescing cache of a remote collection"""

from __future__ import annotations

import logging
from asyncio import CancelledError, Future, Task, create_task, get_running_loop
from enum import Enum
from inspect import isawaitable
from typing import Any, Callable, Mapping, NamedTuple, Sequence

from ..error import ConfigurationError, FetchError, LoadError, MalformedDataError
from ..fetch import Fetch, HttpFetcher
from ..grouping import FormatFn, GroupedResult, KeyFn, TitleMap, build_grouped
from ..pyutils import inspect, is_record_sequence

__all__ = ["CollectionCache", "LoadState"]

logger = logging.getLogger(__name__)


class LoadState(Enum):
    """State of the cached collection"""

    UNLOADED = "unloaded"
    LOADING = "loading"
    READY = "ready"


class Waiter(NamedTuple):
    """A request waiting for the load cycle in flight."""

    future: Future
    settle: Callable[[Sequence[Any]], Any]


class CollectionCache:
    """Cache of a single remote collection serving grouped views.

    The collection is fetched on first access and kept until a reload is requested.
    Requests that arrive while a fetch is in flight join that fetch, so there is
    never more than one fetch of the source at a time, and every joined request
    gets the outcome of that same fetch.

    All state changes happen synchronously within a single turn of the event loop,
    so the cache must only be used from the loop it was first used with.
    """

    def __init__(
        self, source: str, format_fn: FormatFn, fetch: Fetch | None = None
    ) -> None:
        if not source or not isinstance(source, str):
            raise ConfigurationError(
                f"Expected a non-empty source string, got {inspect(source)}."
            )
        if not callable(format_fn):
            raise ConfigurationError(
                f"Expected a callable format function, got {inspect(format_fn)}."
            )
        if fetch is None:
            fetch = HttpFetcher()
        elif not callable(fetch):
            raise ConfigurationError(
                f"Expected a callable fetch function, got {inspect(fetch)}."
            )
        self._source = source
        self._format_fn = format_fn
        self._fetch = fetch
        self._items: tuple[Any, ...] = ()
        self._load_state = LoadState.UNLOADED
        self._error: LoadError | None = None
        self._waiters: list[Waiter] = []
        self._fetch_task: Task | None = None
        self.fetch_count = 0

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} {self._source!r}"
            f" {self._load_state.value}, {len(self._items)} items>"
        )

    @property
    def source(self) -> str:
        return self._source

    @property
    def format_fn(self) -> FormatFn:
        return self._format_fn

    @property
    def items(self) -> tuple[Any, ...]:
        """The records of the latest load attempt (empty if it failed)"""
        return self._items

    @property
    def load_state(self) -> LoadState:
        return self._load_state

    @property
    def error(self) -> LoadError | None:
        """The error of the latest load attempt, if it failed"""
        return self._error

    def get_grouped(
        self,
        key_fn: KeyFn,
        force_reload: bool = False,
        title_map: TitleMap | None = None,
    ) -> Future[GroupedResult]:
        """Get the cached collection grouped by the given key function.

        Returns a future that resolves with the grouped result, or fails with the
        LoadError of the load cycle it had to wait for. A collection that has been
        loaded successfully is grouped immediately, unless ``force_reload`` is set.
        Otherwise a fetch is started, or joined if one is already in flight.

        Invalid arguments raise a ConfigurationError right away.
        """
        if not callable(key_fn):
            raise ConfigurationError(
                f"Expected a callable key function, got {inspect(key_fn)}."
            )
        if title_map is not None and not isinstance(title_map, Mapping):
            raise ConfigurationError(
                f"Expected a mapping of group titles, got {inspect(title_map)}."
            )

        def settle(items: Sequence[Any]) -> GroupedResult:
            return build_grouped(items, key_fn, self._format_fn, title_map)

        return self._request(settle, force_reload)

    def reload(self) -> Future[None]:
        """Load the collection again, or join the load cycle in flight.

        Returns a future that resolves when the load cycle has completed
        successfully, or fails with its LoadError.
        """
        return self._request(_ignore_items, True)

    def _request(
        self, settle: Callable[[Sequence[Any]], Any], force_reload: bool
    ) -> Future:
        future = get_running_loop().create_future()
        state = self._load_state
        if state is LoadState.READY and not force_reload and self._error is None:
            try:
                future.set_result(settle(self._items))
            except Exception as error:
                future.set_exception(error)
            return future
        if state is not LoadState.LOADING:
            self._start_fetch()
        self._waiters.append(Waiter(future, settle))
        return future

    def _start_fetch(self) -> None:
        self._load_state = LoadState.LOADING
        self.fetch_count += 1
        logger.debug("Fetching %s (fetch #%d).", self._source, self.fetch_count)
        self._fetch_task = create_task(self._load())

    async def _load(self) -> None:
        try:
            payload = self._fetch(self._source)
            if isawaitable(payload):
                payload = await payload
        except CancelledError:
            self._abandon()
            raise
        except Exception as error:
            self._fail(FetchError(self._source, error))
        else:
            if is_record_sequence(payload):
                self._succeed(tuple(payload))
            else:
                self._fail(MalformedDataError(self._source))
        finally:
            self._fetch_task = None

    def _succeed(self, items: tuple[Any, ...]) -> None:
        logger.debug("Loaded %d items from %s.", len(items), self._source)
        self._items = items
        self._error = None
        self._load_state = LoadState.READY
        for waiter in self._drain():
            try:
                result = waiter.settle(items)
            except Exception as error:
                waiter.future.set_exception(error)
            else:
                waiter.future.set_result(result)

    def _fail(self, error: LoadError) -> None:
        logger.debug("Loading %s failed: %s", self._source, error)
        self._items = ()
        self._error = error
        self._load_state = LoadState.READY
        for waiter in self._drain():
            waiter.future.set_exception(error)

    def _abandon(self) -> None:
        logger.debug("Fetching %s has been cancelled.", self._source)
        self._items = ()
        self._error = None
        self._load_state = LoadState.UNLOADED
        for waiter in self._drain():
            waiter.future.cancel()

    def _drain(self) -> list[Waiter]:
        """Take all waiters that can still receive an outcome, in FIFO order."""
        waiters, self._waiters = self._waiters, []
        return [waiter for waiter in waiters if not waiter.future.done()]


def _ignore_items(_items: Sequence[Any]) -> None:
    return None
