"""Grouping function"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

__all__ = ["group_by"]

K = TypeVar("K")
T = TypeVar("T")


def group_by(items: Iterable[T], key_fn: Callable[[T], K]) -> dict[K, list[T]]:
    """Group an unsorted collection of items by a key derived via a function.

    Buckets keep the order in which their keys were first seen, and every bucket
    keeps the order of its items.
    """
    result: dict[K, list[T]] = {}
    for item in items:
        key = key_fn(item)
        try:
            result[key].append(item)
        except KeyError:
            result[key] = [item]
    return result
