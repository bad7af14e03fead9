"""Inspect values for error messages"""

from __future__ import annotations

from inspect import isclass
from typing import Any, Mapping, Sequence

__all__ = ["inspect"]

max_depth = 2
max_str_size = 240
max_list_size = 10


def inspect(value: Any) -> str:
    """Get a short string representation of a value for error messages.

    Records and lists are shown like Python literals, with long strings and lists
    shortened and nested containers cut off beyond a fixed depth, so that a large
    payload does not flood the message. Anything else is only shown by its kind
    and name, in order not to leak the inner representation of unknown objects.
    """
    return _inspect(value, 0)


def _inspect(value: Any, depth: int) -> str:
    if value is None or isinstance(value, (bool, int, float)):
        return repr(value)
    if isinstance(value, str):
        return _trunc_str(repr(value))
    if isinstance(value, Mapping):
        if not value:
            return "{}"
        if depth >= max_depth:
            return "{...}"
        entries = _trunc_list(list(value.items()))
        return "{" + ", ".join(_inspect_entry(entry, depth) for entry in entries) + "}"
    if isinstance(value, (list, tuple)):
        if not value:
            return repr(value)
        if depth >= max_depth:
            return "[...]" if isinstance(value, list) else "(...)"
        items = ", ".join(
            "..." if item is ... else _inspect(item, depth + 1)
            for item in _trunc_list(value)
        )
        if isinstance(value, list):
            return f"[{items}]"
        return f"({items},)" if len(value) == 1 else f"({items})"
    if isinstance(value, BaseException):
        return f"<exception {type(value).__name__}>"
    if isclass(value):
        return f"<class {value.__name__}>"
    if callable(value):
        name = getattr(value, "__name__", None)
        if not name or name == "<lambda>":
            return "<function>"
        return f"<function {name}>"
    return f"<{type(value).__name__} instance>"


def _inspect_entry(entry: Any, depth: int) -> str:
    if entry is ...:
        return "..."
    key, value = entry
    return f"{_inspect(key, depth + 1)}: {_inspect(value, depth + 1)}"


def _trunc_str(s: str) -> str:
    """Truncate strings to maximum length."""
    if len(s) > max_str_size:
        i = max(0, (max_str_size - 3) // 2)
        j = max(0, max_str_size - 3 - i)
        s = s[:i] + "..." + s[-j:]
    return s


def _trunc_list(s: Sequence) -> Sequence:
    """Truncate lists to maximum length, marking the gap with an Ellipsis."""
    if len(s) > max_list_size:
        i = max_list_size // 2
        j = i - 1
        s = [*s[:i], ..., *s[-j:]]
    return s
