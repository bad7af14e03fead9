"""Build a grouped result from a collection of records"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Mapping, NamedTuple

try:
    from typing import TypeAlias
except ImportError:  # Python < 3.10
    from typing_extensions import TypeAlias

from ..error import ConfigurationError
from ..pyutils import group_by, inspect

__all__ = [
    "FormatFn",
    "GroupedEntry",
    "GroupedResult",
    "KeyFn",
    "TitleMap",
    "build_grouped",
    "resolve_title",
]


KeyFn: TypeAlias = Callable[[Any], Any]
FormatFn: TypeAlias = Callable[[Any], str]
TitleMap: TypeAlias = Mapping[str, str]


class GroupedEntry(NamedTuple):
    """A single group of a grouped result."""

    title: str
    items: list[str]


GroupedResult: TypeAlias = List[GroupedEntry]


def resolve_title(label: Any, title_map: TitleMap | None = None) -> str:
    """Get the display title of a group label.

    Labels are looked up as strings. Labels that are missing from the title map,
    or mapped to an empty title, are displayed as they are. Titles must be strings.
    """
    if not isinstance(label, str):
        label = str(label)
    if title_map:
        title = title_map.get(label)
        if title:
            if not isinstance(title, str):
                raise ConfigurationError(
                    f"Expected a string title for group {inspect(label)},"
                    f" got {inspect(title)}."
                )
            return title
    return label


def build_grouped(
    items: Iterable[Any],
    key_fn: KeyFn,
    format_fn: FormatFn,
    title_map: TitleMap | None = None,
) -> GroupedResult:
    """Partition records into ordered groups of rendered items.

    Records are grouped by the label that ``key_fn`` returns for them and rendered
    through ``format_fn``. Group labels are strings: other values returned by
    ``key_fn`` are converted with ``str()``, so that ``8`` and ``"8"`` denote the
    same group and find the same title in ``title_map``.

    Rendered items are sorted within every group, and groups are sorted by their
    display title (see :func:`resolve_title`). Both sorts are stable and compare
    strings by code point, so the result only depends on the arguments.

    Raises a ConfigurationError if ``key_fn`` or ``format_fn`` fails for any of the
    records, or if a title is not a string. The original exception of a failing
    function is available as its ``original_error``.
    """
    buckets = group_by(items, _label_of(key_fn))
    format_item = _rendering_of(format_fn)
    groups = [
        (resolve_title(label, title_map), sorted(map(format_item, records)))
        for label, records in buckets.items()
    ]
    groups.sort(key=_by_title)
    return [GroupedEntry(title, rendered) for title, rendered in groups]


def _by_title(group: tuple[str, list[str]]) -> str:
    return group[0]


def _label_of(key_fn: KeyFn) -> Callable[[Any], str]:
    def label_of(item: Any) -> str:
        try:
            label = key_fn(item)
        except Exception as error:
            raise ConfigurationError(
                f"The key function failed for {inspect(item)}: {error}", error
            ) from error
        return label if isinstance(label, str) else str(label)

    return label_of


def _rendering_of(format_fn: FormatFn) -> FormatFn:
    def rendering_of(item: Any) -> str:
        try:
            rendered = format_fn(item)
        except Exception as error:
            raise ConfigurationError(
                f"The format function failed for {inspect(item)}: {error}", error
            ) from error
        if not isinstance(rendered, str):
            raise ConfigurationError(
                "The format function must return a string,"
                f" but returned {inspect(rendered)} for {inspect(item)}."
            )
        return rendered

    return rendering_of
