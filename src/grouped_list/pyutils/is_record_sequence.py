"""Check whether a payload is a sequence of records"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

try:
    from typing import TypeGuard
except ImportError:  # Python < 3.10
    from typing_extensions import TypeGuard


__all__ = ["is_record_sequence"]

not_record_sequence_types: Any = (str, bytes, bytearray, memoryview, Mapping)


def is_record_sequence(value: Any) -> TypeGuard[Sequence]:
    """Check if value is a sequence, but not a string, bytes or a mapping.

    This is what a JSON array decodes to, while JSON objects, strings, numbers and
    null do not qualify.
    """
    return isinstance(value, Sequence) and not isinstance(
        value, not_record_sequence_types
    )
