"""Base error of the grouped list package"""

from __future__ import annotations

from sys import exc_info
from typing import Any

__all__ = ["GroupedListError"]


class GroupedListError(Exception):
    """Grouped List Error

    Base class of all errors raised or reported by the grouped list package. In
    addition to a message, it may carry the original error that caused it, e.g.
    the exception raised by a transport or by a caller-supplied function.
    """

    message: str
    """A message describing the Error for debugging purposes"""

    original_error: Exception | None
    """The original error that caused this one, if any"""

    __slots__ = ("message", "original_error")

    __hash__ = Exception.__hash__

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        if original_error:
            self.__traceback__ = original_error.__traceback__
            if original_error.__cause__:
                self.__cause__ = original_error.__cause__
            elif original_error.__context__:
                self.__context__ = original_error.__context__
        if not self.__traceback__:
            self.__traceback__ = exc_info()[2]

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        args = [repr(self.message)]
        if self.original_error:
            args.append(f"original_error={self.original_error!r}")
        return f"{self.__class__.__name__}({', '.join(args)})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, GroupedListError)
            and self.__class__ == other.__class__
            and self.message == other.message
        )

    def __ne__(self, other: Any) -> bool:
        return not self == other
