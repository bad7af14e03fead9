"""Python Utils

This package contains dependency-free Python utility functions used throughout the
codebase.

Each utility should belong in its own file and be the default export.

These functions are not part of the module interface and are subject to change.
"""

from .group_by import group_by
from .inspect import inspect
from .is_record_sequence import is_record_sequence

__all__ = ["group_by", "inspect", "is_record_sequence"]
