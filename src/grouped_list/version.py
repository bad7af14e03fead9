"""Version of the grouped-list distribution"""

from __future__ import annotations

__all__ = ["version", "version_info"]


version = "0.3.0"

version_info: tuple[int, ...] = tuple(map(int, version.split(".")))
"""The release number as a tuple of integers, for comparisons"""
