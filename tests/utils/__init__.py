"""Test utilities"""

from .fake_source import FakeSource

__all__ = ["FakeSource"]
