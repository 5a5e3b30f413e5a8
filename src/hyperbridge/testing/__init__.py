"""Test utilities for hyperbridge applications.

Provides an in-memory reference renderer and location::

    from hyperbridge.testing import HtmlRenderer, MemoryLocation

    renderer = HtmlRenderer()
    app = App(renderer, MemoryLocation())
"""

from hyperbridge.testing.location import HistoryEntry, MemoryLocation
from hyperbridge.testing.renderer import Element, HtmlRenderer

__all__ = [
    "Element",
    "HistoryEntry",
    "HtmlRenderer",
    "MemoryLocation",
]
