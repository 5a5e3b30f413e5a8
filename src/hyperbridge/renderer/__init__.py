"""Renderer boundary: the view tree handed to an external renderer.

Hyperscript builds ``View`` values; a ``Renderer`` turns them into real
nodes, calls component ``build`` functions, and fires ``dom`` attachment
hooks. The reference implementation used by the tests lives in
``hyperbridge.testing``.
"""

from hyperbridge.renderer.protocol import BuildContext, Content, Renderer, RenderFn
from hyperbridge.renderer.view import CHILDREN_KEY, View, ViewKind

__all__ = [
    "CHILDREN_KEY",
    "BuildContext",
    "Content",
    "RenderFn",
    "Renderer",
    "View",
    "ViewKind",
]
