"""View: the renderer-agnostic node produced by hyperscript."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Attribute bucket holding positional children in a component's call-site data
CHILDREN_KEY = "children"

# Element attribute holding the attachment hook; on a component view, the
# hook the component forwards to its own elements
ATTACH_KEY = "dom"


class ViewKind(Enum):
    ELEMENT = "element"
    COMPONENT = "component"
    FRAGMENT = "fragment"
    TRUSTED = "trusted"


@dataclass(slots=True)
class View:
    """A node of the tree passed to the renderer.

    Attributes:
        kind: What the renderer should do with the node.
        tag: Element name for ``ELEMENT``; the user's view definition for
            ``COMPONENT`` (its identity across redraws); ``"["`` for
            fragments; ``None`` for trusted HTML.
        attrs: Attributes. Mutable until the renderer consumes the view.
        children: Child content (views, strings, nested lists, ``None``).
        key: Optional stable identity among siblings.
        build: For components only: ``build(attrs, children, context)``
            returning the per-pass render function.
    """

    kind: ViewKind
    tag: Any
    attrs: dict[str, Any] = field(default_factory=dict)
    children: list[Any] = field(default_factory=list)
    key: Any = None
    build: Callable[..., Any] | None = None

    @property
    def is_element(self) -> bool:
        return self.kind is ViewKind.ELEMENT
