"""Renderer and BuildContext protocols.

A renderer is anything matching ``Renderer``. No base class required.

Component views are driven in two steps. The first time the renderer
meets a component it calls::

    render = view.build(view.attrs, view.children, context)

and then, on that pass and every later one::

    content = render(view.attrs)

Element views may carry a ``dom`` attribute. The renderer calls it with
the concrete element right after the element (and its children) are
attached; if it returns a callable, that callable runs once when the
element is detached.

A component view passes its ``dom`` attribute through to the component,
which forwards it onto the elements it renders.
"""

from collections.abc import Callable
from typing import Any, Protocol

from hyperbridge.renderer.view import View

# Anything a build or view function may return
type Content = View | str | int | float | bool | list[Content] | None

# The per-pass function returned by a component's build function
type RenderFn = Callable[[dict[str, Any]], Content]


class BuildContext(Protocol):
    """Handed to component build functions by the renderer."""

    def ignore(self, skip: bool) -> None:
        """Keep the previous subtree instead of applying this pass's output."""
        ...

    def redraw(self) -> None: ...

    def on_remove(self, callback: Callable[[], Any]) -> None:
        """Run *callback* once, after the component is removed from the tree."""
        ...


class Renderer(Protocol):
    """The external rendering engine."""

    @property
    def body(self) -> Any:
        """The only supported mount target."""
        ...

    def mount(self, root: Callable[[], Content]) -> None:
        """Replace the mounted tree with *root* and render it."""
        ...

    def redraw(self) -> None:
        """Re-run the mounted root and apply the result."""
        ...
