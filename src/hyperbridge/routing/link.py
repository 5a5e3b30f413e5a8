"""Link: an anchor that navigates in place.

Plain left clicks are turned into internal navigation; modified clicks,
middle clicks, ``target`` overrides and handlers that veto the click fall
through to the host's default handling::

    h(app.Link, {"href": "/user/:id", "params": {"id": 3}}, "Profile")
    → <a href="#!/user/3">Profile</a>
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from hyperbridge.context import RouteContext
from hyperbridge.http.pathname import build_pathname
from hyperbridge.renderer.view import View
from hyperbridge.routing.navigation import Navigator
from hyperbridge.views.hyperscript import censor, h

_LINK_ONLY = ("options", "params", "selector", "onclick")


@dataclass(slots=True)
class ClickEvent:
    """A click as reported by the host.

    ``target`` is the ``target`` attribute of the clicked element.
    """

    button: int = 0
    ctrl_key: bool = False
    meta_key: bool = False
    shift_key: bool = False
    alt_key: bool = False
    target: str | None = None
    default_prevented: bool = False
    redraw: bool = True

    def prevent_default(self) -> None:
        self.default_prevented = True

    @property
    def modified(self) -> bool:
        return self.ctrl_key or self.meta_key or self.shift_key or self.alt_key


class Link:
    """Stateful component rendering a navigable element.

    Attributes understood on top of the element's own:
        selector: Element to render (default ``a``).
        params: Interpolated into ``href`` with ``build_pathname``.
        options: ``replace``/``state``/``title`` for the navigation.
        onclick: Called first; returning ``False`` or calling
            ``prevent_default()`` cancels the navigation. An object with a
            ``handle_event`` method is accepted too.
        disabled: Renders without ``href`` and with ``aria-disabled``.
    """

    def __init__(self, navigator: Navigator, context: RouteContext, selector: str = "a") -> None:
        self.navigator = navigator
        self.context = context
        self.selector = selector

    def view(self, vnode: Any) -> View:
        attrs = vnode.attrs
        child = h(attrs.get("selector") or self.selector, censor(attrs, _LINK_ONLY), vnode.children)

        if child.attrs.get("disabled"):
            child.attrs["href"] = None
            child.attrs["aria-disabled"] = "true"
            return child

        href = build_pathname(child.attrs.get("href") or "", attrs.get("params"))
        child.attrs["href"] = self.navigator.prefix() + href
        child.attrs["onclick"] = self._click_handler(href, attrs.get("onclick"), attrs.get("options") or {})
        return child

    def _click_handler(
        self, href: str, onclick: Any, options: Mapping[str, Any]
    ) -> Callable[[ClickEvent], None]:
        def handle(event: ClickEvent) -> None:
            result = None
            if callable(onclick):
                result = onclick(event)
            elif onclick is not None and callable(getattr(onclick, "handle_event", None)):
                onclick.handle_event(event)

            if (
                result is not False
                and not event.default_prevented
                and event.button == 0
                and event.target in (None, "", "_self")
                and not event.modified
            ):
                event.prevent_default()
                event.redraw = False
                self.navigator.set(
                    href,
                    None,
                    replace=bool(options.get("replace", False)),
                    state=options.get("state"),
                    title=options.get("title"),
                )
                self.context.redraw()

        return handle
