"""The legacy application surface: render, mount, route.

``App`` ties one renderer and one host location together and owns the
``RouteContext`` that its navigator, route resolvers and ``Link`` share.

Basic usage::

    app = App(renderer, location)
    app.route(renderer.body, "/home", {
        "/home": Home,
        "/user/:id": User,
        "/files/:path...": Files,
    })
"""

import logging
from collections.abc import Mapping
from typing import Any

from hyperbridge.config import BridgeConfig
from hyperbridge.context import RouteContext
from hyperbridge.http.pathname import parse_pathname
from hyperbridge.renderer.protocol import Content, Renderer
from hyperbridge.routing.link import Link
from hyperbridge.routing.navigation import Location, Navigator
from hyperbridge.routing.router import Router
from hyperbridge.views.hyperscript import censor, h

logger = logging.getLogger("hyperbridge")


class App:
    """Legacy application facade over an external renderer.

    Only the renderer's ``body`` is a supported mount target; other targets
    and legacy redraw callbacks are accepted, logged, and ignored.
    """

    def __init__(self, renderer: Renderer, location: Location, config: BridgeConfig | None = None) -> None:
        self.config = config or BridgeConfig()
        self.renderer = renderer
        self.context = RouteContext(redraw=renderer.redraw)
        self.navigator = Navigator(location, self.context, prefix=self.config.route_prefix)
        self.router: Router | None = None
        self.Link = Link(self.navigator, self.context, selector=self.config.link_selector)
        self._unsubscribe: Any = None

    # -- mounting --

    def render(self, target: Any, vnodes: Content, redraw: Any = None) -> None:
        """Render a fixed view tree."""
        self._check_target(target)
        if redraw is not None and self.config.warn_unsupported:
            logger.warning("Redraw callbacks are not supported; the callback will never be called.")
        self.renderer.mount(lambda: vnodes)

    def mount(self, target: Any, component: Any) -> None:
        """Mount *component* as the root, redrawn on every ``redraw()``."""
        self._check_target(target)
        self.renderer.mount(lambda: h(component))

    def _check_target(self, target: Any) -> None:
        if target is not None and target is not self.renderer.body and self.config.warn_unsupported:
            logger.warning(
                "Mounting to a target other than the document body is not supported;"
                " rendering into the body instead."
            )

    # -- routing --

    def route(self, target: Any, default_path: str, routes: Mapping[str, Any]) -> Router:
        """Mount a route table.

        Patterns are tried in the given order. Unmatched paths redirect to
        *default_path*, as does starting without a route in the location.
        """
        self._check_target(target)

        router = Router(default_path)
        for pattern, component in routes.items():
            router.add(pattern, component)
        self.router = router

        if not self.navigator.location.hash:
            self.navigator.set(default_path)

        if self._unsubscribe is not None:
            self._unsubscribe()
        self._unsubscribe = self.navigator.location.subscribe(self.renderer.redraw)

        self.renderer.mount(self._resolve)
        return router

    def _resolve(self) -> Content:
        """Root build function of a routed app: match, remember, instantiate."""
        assert self.router is not None
        current = self.navigator.get()
        match = self.router.match(current)

        if match.redirect is not None:
            self.navigator.set(match.redirect)
            current = self.navigator.get()
            match = self.router.match(current)
            if match.redirect is not None:
                logger.warning("Default route %r does not match any registered route.", current)
                return None

        params = censor(
            {**parse_pathname(current).params, **match.params},
            self.config.route_param_exclusions,
        )
        self.context.remember(current, params)
        return h(match.route.component, params)

    def set_route(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        *,
        replace: bool = False,
        state: Any = None,
        title: str | None = None,
    ) -> None:
        """Navigate to *path* (interpolating *params*) and redraw."""
        self.navigator.set(path, params, replace=replace, state=state, title=title)
        self.context.redraw()

    def get_route(self) -> str:
        """The current route without prefix."""
        return self.navigator.get()

    def param(self, key: str | None = None) -> Any:
        """Params matched for the current route, or one named value."""
        return self.navigator.param(key)

    def prefix(self, value: str | None = None) -> str:
        """Read the navigation prefix, setting it first when *value* is given."""
        return self.navigator.prefix(value)

    # -- redraw --

    def redraw(self) -> None:
        self.renderer.redraw()

    def redraw_sync(self) -> None:
        """Legacy synchronous redraw; same as ``redraw()``."""
        if self.config.warn_unsupported:
            logger.warning("Synchronous redraw is not supported; performing a regular redraw.")
        self.renderer.redraw()
