"""Hash-based navigation over a host ``Location``.

The host (a browser shim, a desktop webview, the in-memory location used
in tests) implements ``Location``. ``Navigator`` adds the legacy prefix
convention on top: with the default ``#!`` prefix, the route ``/user/1``
lives at ``#!/user/1``.
"""

import logging
from collections.abc import Callable
from typing import Any, Protocol

from hyperbridge.context import RouteContext
from hyperbridge.http.pathname import build_pathname

logger = logging.getLogger("hyperbridge.routing")

DEFAULT_PREFIX = "#!"


class Location(Protocol):
    """Navigation surface consumed from the host environment."""

    @property
    def pathname(self) -> str: ...

    @property
    def hash(self) -> str: ...

    def navigate(self, url: str, *, replace: bool = False, state: Any = None) -> None:
        """Push (or replace) a history entry for *url*."""
        ...

    def set_title(self, title: str) -> None: ...

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Call *callback* on external location changes. Returns an unsubscribe."""
        ...


class Navigator:
    """Reads and writes the current route through a ``Location``.

    Usage::

        nav = Navigator(location, context)
        nav.set("/user/:id", {"id": 7})   # location hash becomes "#!/user/7"
        nav.get()                         # "/user/7"
        nav.param("id")                   # value remembered by the last resolve
    """

    __slots__ = ("_prefix", "context", "location")

    def __init__(self, location: Location, context: RouteContext, prefix: str = DEFAULT_PREFIX) -> None:
        self.location = location
        self.context = context
        self._prefix = prefix

    def prefix(self, value: str | None = None) -> str:
        """Return the prefix, replacing it first when *value* is given."""
        if value is not None:
            self._prefix = value
        return self._prefix

    def get(self) -> str:
        """The current route, without prefix.

        Falls back to the location's pathname while the hash is empty.
        """
        hash_ = self.location.hash
        if hash_ == "":
            return self.location.pathname
        if self._prefix and hash_.startswith(self._prefix):
            return hash_[len(self._prefix) :]
        return hash_[1:]

    def set(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        *,
        replace: bool = False,
        state: Any = None,
        title: str | None = None,
    ) -> str:
        """Navigate to *path*, interpolating *params* when given.

        Returns the resolved route (without prefix).
        """
        pathname = build_pathname(path, params) if params is not None else path
        logger.debug("Navigating to %r (replace=%s)", pathname, replace)
        self.location.navigate(
            self._prefix + pathname,
            replace=replace,
            state=state if state is not None else {},
        )
        if title:
            self.location.set_title(title)
        return pathname

    def param(self, key: str | None = None) -> Any:
        """Params last matched for the current route, or one of them."""
        return self.context.lookup(self.get(), key)
