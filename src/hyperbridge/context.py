"""Per-application routing context.

Provides:
- ``RouteContext``: the params most recently matched for each resolved
  path, plus the redraw trigger of the mounted tree.

One context is created by each ``App`` and handed explicitly to the
navigator, the route resolvers and ``Link``. Nothing here is module-level
state; two apps never see each other's params.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


def _noop() -> None:
    return None


@dataclass(slots=True)
class RouteContext:
    """Explicit routing state threaded from ``App.route`` to every resolver.

    Attributes:
        params: Resolved path -> parameter map last matched for it.
        redraw: Triggers a redraw of the mounted tree. Replaced by the app
            once a renderer is attached.
    """

    params: dict[str, dict[str, Any]] = field(default_factory=dict)
    redraw: Callable[[], None] = _noop

    def remember(self, path: str, params: dict[str, Any]) -> None:
        """Associate *params* with *path*. Empty maps are not recorded."""
        if params:
            self.params[path] = dict(params)

    def lookup(self, path: str, key: str | None = None) -> Any:
        """Return the param map for *path*, or one value from it.

        Returns ``None`` when *path* has no entry or *key* is absent.
        """
        params = self.params.get(path)
        if params is None or key is None:
            return params
        return params.get(key)

    def clear(self) -> None:
        self.params.clear()
