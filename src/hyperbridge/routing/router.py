"""Ordered route table with segment-walk matching.

Patterns are split on ``/`` into literal, named (``:id``) and splat
(``:rest...``) segments. Matching walks pattern segments left to right
against the path segments; a splat takes exactly as many segments as the
rest of the pattern leaves over.
"""

import logging
from typing import Any

from hyperbridge.errors import ConfigurationError
from hyperbridge.http.pathname import parse_pathname
from hyperbridge.http.query import decode_component
from hyperbridge.routing.route import PathSegment, Route, RouteMatch, SegmentKind

logger = logging.getLogger("hyperbridge.routing")

CATCH_ALL = "/*"


def parse_pattern(pattern: str) -> list[PathSegment]:
    """Parse a route pattern into segments, ignoring empty ones.

    Examples::

        "/users"            -> [PathSegment("users")]
        "/users/:id"        -> [..., PathSegment(":id", NAMED, "id")]
        "/files/:path.../x" -> [..., PathSegment(":path...", SPLAT, "path"), PathSegment("x")]
    """
    segments: list[PathSegment] = []
    for part in pattern.split("/"):
        if not part:
            continue
        if part.startswith(":") and part.endswith("...") and len(part) > 4:
            segments.append(PathSegment(value=part, kind=SegmentKind.SPLAT, name=part[1:-3]))
        elif part.startswith(":") and len(part) > 1:
            segments.append(PathSegment(value=part, kind=SegmentKind.NAMED, name=part[1:]))
        else:
            segments.append(PathSegment(value=part))
    return segments


def match_segments(segments: list[PathSegment] | tuple[PathSegment, ...], path: str) -> dict[str, str] | None:
    """Match *path* against parsed pattern *segments*.

    Returns the extracted params, or ``None`` when the pattern cannot
    consume the whole path. A pattern without markers matches with ``{}``.
    """
    parts = [p for p in path.split("/") if p]
    params: dict[str, str] = {}
    cursor = 0

    for index, seg in enumerate(segments):
        if seg.kind is SegmentKind.SPLAT:
            remaining_patterns = len(segments) - index - 1
            available = len(parts) - cursor
            if available < remaining_patterns:
                return None
            count = available - remaining_patterns
            params[seg.name or ""] = "/".join(parts[cursor : cursor + count])
            cursor += count
            continue

        if cursor >= len(parts):
            return None

        if seg.kind is SegmentKind.NAMED:
            params[seg.name or ""] = decode_component(parts[cursor])
        elif parts[cursor] != seg.value:
            return None
        cursor += 1

    if cursor != len(parts):
        return None
    return params


class Router:
    """Ordered route table, first match wins.

    Usage::

        router = Router(default_path="/home")
        router.add("/home", Home)
        router.add("/user/:id", User)
        match = router.match("/user/42")   # RouteMatch(params={"id": "42"})
        match = router.match("/nowhere")   # RouteMatch(redirect="/home")
    """

    __slots__ = ("_fallback", "_routes", "default_path")

    def __init__(self, default_path: str = "/") -> None:
        self.default_path = default_path
        self._routes: list[Route] = []
        self._fallback = Route(pattern=CATCH_ALL, component=None, fallback=True)

    def add(self, pattern: str, component: Any) -> Route:
        """Register *pattern*. Registration order is match order."""
        if pattern == CATCH_ALL:
            msg = f"{CATCH_ALL!r} is reserved for the catch-all redirect to the default path."
            raise ConfigurationError(msg)
        if any(route.pattern == pattern for route in self._routes):
            msg = f"Route {pattern!r} is registered twice."
            raise ConfigurationError(msg)
        route = Route(pattern=pattern, component=component, segments=tuple(parse_pattern(pattern)))
        self._routes.append(route)
        return route

    @property
    def routes(self) -> list[Route]:
        """Registered routes in match order, the catch-all last."""
        return [*self._routes, self._fallback]

    def match(self, path: str) -> RouteMatch:
        """Resolve *path* (query and hash are ignored).

        Always returns a match: when no explicit route fits, the catch-all
        match carries ``redirect=default_path``.
        """
        resolved = parse_pathname(path).path
        for route in self._routes:
            params = match_segments(route.segments, resolved)
            if params is not None:
                logger.debug("Route %r matched %r with %r", route.pattern, resolved, params)
                return RouteMatch(route=route, params=params)

        logger.debug("No route matched %r, redirecting to %r", resolved, self.default_path)
        return RouteMatch(route=self._fallback, redirect=self.default_path)
