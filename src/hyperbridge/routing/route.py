"""Route, PathSegment and RouteMatch frozen dataclasses."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SegmentKind(Enum):
    LITERAL = "literal"
    NAMED = "named"
    SPLAT = "splat"


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route pattern.

    Literal: ``/users``        (kind=LITERAL, value="users")
    Named:   ``/:id``          (kind=NAMED, name="id")
    Splat:   ``/:rest...``     (kind=SPLAT, name="rest")
    """

    value: str
    kind: SegmentKind = SegmentKind.LITERAL
    name: str | None = None


@dataclass(frozen=True, slots=True)
class Route:
    """A registered route pattern and the component it resolves to.

    ``fallback`` marks the implicit ``/*`` catch-all.
    """

    pattern: str
    component: Any
    segments: tuple[PathSegment, ...] = ()
    fallback: bool = False


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of resolving a path.

    ``redirect`` is set (and ``params`` empty) when only the catch-all matched.
    """

    route: Route
    params: dict[str, str] = field(default_factory=dict)
    redirect: str | None = None
