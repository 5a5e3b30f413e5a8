"""Path templates: interpolation and parsing.

A template is a path with ``:name`` (one segment) and ``:name...`` (any
number of segments) markers, optionally followed by a query and a hash::

    build_pathname("/users/:id/files/:path...", {"id": "a b", "path": "x/y", "q": 1})
    → "/users/a%20b/files/x/y?q=1"

    parse_pathname("//users///42?tab=info#top")
    → Pathname(path="/users/42", params={"tab": "info"})
"""

import re
from dataclasses import dataclass, field
from typing import Any

from hyperbridge.errors import TemplateSyntaxError
from hyperbridge.http.query import (
    QueryValue,
    build_query_string,
    encode_component,
    parse_query_string,
    stringify,
)

_MARKER = re.compile(r":([^/.\-]+)(\.{3})?")
_ADJACENT_MARKERS = re.compile(r":([^/.\-]+)(\.{3})?:")
_SLASH_RUN = re.compile(r"/{2,}")


@dataclass(frozen=True, slots=True)
class Pathname:
    """A parsed URL: normalized path plus decoded query params.

    The hash fragment is never part of either.
    """

    path: str
    params: dict[str, QueryValue] = field(default_factory=dict)


def _split(url: str) -> tuple[int, int, int, int]:
    """Return ``(query_index, hash_index, query_end, path_end)`` for *url*.

    Missing ``?``/``#`` are reported as ``-1``; so is a ``?`` inside the hash.
    """
    query_index = url.find("?")
    hash_index = url.find("#")
    query_end = len(url) if hash_index < 0 else hash_index
    if query_index > query_end:
        query_index = -1
    path_end = query_end if query_index < 0 else query_index
    return query_index, hash_index, query_end, path_end


def parse_pathname(url: str) -> Pathname:
    """Split *url* into a normalized path and its query params.

    Runs of slashes collapse to one, an empty path becomes ``/`` and a
    missing leading slash is added. The query stops at the first ``#``.
    """
    query_index, _hash_index, query_end, path_end = _split(url)
    path = _SLASH_RUN.sub("/", url[:path_end])

    if not path:
        path = "/"
    elif path[0] != "/":
        path = f"/{path}"

    if query_index < 0:
        return Pathname(path=path)
    return Pathname(path=path, params=parse_query_string(url[query_index + 1 : query_end]))


def validate_template(template: str) -> None:
    """Raise ``TemplateSyntaxError`` if two markers touch without a separator."""
    if _ADJACENT_MARKERS.search(template):
        raise TemplateSyntaxError(template)


def build_pathname(template: str, params: dict[str, Any] | None = None) -> str:
    """Interpolate *params* into *template*.

    ``params=None`` returns *template* untouched. Otherwise:

    - ``:name`` markers are replaced by the percent-encoded value,
      ``:name...`` markers by the raw value (it may contain ``/``);
    - markers without a value (missing or ``None``) stay as literal text;
    - params not used by a marker are appended as a query string, after
      the template's own query and any query a splat value introduced;
    - the template's hash comes last, followed by any hash a splat value
      introduced.
    """
    if params is None:
        return template
    validate_template(template)

    query_index, hash_index, query_end, path_end = _split(template)
    path = template[:path_end]
    leftover = dict(params)

    def substitute(match: re.Match[str]) -> str:
        key, variadic = match.group(1), match.group(2)
        leftover.pop(key, None)
        value = params.get(key)
        if value is None:
            return match.group(0)
        if variadic:
            return stringify(value)
        return encode_component(stringify(value))

    resolved = _MARKER.sub(substitute, path)

    # Substituted splat values may carry their own query or hash.
    new_query_index, new_hash_index, new_query_end, new_path_end = _split(resolved)
    result = resolved[:new_path_end]

    if query_index >= 0:
        result += template[query_index:query_end]
    if new_query_index >= 0:
        result += ("?" if query_index < 0 else "&") + resolved[new_query_index + 1 : new_query_end]

    querystring = build_query_string(leftover)
    if querystring:
        result += ("?" if query_index < 0 and new_query_index < 0 else "&") + querystring

    if hash_index >= 0:
        result += template[hash_index:]
    if new_hash_index >= 0:
        result += ("#" if hash_index < 0 else "&") + resolved[new_hash_index + 1 :]
    return result
