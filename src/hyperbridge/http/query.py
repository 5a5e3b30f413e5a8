"""Bracket-notation query strings.

``build_query_string`` flattens nested mappings and lists into
``key[sub][0]=value`` pairs; ``parse_query_string`` turns them back into
dicts and lists. Both follow the legacy wire format exactly:

- only the literal strings ``true``/``false`` are coerced (to bools),
- ``None`` and ``""`` encode as a bare ``key`` token with no ``=``,
- a token that cannot be percent-decoded is kept verbatim,
- any ``__proto__`` level drops the whole entry.
"""

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, unquote

# encodeURIComponent leaves these unescaped on top of letters, digits and "-_.~"
_URI_COMPONENT_SAFE = "!*'()"

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_LEVEL_SPLIT = re.compile(r"\]\[?|\[")
_LEADING_INT = re.compile(r"\s*[+-]?\d")

type QueryValue = str | bool | list[QueryValue] | dict[str, QueryValue] | None


def encode_component(value: str) -> str:
    """Percent-encode *value* with the ``encodeURIComponent`` safe set."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


def decode_component(value: str) -> str:
    """Percent-decode *value*, returning it unchanged if it is malformed.

    Malformed means a ``%`` not followed by two hex digits, or escapes that
    do not form valid UTF-8. ``+`` is not treated as a space.
    """
    if "%" not in value:
        return value
    if _BAD_ESCAPE.search(value):
        return value
    try:
        return unquote(value, errors="strict")
    except UnicodeDecodeError:
        return value


def stringify(value: Any) -> str:
    """Render a scalar the way the legacy API prints it.

    Dates and other objects fall back to ``str()``.
    """
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_query_string(query: Any) -> str:
    """Serialize a mapping into a bracket-notation query string.

    Anything that is not a mapping (lists and ``None`` included) yields ``""``.

    Example::

        build_query_string({"a": {"b": ["x", "y"]}, "c": None})
        → "a%5Bb%5D%5B0%5D=x&a%5Bb%5D%5B1%5D=y&c"
    """
    if not isinstance(query, Mapping):
        return ""

    args: list[str] = []

    def destructure(key: str, value: Any) -> None:
        if isinstance(value, (list, tuple)):
            for i, item in enumerate(value):
                destructure(f"{key}[{i}]", item)
        elif isinstance(value, Mapping):
            for sub, item in value.items():
                destructure(f"{key}[{sub}]", item)
        elif value is None or value == "":
            args.append(encode_component(key))
        else:
            args.append(f"{encode_component(key)}={encode_component(stringify(value))}")

    for key, value in query.items():
        destructure(str(key), value)

    return "&".join(args)


def parse_query_string(query: str | None) -> dict[str, QueryValue]:
    """Parse a bracket-notation query string into nested dicts and lists.

    A single leading ``?`` is ignored. Later entries overwrite earlier ones
    that target the same leaf. ``key[]`` appends using a counter per prefix.

    Example::

        parse_query_string("?a[]=x&a[]=y&b[c]=true")
        → {"a": ["x", "y"], "b": {"c": True}}
    """
    if not query:
        return {}
    if query[0] == "?":
        query = query[1:]

    counters: dict[str, int] = {}
    data: dict[str, QueryValue] = {}

    for entry in query.split("&"):
        if not entry:
            continue
        raw_key, sep, raw_value = entry.partition("=")
        key = decode_component(raw_key)
        value: QueryValue = decode_component(raw_value) if sep else ""

        if value == "true":
            value = True
        elif value == "false":
            value = False

        levels = _LEVEL_SPLIT.split(key)
        if "[" in key:
            levels.pop()

        _assign(data, levels, value, counters)

    return data


def _assign(
    data: dict[str, QueryValue],
    levels: list[str],
    value: QueryValue,
    counters: dict[str, int],
) -> None:
    """Walk *levels* from *data*, creating containers, and store *value*."""
    cursor: Any = data
    parent: Any = None
    parent_key: Any = None
    last = len(levels) - 1

    for j, raw_level in enumerate(levels):
        level: str | int = raw_level
        if raw_level == "":
            prefix = ",".join(levels[:j])
            if prefix not in counters:
                counters[prefix] = len(cursor) if isinstance(cursor, list) else 0
            level = counters[prefix]
            counters[prefix] += 1
        elif raw_level == "__proto__":
            return

        if isinstance(cursor, list):
            index = _as_index(level)
            if index is None:
                # A named key inside a list: the list becomes a dict.
                cursor = _promote(cursor)
                _store(parent, parent_key, cursor)
            else:
                level = index
        if isinstance(cursor, dict):
            level = str(level)

        if j == last:
            _store(cursor, level, value)
            return

        child = _existing(cursor, level)
        if not isinstance(child, (list, dict)):
            next_level = levels[j + 1]
            child = [] if next_level == "" or _LEADING_INT.match(next_level) else {}
            _store(cursor, level, child)
        parent, parent_key = cursor, level
        cursor = child


def _as_index(level: str | int) -> int | None:
    if isinstance(level, int):
        return level
    if level.isascii() and level.isdigit() and (level == "0" or not level.startswith("0")):
        return int(level)
    return None


def _promote(items: list[Any]) -> dict[str, Any]:
    return {str(i): item for i, item in enumerate(items)}


def _existing(container: Any, key: Any) -> Any:
    if isinstance(container, list):
        return container[key] if key < len(container) else None
    return container.get(key)


def _store(container: Any, key: Any, value: Any) -> None:
    if isinstance(container, list):
        if key >= len(container):
            container.extend([None] * (key + 1 - len(container)))
        container[key] = value
    else:
        container[key] = value
