"""Hyperscript: the legacy ``m()`` surface.

``h("ul.list", {"id": "x"}, h("li", "one"))`` builds element views;
``h(Component, {...})`` goes through the lifecycle bridge. Helpers for
fragments, trusted HTML and attribute censoring live here too.
"""

from collections.abc import Mapping
from typing import Any

from kida.template import Markup

from hyperbridge.renderer.view import View, ViewKind
from hyperbridge.views.lifecycle import LIFECYCLE_HOOKS, component, is_component
from hyperbridge.views.selector import compile_selector

FRAGMENT_TAG = "["

_CENSORED = frozenset(("key", *LIFECYCLE_HOOKS))


def is_attrs(value: Any) -> bool:
    """True if *value* is an attributes mapping rather than a child."""
    return isinstance(value, Mapping)


def merge_class(a: Mapping[str, Any], b: Mapping[str, Any]) -> dict[str, str]:
    """Concatenate the ``className`` and ``class`` values of *a* and *b*.

    Empty results are left out.
    """
    merged: dict[str, str] = {}
    for name in ("className", "class"):
        value = " ".join(str(v) for v in (a.get(name), b.get(name)) if v)
        if value:
            merged[name] = value
    return merged


def h(tag: Any, attrs: Any = None, *children: Any) -> View:
    """Create a view.

    *tag* is a selector string or a component. When *attrs* is not a
    mapping it is treated as the first child::

        h("p", "hello")                      # <p>hello</p>
        h("a.btn[href=/x]", {"class": "big"})  # <a class="btn big" href="/x">
        h(Counter, {"start": 3})             # component
    """
    if is_component(tag):
        return component(tag, attrs, *children)

    selector = compile_selector(tag)
    child_list = list(children)

    if is_attrs(attrs):
        merged = {**selector.attrs, **attrs, **merge_class(selector.attrs, attrs)}
    else:
        merged = selector.attrs
        if attrs is not None:
            child_list.insert(0, attrs)

    return View(
        kind=ViewKind.ELEMENT,
        tag=selector.tag,
        attrs=merged,
        children=child_list,
        key=merged.get("key"),
    )


def fragment(attrs: Any = None, *children: Any) -> View:
    """Group *children* without a wrapping element."""
    child_list = list(children)
    if not is_attrs(attrs):
        if attrs is not None:
            child_list.insert(0, attrs)
        attrs = {}
    return View(
        kind=ViewKind.FRAGMENT,
        tag=FRAGMENT_TAG,
        attrs=dict(attrs),
        children=child_list,
        key=attrs.get("key"),
    )


def trust(html: str | None) -> View | None:
    """Wrap raw HTML so the renderer emits it unescaped.

    Never pass unsanitized user input.
    """
    if html is None:
        return None
    markup = Markup(html)
    return View(
        kind=ViewKind.TRUSTED,
        tag=None,
        attrs={"key": html, "strings": markup},
        key=html,
    )


def censor(attrs: Mapping[str, Any], extras: list[str] | tuple[str, ...] | None = None) -> dict[str, Any]:
    """Shallow copy of *attrs* without lifecycle hooks, ``key`` and *extras*."""
    excluded = _CENSORED.union(extras) if extras else _CENSORED
    return {name: value for name, value in attrs.items() if name not in excluded}
