"""Component lifecycle bridge.

The renderer only knows build functions: it calls ``build`` once, keeps
the returned render function, and calls that on every pass. Legacy
components instead expect a vnode with persistent ``state`` and the hook
protocol ``oninit``/``oncreate``/``onbeforeupdate``/``onupdate``/``onremove``.
``ComponentInstance`` adapts one to the other.

Two kinds of view definition are accepted, resolved once per instance:

``FUNCTION``
    A plain callable (closure component). Called once with a copy of the
    vnode; returns the state, either an object or a mapping with a
    ``view`` entry. Hooks are plain functions receiving the vnode.

``STATEFUL``
    A class exposing ``view`` (constructed with the vnode), or any other
    object or mapping with a ``view`` entry (shallow-copied per instance).
    Hooks are resolved as attributes of that per-instance state, so
    methods arrive bound to it; they also receive the vnode.

Lifecycle per instance::

    UNINITIALIZED --build--> BUILT --render*--> REBUILT --remove--> REMOVED
"""

import copy
import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import SimpleNamespace
from typing import Any

from hyperbridge.errors import LifecycleError
from hyperbridge.renderer.protocol import BuildContext, Content, RenderFn
from hyperbridge.renderer.view import ATTACH_KEY, CHILDREN_KEY, View, ViewKind

logger = logging.getLogger("hyperbridge.views")

LIFECYCLE_HOOKS: tuple[str, ...] = (
    "oninit",
    "oncreate",
    "onbeforeupdate",
    "onupdate",
    "onbeforeremove",
    "onremove",
)


class ComponentKind(Enum):
    FUNCTION = "function"
    STATEFUL = "stateful"


class LifecycleState(Enum):
    UNINITIALIZED = "uninitialized"
    BUILT = "built"
    REBUILT = "rebuilt"
    REMOVED = "removed"


class ComponentState(SimpleNamespace):
    """Attribute namespace for state given as a mapping."""


@dataclass(slots=True)
class Vnode:
    """The unit legacy components see.

    ``attrs`` and ``children`` are replaced on every pass; ``state``
    survives for the whole life of the instance.
    """

    tag: Any = None
    attrs: dict[str, Any] = field(default_factory=dict)
    children: list[Any] = field(default_factory=list)
    state: Any = None
    key: Any = None
    dom: Any = None


def is_component(value: Any) -> bool:
    """True if *value* can be passed to ``component()``."""
    if isinstance(value, (str, View)):
        return False
    if callable(value):
        return True
    return callable(_lookup(value, "view"))


def component_kind(definition: Any) -> ComponentKind:
    """Classify a view definition.

    Raises ``LifecycleError`` if it is neither callable nor has a ``view``.
    """
    if inspect.isclass(definition):
        return ComponentKind.STATEFUL
    if callable(definition):
        return ComponentKind.FUNCTION
    if callable(_lookup(definition, "view")):
        return ComponentKind.STATEFUL
    msg = f"{definition!r} is not a component: expected a callable or an object with a 'view'."
    raise LifecycleError(msg)


def _lookup(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _as_state(value: Any) -> Any:
    if isinstance(value, Mapping):
        return ComponentState(**value)
    return value


@dataclass(slots=True)
class _AttachHooks:
    """Several ``dom`` hooks sharing one element.

    Cleanups returned by the hooks are combined into one.
    """

    hooks: list[Callable[[Any], Any]]

    def __call__(self, element: Any) -> Callable[[], None] | None:
        cleanups = [c for c in (hook(element) for hook in self.hooks) if callable(c)]
        if not cleanups:
            return None

        def cleanup() -> None:
            for fn in cleanups:
                fn()

        return cleanup


def _chain(existing: Any, hook: Any) -> Any:
    if not callable(hook):
        return existing
    if not callable(existing) or existing == hook:
        return hook
    if isinstance(existing, _AttachHooks):
        if hook not in existing.hooks:
            existing.hooks.append(hook)
        return existing
    return _AttachHooks([existing, hook])


class ComponentInstance:
    """One mounted use of a view definition.

    Created by ``component()``. The renderer calls ``build`` the first
    time it meets the view, then the returned ``render`` on every pass.
    """

    __slots__ = (
        "_context",
        "_created",
        "_forwarded",
        "_passes",
        "definition",
        "kind",
        "lifecycle",
        "vnode",
    )

    def __init__(self, definition: Any, attrs: dict[str, Any], children: list[Any]) -> None:
        self.definition = definition
        self.kind: ComponentKind | None = None
        self.lifecycle = LifecycleState.UNINITIALIZED
        own = {k: v for k, v in attrs.items() if k != ATTACH_KEY}
        self.vnode = Vnode(tag=definition, attrs=own, children=children)
        self._context: BuildContext | None = None
        self._created = False
        self._forwarded: Any = None
        self._passes = 0

    # -- renderer entry points --

    def build(self, _attrs: Any, _children: Any, context: BuildContext) -> RenderFn:
        """First invocation: create state, apply overrides, run ``oninit``."""
        if self.lifecycle is not LifecycleState.UNINITIALIZED:
            msg = f"Component {self.definition!r} was already built."
            raise LifecycleError(msg)

        vnode = self.vnode
        self.kind = component_kind(self.definition)
        self._context = context
        context.on_remove(self.remove)

        if self.kind is ComponentKind.FUNCTION:
            vnode.state = _as_state(self.definition(copy.copy(vnode)))
            if not callable(getattr(vnode.state, "view", None)):
                msg = f"Closure component {self.definition!r} returned state without a 'view'."
                raise LifecycleError(msg)
        elif inspect.isclass(self.definition):
            vnode.state = self.definition(vnode)
        elif isinstance(self.definition, Mapping):
            vnode.state = ComponentState(**self.definition)
        else:
            vnode.state = copy.copy(self.definition)

        # Hooks passed as attributes override the component's own.
        for name in LIFECYCLE_HOOKS:
            hook = vnode.attrs.get(name)
            if callable(hook):
                setattr(vnode.state, name, hook)

        if vnode.attrs.get("key") is not None:
            vnode.key = vnode.attrs["key"]

        self.lifecycle = LifecycleState.BUILT
        logger.debug("Built %s component %r", self.kind.value, self.definition)
        self._call("oninit", vnode)
        return self.render

    def render(self, data: Mapping[str, Any]) -> Content:
        """One pass: merge call-site data, run ``view`` and the update hooks."""
        if self.lifecycle is LifecycleState.REMOVED:
            msg = f"Component {self.definition!r} was rendered after removal."
            raise LifecycleError(msg)

        vnode = self.vnode
        for key, value in data.items():
            if key in (CHILDREN_KEY, ATTACH_KEY) or isinstance(value, View):
                continue
            vnode.attrs[key] = value
        if CHILDREN_KEY in data:
            vnode.children = list(data[CHILDREN_KEY])
        self._forwarded = data.get(ATTACH_KEY)

        content = self._call("view", vnode)

        cancelled = False
        before = self._hook("onbeforeupdate")
        if before is not None:
            cancelled = before(vnode) is False
            if self._context is not None:
                self._context.ignore(cancelled)
        if not cancelled:
            self._call("onupdate", vnode)

        self._inject(content)
        self._passes += 1
        if self._passes > 1:
            self.lifecycle = LifecycleState.REBUILT
        return content

    # -- attachment --

    def attach(self, element: Any) -> None:
        """``dom`` hook: fire ``oncreate`` on first attachment."""
        self.vnode.dom = element
        if not self._created:
            self._created = True
            self._call("oncreate", self.vnode)

    def remove(self) -> None:
        """Removal callback: the renderer dropped this instance's node."""
        if self.lifecycle is LifecycleState.REMOVED:
            return
        self.lifecycle = LifecycleState.REMOVED
        logger.debug("Removed component %r", self.definition)
        self._call("onremove", self.vnode)

    def _inject(self, content: Content) -> None:
        if isinstance(content, (list, tuple)):
            for item in content:
                self._inject(item)
        elif isinstance(content, View):
            if content.kind in (ViewKind.ELEMENT, ViewKind.COMPONENT):
                hook = _chain(content.attrs.get(ATTACH_KEY), self.attach)
                content.attrs[ATTACH_KEY] = _chain(hook, self._forwarded)
            elif content.kind is ViewKind.FRAGMENT:
                self._inject(content.children)

    # -- hooks --

    def _hook(self, name: str) -> Callable[..., Any] | None:
        hook = getattr(self.vnode.state, name, None)
        return hook if callable(hook) else None

    def _call(self, name: str, vnode: Vnode) -> Any:
        hook = self._hook(name)
        if hook is None:
            return None
        return hook(vnode)


def component(definition: Any, attrs: Any = None, *children: Any) -> View:
    """Wrap a legacy view definition as a renderer component view.

    A non-mapping *attrs* is treated as the first child. The returned
    view's ``tag`` is *definition*, which the renderer uses to decide
    whether a later pass reuses this instance.
    """
    child_list = list(children)
    if isinstance(attrs, Mapping):
        call_attrs = dict(attrs)
    else:
        call_attrs = {}
        if attrs is not None:
            child_list.insert(0, attrs)

    instance = ComponentInstance(definition, call_attrs, child_list)
    return View(
        kind=ViewKind.COMPONENT,
        tag=definition,
        attrs={**call_attrs, CHILDREN_KEY: child_list},
        children=child_list,
        key=call_attrs.get("key"),
        build=instance.build,
    )
