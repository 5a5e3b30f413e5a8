"""Hyperbridge: the legacy hypermedia component API on top of a modern renderer.

Keeps old view code working unchanged: hyperscript, closure and stateful
components with lifecycle hooks, hash routing with splat parameters, and
the bracket-notation query and path codecs.

Basic usage::

    from hyperbridge import App, h
    from hyperbridge.testing import HtmlRenderer, MemoryLocation

    def Hello(vnode):
        return {"view": lambda vnode: h("h1", f"Hello {vnode.attrs['name']}")}

    renderer = HtmlRenderer()
    app = App(renderer, MemoryLocation())
    app.route(renderer.body, "/hello/world", {"/hello/:name": Hello})
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "BridgeConfig",
    "ConfigurationError",
    "HyperbridgeError",
    "LifecycleError",
    "RouteContext",
    "Router",
    "TemplateSyntaxError",
    "build_pathname",
    "build_query_string",
    "censor",
    "fragment",
    "h",
    "parse_pathname",
    "parse_query_string",
    "trust",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import hyperbridge`` fast while providing a clean top-level API.
    """
    if name == "App":
        from hyperbridge.app import App

        return App

    if name == "BridgeConfig":
        from hyperbridge.config import BridgeConfig

        return BridgeConfig

    if name == "RouteContext":
        from hyperbridge.context import RouteContext

        return RouteContext

    if name == "Router":
        from hyperbridge.routing.router import Router

        return Router

    if name in ("h", "fragment", "trust", "censor"):
        from hyperbridge.views import hyperscript as _hs

        return getattr(_hs, name)

    if name in ("build_query_string", "parse_query_string"):
        from hyperbridge.http import query as _query

        return getattr(_query, name)

    if name in ("build_pathname", "parse_pathname"):
        from hyperbridge.http import pathname as _pathname

        return getattr(_pathname, name)

    if name in ("HyperbridgeError", "ConfigurationError", "TemplateSyntaxError", "LifecycleError"):
        from hyperbridge import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
