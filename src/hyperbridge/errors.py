"""Hyperbridge exception hierarchy.

Shared across the codecs, the router, and the lifecycle bridge so every
module raises and catches the same types.

Only programming errors are exceptions. A route that does not match, or a
query token that cannot be percent-decoded, is reported as a value.
"""


class HyperbridgeError(Exception):
    """Base for all hyperbridge-specific errors."""


class ConfigurationError(HyperbridgeError):
    """Raised when app or route configuration is invalid."""


class TemplateSyntaxError(HyperbridgeError, ValueError):
    """A path template places two parameter markers side by side.

    Markers must be separated by ``/``, ``-`` or ``.``::

        build_pathname("/:a:b", {...})  # raises
        build_pathname("/:a-:b", {...})  # fine
    """

    def __init__(self, template: str) -> None:
        self.template = template
        super().__init__(
            "Template parameter names must be separated by either a '/', '-', or '.'"
            f" (got {template!r})"
        )


class LifecycleError(HyperbridgeError):
    """Raised when a view definition cannot be turned into a component."""
