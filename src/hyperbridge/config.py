"""Bridge configuration.

BridgeConfig is a frozen dataclass: immutable after creation, with typed
attribute access instead of string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BridgeConfig:
    """Bridge configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = BridgeConfig(route_prefix="#", warn_unsupported=False)
    """

    # Routing
    route_prefix: str = "#!"  # Prefix for hash-based navigation
    route_param_exclusions: tuple[str, ...] = ("scroll",)  # Never passed to route components

    # Links
    link_selector: str = "a"  # Element rendered by Link when no selector is given

    # Diagnostics
    warn_unsupported: bool = True  # Log legacy arguments that are accepted but ignored
