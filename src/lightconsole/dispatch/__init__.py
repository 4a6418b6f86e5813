"""Command dispatch module for lightconsole.

Translates operator actions into commands against the lighting bridge.

Public API:
    CommandDispatcher -- Abstract base class
    HttpCommandDispatcher -- HTTP backend for the lighting bridge
"""

from lightconsole.dispatch.base import (
    CommandDispatcher,
    DecodeError,
    DispatchError,
    DispatchTimeout,
    TransportError,
)

__all__ = [
    "CommandDispatcher",
    "DecodeError",
    "DispatchError",
    "DispatchTimeout",
    "HttpCommandDispatcher",
    "TransportError",
]


def __getattr__(name: str) -> type:
    """Lazy import for concrete implementations that require external deps."""
    if name == "HttpCommandDispatcher":
        from lightconsole.dispatch.http_backend import HttpCommandDispatcher
        return HttpCommandDispatcher
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
