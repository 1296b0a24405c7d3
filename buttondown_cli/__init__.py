"""Buttondown newsletter API client and command-line interface."""

from buttondown_cli.client import ButtondownClient
from buttondown_cli.core.exceptions import (
    ApplicationError,
    ConfigurationError,
    DecodeError,
    RemoteError,
    TransportError,
    UsageError,
)

__version__ = "0.1.0"

__all__ = [
    "ApplicationError",
    "ButtondownClient",
    "ConfigurationError",
    "DecodeError",
    "RemoteError",
    "TransportError",
    "UsageError",
]
