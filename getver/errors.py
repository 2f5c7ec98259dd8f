"""Exception hierarchy shared across getver."""

from __future__ import annotations


class GetverError(Exception):
    """Base class for every error raised by getver."""


class RegistryError(GetverError):
    """A single registry lookup could not produce metadata."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class NotFoundError(RegistryError):
    """The registry reported that the package does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"the package '{name}' doesn't exist")


class TransportError(RegistryError):
    """Network failure, timeout or unexpected HTTP status."""


class ParseError(RegistryError):
    """Response body did not match the expected shape."""


class UsageError(GetverError):
    """Invalid command line invocation."""


class ConfigError(GetverError):
    """Configuration file or option could not be validated."""


class AggregationError(GetverError):
    """Outcomes collected for a batch violate the report invariants."""


__all__ = [
    "AggregationError",
    "ConfigError",
    "GetverError",
    "NotFoundError",
    "ParseError",
    "RegistryError",
    "TransportError",
    "UsageError",
]
