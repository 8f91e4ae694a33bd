"""
Error taxonomy for snowman.

Every error raised by this package derives from `SnowmanError` so callers (and
the CLI) can catch the whole family at once. Messages name the failing field or
file but never include secret values.
"""

from __future__ import annotations

from pathlib import Path


class SnowmanError(Exception):
    """Base class for all snowman errors."""


class ConfigurationError(SnowmanError):
    """The configuration file is missing or does not validate."""


class ResolutionError(SnowmanError):
    """
    A required deferred value could not be resolved.

    Attributes
    ----------
    field : str | None
        Name of the configuration field being resolved, when known.
    reason : str
        Why resolution failed (never contains the value itself).
    """

    def __init__(self, reason: str, field: str | None = None) -> None:
        self.field = field
        self.reason = reason
        if field:
            super().__init__(f"Failed to resolve '{field}': {reason}")
        else:
            super().__init__(reason)

    def for_field(self, field: str) -> "ResolutionError":
        """Return a copy of this error attributed to `field`."""
        return ResolutionError(self.reason, field=field)


class PrivateKeyReadError(SnowmanError):
    """The private key file could not be read or decoded as UTF-8."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Failed to read private key file '{self.path}': {reason}")


class AuthenticationError(SnowmanError):
    """The client rejected the resolved credentials or configuration."""


__all__ = [
    "SnowmanError",
    "ConfigurationError",
    "ResolutionError",
    "PrivateKeyReadError",
    "AuthenticationError",
]
