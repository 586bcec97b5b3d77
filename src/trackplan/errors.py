"""Exception types."""

from __future__ import annotations


class TrackplanError(Exception):
    """Base class for all trackplan errors."""


class InvalidTalkError(TrackplanError, ValueError):
    """Raised when a talk is constructed with a bad title or duration."""


class ConfigError(TrackplanError, ValueError):
    """Raised for an inconsistent session window table."""


class CatalogError(TrackplanError, ValueError):
    """Raised when a talk catalog cannot be parsed."""


class InvariantViolationError(TrackplanError, RuntimeError):
    """Raised when a track exceeds its session capacity."""
