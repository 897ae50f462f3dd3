"""Error taxonomy shared by the feedback design layers."""

from __future__ import annotations


class FeedbackDesignError(Exception):
    """Base class for every error raised while designing a feedback divider."""


class ConfigurationError(FeedbackDesignError):
    """Raised when the catalog or a device formula cannot support a search."""


class InvalidInputError(FeedbackDesignError, ValueError):
    """Raised when caller-supplied targets are non-finite or non-positive."""


class DeviceNotSupportedError(FeedbackDesignError, LookupError):
    """Raised when the registry cannot resolve a device identifier."""
