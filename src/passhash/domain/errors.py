"""Error taxonomy for password hashing operations."""

from __future__ import annotations


class PasswordHashingError(Exception):
    """Base class for every error raised by the hashing layer."""


class EntropyFailureError(PasswordHashingError, RuntimeError):
    """Raised when the secure random source cannot produce bytes."""


class InvalidCostFactorError(PasswordHashingError, ValueError):
    """Raised when the configured cost factor is outside the accepted range."""


class PasswordTooLongError(PasswordHashingError, ValueError):
    """Raised when a password exceeds the primitive's processable length."""


class MalformedHashError(PasswordHashingError, ValueError):
    """Raised when an encoded hash cannot be parsed."""
