"""Exceptions raised while configuring or generating SSO tokens."""

from __future__ import annotations


class SSOTokenError(Exception):
    """Base class for all SSO token failures."""


class ConfigurationError(SSOTokenError, ValueError):
    """Raised when the generator is built without usable credentials."""


class ValidationError(SSOTokenError, ValueError):
    """Raised when user attributes cannot be turned into a token."""


class NotAMappingError(ValidationError):
    """Raised when user attributes are not a key-value mapping."""


class MissingGuidError(ValidationError):
    """Raised when user attributes lack a non-empty string ``guid``."""


__all__ = [
    "ConfigurationError",
    "MissingGuidError",
    "NotAMappingError",
    "SSOTokenError",
    "ValidationError",
]
