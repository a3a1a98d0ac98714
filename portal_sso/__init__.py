"""Single sign-on token generation for the support portal."""

from portal_sso.core.errors import (
    ConfigurationError,
    MissingGuidError,
    NotAMappingError,
    SSOTokenError,
    ValidationError,
)
from portal_sso.schemas import SSOUser
from portal_sso.services import TokenGenerator

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "MissingGuidError",
    "NotAMappingError",
    "SSOTokenError",
    "SSOUser",
    "TokenGenerator",
    "ValidationError",
]
