"""
Factory functions providing shared services built from configuration.
"""

from functools import lru_cache

from portal_sso.core.config import get_settings
from portal_sso.services import TokenGenerator


@lru_cache()
def _settings():
    """Internal helper to cache settings for service factories."""
    return get_settings()


@lru_cache()
def get_token_generator() -> TokenGenerator:
    """Provide a process-wide token generator using configured credentials."""
    settings = _settings()
    return TokenGenerator.from_settings(settings.sso)


__all__ = ["get_token_generator"]
