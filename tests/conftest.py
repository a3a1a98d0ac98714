"""Pytest configuration shared across the suite."""

import pytest

try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401

from portal_sso.services import TokenGenerator


@pytest.fixture
def generator() -> TokenGenerator:
    """Generator with the credentials used by the pinned token vector."""
    return TokenGenerator("acme", "secret123")
