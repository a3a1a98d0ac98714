"""Expose factory helpers for shared services."""

from .services import get_token_generator

__all__ = ["get_token_generator"]
