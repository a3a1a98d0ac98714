"""Public schema exports."""

from .user import SSOUser

__all__ = ["SSOUser"]
