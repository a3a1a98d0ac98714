"""Service layer exports."""

from .token_cipher import SSOTokenCipher
from .token_generator import TokenGenerator

__all__ = [
    "SSOTokenCipher",
    "TokenGenerator",
]
