"""Symmetric encryption of SSO payloads in the format the portal decrypts.

The portal expects AES-128-CBC with a fixed IV (the ASCII bytes of
``"OpenSSL for Ruby"``). The first block of the plaintext is additionally
XOR'd with that IV before encryption. Reusing the IV for every token means
identical payloads always yield identical ciphertext; the portal decrypts with
this IV, so it cannot be randomized here.

Every step works on UTF-8 encoded ``bytes``. Padding is therefore computed on
the byte length, which matters once attributes contain multi-byte characters.
"""

from __future__ import annotations

import base64
import hashlib
from urllib.parse import quote

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from portal_sso.core.errors import ConfigurationError

BLOCK_SIZE = 16
KEY_SIZE = 16
IV = b"OpenSSL for Ruby"


def derive_key(*, shared_secret: str, account_id: str) -> bytes:
    """Return the first 16 bytes of SHA-1 over ``shared_secret + account_id``."""
    digest = hashlib.sha1((shared_secret + account_id).encode("utf-8")).digest()
    return digest[:KEY_SIZE]


def xor_with_iv(payload: bytes) -> bytes:
    """XOR the leading block of ``payload`` with the IV.

    Payloads shorter than one block only have their existing bytes changed.
    """
    head = bytes(b ^ iv for b, iv in zip(payload[:BLOCK_SIZE], IV))
    return head + payload[BLOCK_SIZE:]


def pad(payload: bytes) -> bytes:
    """Append ``n`` bytes of value ``n`` so the length is a multiple of 16.

    A payload already aligned to the block size gets a full block of padding.
    """
    pad_len = BLOCK_SIZE - len(payload) % BLOCK_SIZE
    return payload + bytes([pad_len]) * pad_len


class SSOTokenCipher:
    """Encrypt serialized user attributes into a URL-safe portal token."""

    def __init__(self, *, account_id: str, shared_secret: str) -> None:
        if not account_id:
            raise ConfigurationError("Portal account id must be provided.")
        if not shared_secret:
            raise ConfigurationError("SSO shared secret must be provided.")
        self._key = derive_key(shared_secret=shared_secret, account_id=account_id)

    def encrypt(self, payload: bytes) -> str:
        """Encrypt a UTF-8 payload and return the percent-encoded base64 token."""
        plaintext = pad(xor_with_iv(payload))
        encryptor = Cipher(algorithms.AES(self._key), modes.CBC(IV)).encryptor()
        ciphertext = encryptor.update(plaintext) + encryptor.finalize()
        encoded = base64.b64encode(ciphertext).decode("ascii")
        return quote(encoded, safe="")


__all__ = [
    "BLOCK_SIZE",
    "IV",
    "KEY_SIZE",
    "SSOTokenCipher",
    "derive_key",
    "pad",
    "xor_with_iv",
]
