try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401

import base64
import hashlib
from urllib.parse import unquote

import pytest
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from portal_sso.core.errors import ConfigurationError
from portal_sso.services.token_cipher import (
    IV,
    SSOTokenCipher,
    derive_key,
    pad,
    xor_with_iv,
)


def _decrypt(token: str, *, account_id: str, shared_secret: str) -> bytes:
    key = hashlib.sha1((shared_secret + account_id).encode("utf-8")).digest()[:16]
    ciphertext = base64.b64decode(unquote(token))
    decryptor = Cipher(algorithms.AES(key), modes.CBC(IV)).decryptor()
    return decryptor.update(ciphertext) + decryptor.finalize()


def test_iv_is_openssl_for_ruby() -> None:
    assert IV == b"OpenSSL for Ruby"
    assert len(IV) == 16


def test_derive_key_truncates_sha1_of_secret_then_account() -> None:
    key = derive_key(shared_secret="secret123", account_id="acme")

    assert len(key) == 16
    assert key == hashlib.sha1(b"secret123acme").digest()[:16]
    assert key != derive_key(shared_secret="acme", account_id="secret123")


def test_xor_only_touches_first_block() -> None:
    payload = b'{"guid":"user-1"}, and then some more'

    mixed = xor_with_iv(payload)

    assert mixed[0] == 0x34  # '{' ^ 'O'
    assert mixed[16:] == payload[16:]
    assert mixed[:16] != payload[:16]
    assert xor_with_iv(mixed) == payload


def test_xor_on_short_payload_changes_existing_bytes_only() -> None:
    assert xor_with_iv(b"abc") == bytes([0x2E, 0x12, 0x06])
    assert xor_with_iv(b"") == b""


@pytest.mark.parametrize(
    ("length", "expected_pad"),
    [(0, 16), (1, 15), (15, 1), (16, 16), (17, 15), (31, 1), (32, 16)],
)
def test_pad_length(length: int, expected_pad: int) -> None:
    padded = pad(b"x" * length)

    assert len(padded) % 16 == 0
    assert len(padded) == length + expected_pad
    assert padded[length:] == bytes([expected_pad]) * expected_pad


def test_cipher_output_decrypts_to_padded_xored_payload() -> None:
    cipher = SSOTokenCipher(account_id="acme", shared_secret="secret123")
    payload = '{"guid":"user-1","email":"jane@example.com"}'.encode("utf-8")

    token = cipher.encrypt(payload)
    plaintext = _decrypt(token, account_id="acme", shared_secret="secret123")

    pad_len = plaintext[-1]
    assert plaintext[-pad_len:] == bytes([pad_len]) * pad_len
    assert xor_with_iv(plaintext[:-pad_len]) == payload


def test_cipher_token_is_percent_encoded_base64() -> None:
    cipher = SSOTokenCipher(account_id="acme", shared_secret="secret123")

    token = cipher.encrypt(b'{"guid":"user-1"}')

    assert "+" not in token
    assert "/" not in token
    assert "=" not in token
    assert len(base64.b64decode(unquote(token))) == 32


@pytest.mark.parametrize(
    ("account_id", "shared_secret"),
    [("", "secret"), ("acme", "")],
)
def test_cipher_requires_credentials(account_id: str, shared_secret: str) -> None:
    with pytest.raises(ConfigurationError):
        SSOTokenCipher(account_id=account_id, shared_secret=shared_secret)
