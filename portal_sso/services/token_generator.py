"""Create single sign-on tokens for the support portal."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, Union

from portal_sso.core.errors import (
    MissingGuidError,
    NotAMappingError,
    ValidationError,
)
from portal_sso.schemas import SSOUser
from portal_sso.services.token_cipher import SSOTokenCipher

if TYPE_CHECKING:
    from portal_sso.core.config import SSOSettings

logger = logging.getLogger(__name__)

EXPIRES_FORMAT = "%Y-%m-%d %H:%M:%S"

UserAttributes = Union[Mapping[str, Any], SSOUser]


def _default_json_serializer(value: Any) -> Any:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.strftime(EXPIRES_FORMAT)
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Type {type(value)!r} not serializable")


def serialize_attributes(attributes: Mapping[str, Any]) -> bytes:
    """Serialize attributes to compact JSON, preserving key order, as UTF-8."""
    try:
        serialized = json.dumps(
            attributes,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
            default=_default_json_serializer,
        )
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"User attributes are not serializable: {exc}") from exc
    return serialized.encode("utf-8")


class TokenGenerator:
    """Holds portal credentials and default attributes, and issues tokens."""

    def __init__(self, account_id: str, shared_secret: str) -> None:
        # raises ConfigurationError when either credential is missing
        self._cipher = SSOTokenCipher(account_id=account_id, shared_secret=shared_secret)
        self._account_id = account_id
        self._shared_secret = shared_secret
        self._defaults: Dict[str, Any] = {}

    @classmethod
    def from_settings(cls, settings: "SSOSettings") -> "TokenGenerator":
        """Build a generator from configured credentials and default attributes."""
        generator = cls(settings.account_id, settings.shared_secret.get_secret_value())
        if settings.default_attributes:
            generator.merge_defaults(settings.default_attributes)
        return generator

    @property
    def account_id(self) -> str:
        return self._account_id

    @property
    def shared_secret(self) -> str:
        return self._shared_secret

    @property
    def defaults(self) -> Dict[str, Any]:
        """Copy of the attributes applied to every token."""
        return dict(self._defaults)

    def set_default(self, key: str, value: Any) -> None:
        """Set a single default attribute, replacing any earlier value."""
        self._defaults[key] = value

    def merge_defaults(self, attributes: Mapping[str, Any]) -> None:
        """Shallow-merge ``attributes`` into the stored defaults."""
        if not isinstance(attributes, Mapping):
            raise NotAMappingError("Default attributes must be a mapping.")
        self._defaults.update(attributes)

    def create_token(self, user: UserAttributes) -> str:
        """Return a URL-safe SSO token for ``user``.

        Attributes supplied for the user take precedence over stored defaults.
        Raises ``NotAMappingError`` or ``MissingGuidError`` before anything is
        encrypted.
        """
        attributes = self._merged_attributes(user)
        payload = serialize_attributes(attributes)
        token = self._cipher.encrypt(payload)
        logger.debug(
            "Created SSO token for guid=%s (%d payload bytes)",
            attributes["guid"],
            len(payload),
        )
        return token

    def _merged_attributes(self, user: UserAttributes) -> Dict[str, Any]:
        if isinstance(user, SSOUser):
            supplied = user.to_attributes()
        elif isinstance(user, Mapping):
            supplied = dict(user)
        else:
            raise NotAMappingError(
                f"User attributes must be a mapping, got {type(user).__name__}."
            )

        guid = supplied.get("guid")
        if not isinstance(guid, str) or not guid:
            raise MissingGuidError("User attributes did not have a non-empty string guid.")

        merged = dict(supplied)
        for key, value in self._defaults.items():
            merged.setdefault(key, value)
        return merged


__all__ = ["TokenGenerator", "UserAttributes", "serialize_attributes"]
