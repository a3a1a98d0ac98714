"""Print a single sign-on token for a user, using the configured credentials.

Credentials come from ``SSO_ACCOUNT_ID`` and ``SSO_SHARED_SECRET`` in the
environment or in the supplied ``.env`` file. Extra attributes are given as
``key=value`` pairs; values are parsed as JSON when possible so booleans,
numbers and lists keep their type.

Example usage::

    python -m scripts.create_token --guid 42 \
        --attr email=jane@example.com --attr trusted=true
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError as SettingsValidationError

from portal_sso.core.config import AppSettings, _load_env_file
from portal_sso.core.errors import ConfigurationError, ValidationError
from portal_sso.core.logging import configure_logging
from portal_sso.services import TokenGenerator

EXIT_OK = 0
EXIT_CONFIGURATION_ERROR = 2
EXIT_VALIDATION_ERROR = 3

logger = logging.getLogger(__name__)


def _parse_attribute(raw: str) -> tuple[str, Any]:
    key, sep, value = raw.partition("=")
    key = key.strip()
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"Expected key=value, got {raw!r}.")
    try:
        return key, json.loads(value)
    except json.JSONDecodeError:
        return key, value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Create a single sign-on token for the support portal."
    )
    parser.add_argument("--guid", required=True, help="Unique identifier of the user.")
    parser.add_argument(
        "--attr",
        dest="attributes",
        action="append",
        default=[],
        type=_parse_attribute,
        metavar="KEY=VALUE",
        help="Additional user attribute; may be repeated.",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        type=Path,
        help="Path to the environment file (default: .env in the working directory).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    _load_env_file(str(args.env_file))
    try:
        settings = AppSettings()  # type: ignore[call-arg]
        configure_logging(settings.log_level, stream=sys.stderr)
        generator = TokenGenerator.from_settings(settings.sso)
    except SettingsValidationError as exc:
        print(
            "Settings validation failed. Missing or invalid values detected:\n"
            f"{exc.json(indent=2)}",
            file=sys.stderr,
        )
        return EXIT_CONFIGURATION_ERROR
    except ConfigurationError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_CONFIGURATION_ERROR

    user: Dict[str, Any] = dict(args.attributes)
    user["guid"] = args.guid
    try:
        token = generator.create_token(user)
    except ValidationError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    print(token)
    logger.debug("Issued token for account %s", generator.account_id)
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - script entry point
    sys.exit(main())
