"""
Secret and salt generation backed by the OS CSPRNG.

Secrets are the long-lived per-session values; salts only need to be unique,
but they come from the same source anyway.
"""
from __future__ import annotations

import logging
import secrets
import string

from csrf_tokens.crypto.digest import b64url_nopad
from csrf_tokens.errors import RandomnessUnavailableError

logger = logging.getLogger(__name__)

SALT_ALPHABET = string.ascii_letters + string.digits


def random_bytes(length: int) -> bytes:
    try:
        return secrets.token_bytes(length)
    except (OSError, NotImplementedError) as exc:
        logger.error("OS entropy source failed: %s", exc)
        raise RandomnessUnavailableError("secure random source unavailable") from exc


def generate_secret(length: int) -> str:
    """Return ``length`` random bytes as unpadded URL-safe base64."""
    return b64url_nopad(random_bytes(length))


def random_salt(length: int) -> str:
    try:
        return "".join(secrets.choice(SALT_ALPHABET) for _ in range(length))
    except (OSError, NotImplementedError) as exc:
        logger.error("OS entropy source failed: %s", exc)
        raise RandomnessUnavailableError("secure random source unavailable") from exc
