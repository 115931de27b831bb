"""
Stateless anti-forgery tokens bound to a per-session secret.

Token format: ``<salt>-<hash>`` where ``hash`` is the unpadded URL-safe
base64 digest of ``<salt>-<secret>`` (UTF-8). Verification only needs the
secret and the token.
"""
from __future__ import annotations

import asyncio
import logging
import threading
from typing import Callable, Optional

from csrf_tokens.core.config import get_settings
from csrf_tokens.crypto.digest import b64url_nopad, constant_time_equals, digest
from csrf_tokens.errors import ConfigurationError, InvalidArgumentError, RandomnessUnavailableError
from csrf_tokens.schemas.options import TokenOptions, build_options
from csrf_tokens.security.secret_source import generate_secret, random_salt

logger = logging.getLogger(__name__)

Tokenizer = Callable[[str, str], str]
SecretCallback = Callable[[Optional[BaseException], Optional[str]], None]


class Tokens:
    """
    Token codec with immutable options.

    Arguments left as None fall back to the process settings
    (``CSRF_TOKENS_*`` environment variables). ``tokenize`` replaces the
    default salted-hash derivation; if it raises during ``verify`` the token is
    rejected and the error is logged.
    """

    def __init__(
        self,
        salt_length: Optional[int] = None,
        secret_length: Optional[int] = None,
        hash_algorithm: Optional[str] = None,
        tokenize: Optional[Tokenizer] = None,
    ):
        settings = get_settings()
        self._options = build_options(
            salt_length=settings.salt_length if salt_length is None else salt_length,
            secret_length=settings.secret_length if secret_length is None else secret_length,
            hash_algorithm=settings.hash_algorithm if hash_algorithm is None else hash_algorithm,
        )
        if tokenize is not None and not callable(tokenize):
            raise ConfigurationError("option tokenize must be a function")
        self._tokenize = tokenize or self._hash_tokenize
        self._custom_tokenize = tokenize is not None

        logger.debug(
            "Token codec ready: salt_length=%d secret_length=%d hash_algorithm=%s",
            self._options.salt_length,
            self._options.secret_length,
            self._options.hash_algorithm,
        )

    @property
    def options(self) -> TokenOptions:
        return self._options

    def _hash_tokenize(self, secret: str, salt: str) -> str:
        raw = digest(self._options.hash_algorithm, salt + "-" + secret)
        return salt + "-" + b64url_nopad(raw)

    def tokenize(self, secret: str, salt: str) -> str:
        """Deterministic token for a given secret and salt."""
        return self._tokenize(secret, salt)

    def create(self, secret: str) -> str:
        """Mint a new token for ``secret`` with a fresh random salt."""
        if not isinstance(secret, str) or not secret:
            raise InvalidArgumentError("argument secret is required and must be a non-empty string")
        return self._tokenize(secret, random_salt(self._options.salt_length))

    def verify(self, secret, token) -> bool:
        """
        Check that ``token`` was derived from ``secret``.
        Returns False for any malformed input, never raises for a bad token.
        """
        if not isinstance(secret, str) or not secret:
            logger.debug("Token rejected: secret missing or not a string")
            return False
        if not isinstance(token, str):
            logger.debug("Token rejected: token missing or not a string")
            return False

        salt, sep, _ = token.partition("-")
        if not sep:
            logger.debug("Token rejected: no salt separator")
            return False

        try:
            expected = self._tokenize(secret, salt)
        except Exception:
            if not self._custom_tokenize:
                raise
            logger.warning("Token rejected: custom tokenize failed", exc_info=True)
            return False
        if not isinstance(expected, str):
            return False

        # Full-string comparison, constant time for equal lengths
        valid = constant_time_equals(token, expected)
        if not valid:
            logger.debug("Token rejected: digest mismatch")
        return valid

    def secret_sync(self) -> str:
        """Blocking secret generation. Raises RandomnessUnavailableError if the OS source fails."""
        return generate_secret(self._options.secret_length)

    def secret(self, callback: Optional[SecretCallback] = None):
        """
        Non-blocking secret generation.

        With a callback: runs on a worker thread and calls
        ``callback(error, secret)`` exactly once; returns None.
        Without: returns an awaitable resolving to the secret.
        """
        if callback is None:
            return self._secret_async()
        if not callable(callback):
            raise InvalidArgumentError("argument callback must be a function")

        worker = threading.Thread(
            target=self._secret_to_callback,
            args=(callback,),
            name="csrf-tokens-secret",
            daemon=True,
        )
        worker.start()
        return None

    def _secret_to_callback(self, callback: SecretCallback) -> None:
        try:
            value = self.secret_sync()
        except RandomnessUnavailableError as exc:
            callback(exc, None)
            return
        callback(None, value)

    async def _secret_async(self) -> str:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.secret_sync)
