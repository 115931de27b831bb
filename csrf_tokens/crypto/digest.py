# csrf_tokens/crypto/digest.py
from __future__ import annotations

import base64
import hashlib
import hmac

DEFAULT_HASH_ALGORITHM = "sha1"


def is_supported_algorithm(name: str) -> bool:
    """True when hashlib can build ``name`` and it has a fixed digest size.

    SHAKE variants report a digest size of 0 and need an explicit output
    length, so they are not usable here.
    """
    try:
        h = hashlib.new(name)
    except (ValueError, TypeError):
        return False
    return h.digest_size > 0


def digest(algorithm: str, data: str) -> bytes:
    h = hashlib.new(algorithm)
    h.update(data.encode("utf-8", "surrogatepass"))
    return h.digest()


def b64url_nopad(raw: bytes) -> str:
    # standard base64, then + -> -, / -> _, padding stripped
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def constant_time_equals(a: str, b: str) -> bool:
    """Compare two strings without an early exit on the first differing byte.

    Both sides are encoded to UTF-8 first: ``hmac.compare_digest`` refuses
    non-ASCII ``str`` input.
    """
    return hmac.compare_digest(
        a.encode("utf-8", "surrogatepass"),
        b.encode("utf-8", "surrogatepass"),
    )
