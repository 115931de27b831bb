"""Rough timings for token creation, secret generation and verification."""
from __future__ import annotations

import re
import timeit

from csrf_tokens.security.tokens import Tokens

NUMBER = 10000


def _report(name: str, seconds: float) -> None:
    per_sec = NUMBER / seconds if seconds else float("inf")
    print(f"  {name:<20} {per_sec:>12,.0f} ops/sec")


def main() -> None:
    tokens = Tokens()
    secret = tokens.secret_sync()
    valid = tokens.create(secret)
    invalid = re.sub(r"[a-zA-Z]", "=", valid)

    print("  csrf_tokens\n")
    _report("create", timeit.timeit(lambda: tokens.create(secret), number=NUMBER))
    _report("secret_sync", timeit.timeit(tokens.secret_sync, number=NUMBER))
    _report("verify - valid", timeit.timeit(lambda: tokens.verify(secret, valid), number=NUMBER))
    _report("verify - invalid", timeit.timeit(lambda: tokens.verify(secret, invalid), number=NUMBER))


if __name__ == "__main__":
    main()
