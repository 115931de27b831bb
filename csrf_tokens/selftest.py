from __future__ import annotations

from csrf_tokens.security.tokens import Tokens


def main() -> None:
    tokens = Tokens()
    secret = tokens.secret_sync()

    # --- round trip ---
    token = tokens.create(secret)
    assert tokens.verify(secret, token) is True, 'Round trip failed'

    # --- tamper ---
    last = token[-1]
    tampered = token[:-1] + ('A' if last != 'A' else 'B')
    assert tokens.verify(secret, tampered) is False, 'Tampered token should fail'

    # --- other secret ---
    assert tokens.verify(tokens.secret_sync(), token) is False, 'Token should not verify under another secret'

    # --- malformed ---
    assert tokens.verify(secret, 'noseparator') is False, 'Token without separator should fail'

    print('OK: csrf token selftest passed')


if __name__ == '__main__':
    main()
