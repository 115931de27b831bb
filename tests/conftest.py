import sys
from pathlib import Path

import pytest

# Ensure the package is importable in tests without installing it.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from csrf_tokens import Tokens  # noqa: E402
from csrf_tokens.core.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def tokens():
    return Tokens()


@pytest.fixture
def secret(tokens):
    return tokens.secret_sync()
