from csrf_tokens.errors import (
    ConfigurationError,
    InvalidArgumentError,
    RandomnessUnavailableError,
    TokensError,
)
from csrf_tokens.schemas.options import TokenOptions
from csrf_tokens.security.tokens import Tokens

__all__ = [
    "ConfigurationError",
    "InvalidArgumentError",
    "RandomnessUnavailableError",
    "TokenOptions",
    "Tokens",
    "TokensError",
]

__version__ = "0.1.0"
