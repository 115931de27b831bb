"""Exception types raised by csrf_tokens."""


class TokensError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(TokensError, ValueError):
    """Invalid construction options. Raised from the constructor, never later."""


class InvalidArgumentError(TokensError, TypeError):
    """Bad call-time argument to ``create`` or ``secret``."""


class RandomnessUnavailableError(TokensError, RuntimeError):
    """The OS entropy source failed. There is no fallback for secret material."""
