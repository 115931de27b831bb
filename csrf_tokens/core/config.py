from functools import lru_cache

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from csrf_tokens.errors import ConfigurationError


class Settings(BaseSettings):
    salt_length: int = 8
    secret_length: int = 18
    hash_algorithm: str = "sha1"

    # Header checked by the middleware
    header_name: str = "X-CSRF-Token"

    model_config = SettingsConfigDict(
        env_prefix="CSRF_TOKENS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Load settings on first use. Call ``get_settings.cache_clear()`` to reread the environment."""
    try:
        return Settings()
    except ValidationError as exc:
        err = exc.errors()[0]
        option = str(err["loc"][0]) if err["loc"] else "settings"
        raise ConfigurationError(
            f"option {option} from environment CSRF_TOKENS_{option.upper()}: {err['msg']} (got {err.get('input')!r})"
        ) from exc
