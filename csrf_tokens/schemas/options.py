from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from csrf_tokens.crypto.digest import is_supported_algorithm
from csrf_tokens.errors import ConfigurationError


_OPTION_MESSAGES = {
    "salt_length": "must be a finite integer >= 1",
    "secret_length": "must be a finite integer >= 1",
    "hash_algorithm": "must be a non-empty name of a supported hash algorithm",
}


class TokenOptions(BaseModel):
    # strict: "8", 8.0, True and NaN are rejected instead of coerced
    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    salt_length: int = Field(default=8, ge=1)
    secret_length: int = Field(default=18, ge=1)
    hash_algorithm: str = Field(default="sha1", min_length=1)

    @field_validator("hash_algorithm")
    @classmethod
    def _algorithm_supported(cls, v: str) -> str:
        if not is_supported_algorithm(v):
            raise ValueError(f"unsupported hash algorithm {v!r}")
        return v


def build_options(**values) -> TokenOptions:
    """Validate ``values`` into TokenOptions, raising ConfigurationError on the first bad option."""
    try:
        return TokenOptions(**values)
    except ValidationError as exc:
        err = exc.errors()[0]
        option = str(err["loc"][0]) if err["loc"] else "options"
        detail = _OPTION_MESSAGES.get(option, err["msg"])
        raise ConfigurationError(f"option {option} {detail} (got {err.get('input')!r})") from exc
