"""Package settings using Pydantic Settings.

Settings are loaded from environment variables prefixed with
``JSON_NORMALIZE_``. The library needs no configuration to work; the only
knob is the digest algorithm used when callers do not name one.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from json_normalize.kernel.hash_utils import resolve_algorithm


class NormalizeSettings(BaseSettings):
    """Settings with type validation, read from the environment."""

    model_config = SettingsConfigDict(env_prefix="JSON_NORMALIZE_", extra="ignore")

    default_algorithm: str = "md5"

    @field_validator("default_algorithm")
    @classmethod
    def validate_default_algorithm(cls, v: str) -> str:
        """Normalize the algorithm name and reject ones hashlib cannot digest."""
        return resolve_algorithm(v)


@lru_cache
def get_settings() -> NormalizeSettings:
    """Return the cached settings instance (``get_settings.cache_clear()`` reloads)."""
    return NormalizeSettings()
