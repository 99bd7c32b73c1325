"""Validator configuration via environment variables."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings

from failsafe.validators.models import ValidatorConfig


class Settings(BaseSettings):
    """Settings loaded from FAILSAFE_* environment variables or a .env file."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Override policy
    ALLOW_OVERRIDE: bool = False

    # Privileged modules the host explicitly permits (e.g. ["fs", "os"])
    ALLOWED_MODULES: list[str] = []

    model_config = {
        "env_prefix": "FAILSAFE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()


def load_validator_config(settings: Optional[Settings] = None) -> ValidatorConfig:
    """Build the immutable per-call validator config from settings."""
    settings = settings or get_settings()
    return ValidatorConfig(
        allow_override=settings.ALLOW_OVERRIDE,
        allowed_modules=frozenset(m.strip() for m in settings.ALLOWED_MODULES if m.strip()),
    )
