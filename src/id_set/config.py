"""
Configuration management for id_set.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IdSetConfig(BaseSettings):
    """Runtime configuration."""

    log_level: str = Field(default="INFO", description="Logging level")
    verify_cardinality: bool = Field(
        default=False,
        description=(
            "Recount set bits after bulk mutations and raise if the cached "
            "cardinality disagrees. Slow; meant for debugging."
        ),
    )

    model_config = SettingsConfigDict(
        env_prefix="IDSET_", env_file=".env", env_file_encoding="utf-8"
    )


# Global config instance
_config: Optional[IdSetConfig] = None


def get_config() -> IdSetConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = IdSetConfig()
    return _config


def reset_config() -> None:
    """Reset the global configuration (mainly for testing)."""
    global _config
    _config = None
