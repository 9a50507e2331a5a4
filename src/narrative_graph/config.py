"""Configuration management for Narrative Graph."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Extraction thresholds, loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="NG_",
    )

    # Context samples
    max_context_samples: int = Field(default=5, ge=0, le=5, description="Context sentences kept per entity")
    min_context_length: int = Field(default=15, ge=0, description="Shortest sentence stored as context")

    # Characters
    min_character_count: int = Field(default=2, ge=1, description="Frequency floor for characters")
    introduction_threshold: int = Field(default=2, ge=1, description="Hits needed from introduction verbs alone")
    corroborate_mentions: bool = Field(
        default=True, description="Raise character counts to their capitalized mention count"
    )
    max_name_length: int = Field(default=30, ge=2)

    # Relationships
    min_relationship_strength: int = Field(default=2, ge=1, description="Shared sentences needed for an edge")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
