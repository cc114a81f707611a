"""Application configuration using Pydantic Settings.

Reads configuration from environment variables (prefixed ``REGISTRY_``)
with sensible defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REGISTRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Application
    # =========================================================================
    environment: Literal["prod", "staging", "dev"] = Field(
        default="dev",
        description="Environment name",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    # =========================================================================
    # Registry
    # =========================================================================
    max_products: int = Field(
        default=10000,
        ge=0,
        description="Capacity ceiling for product ids",
    )
    creation_fee: int = Field(
        default=500,
        description="Fee charged per product creation, paid to the authority",
    )
    null_identity: str = Field(
        default="SP000000000000000000002Q6VF78",
        description="Reserved burn identity that can never become the authority",
    )

    # =========================================================================
    # Collaborators
    # =========================================================================
    verified_authorities: list[str] = Field(
        default_factory=lambda: ["ST1TEST"],
        description="Identities the in-process verifier accepts as creators",
    )
    clock_mode: Literal["block", "wall"] = Field(
        default="block",
        description="block: manual block-height clock, wall: Unix seconds",
    )
    initial_block_height: int = Field(
        default=0,
        ge=0,
        description="Starting height for the block clock",
    )

    # =========================================================================
    # Logging
    # =========================================================================
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_json: bool = Field(
        default=True,
        description="Output logs as JSON",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Singleton instance for convenience
settings = get_settings()
