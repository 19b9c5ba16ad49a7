"""Library configuration using pydantic-settings."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

ClaimNaming = Literal["organization", "group"]


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # Logging
    LOG_LEVEL: str = "INFO"

    # Claim naming for client tokens: "organization" emits organization_id /
    # organization_details, "group" emits group_id / group_details
    CLAIM_NAMING: ClaimNaming = "organization"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
