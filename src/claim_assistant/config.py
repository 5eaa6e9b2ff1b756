"""
Runtime configuration for the Smart Claim Assistant.
Values come from CLAIM_ASSISTANT_* environment variables or a .env file.
"""

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="CLAIM_ASSISTANT_",
        env_file=".env",
        extra="ignore",
    )

    # Chat completion service; scripted replies are used when no key is set
    cohere_api_key: SecretStr | None = None
    cohere_api_url: str = "https://api.cohere.ai/v1/chat"
    cohere_model: str = "command-r-plus"
    chat_temperature: float = Field(default=0.5, ge=0, le=1)
    request_timeout: float = Field(default=30.0, gt=0)

    # Fixed seed makes the cosmetic image scores reproducible
    image_feature_seed: int | None = None

    log_level: str = "INFO"
    log_file: str | None = None

    redact_exports: bool = False

    @property
    def chat_enabled(self) -> bool:
        return self.cohere_api_key is not None and bool(
            self.cohere_api_key.get_secret_value().strip()
        )


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings instance."""
    return Settings()
