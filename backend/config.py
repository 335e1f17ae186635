"""
backend.config – application settings.

Values come from the environment and an optional ``.env`` file in the
working directory.  Nothing here is required: a missing API key disables
AI features, missing storage credentials disable the remote stores.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
OPENAI_BASE_URL = "https://api.openai.com/v1"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "RightsCard"
    app_version: str = "1.0.0"
    log_level: str = Field(default="INFO", description="Root logging level")
    allowed_origins: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)",
    )

    # Generation service
    openrouter_api_key: str | None = Field(default=None, description="OpenRouter API key")
    openai_api_key: str | None = Field(default=None, description="OpenAI API key")
    ai_model: str = Field(default="google/gemini-2.0-flash-001", description="Chat model identifier")
    ai_base_url: str | None = Field(default=None, description="Override for the chat-completions base URL")
    ai_timeout_seconds: float = Field(default=20.0, gt=0, description="Per-request timeout")

    # Row storage (Supabase)
    supabase_url: str | None = Field(default=None)
    supabase_anon_key: str | None = Field(default=None)

    # Content-addressed storage (Pinata / IPFS)
    pinata_api_key: str | None = Field(default=None)
    pinata_secret_api_key: str | None = Field(default=None)

    @property
    def ai_api_key(self) -> str | None:
        """OpenRouter wins over OpenAI when both are set."""
        return self.openrouter_api_key or self.openai_api_key or None

    @property
    def ai_enabled(self) -> bool:
        return bool(self.ai_api_key)

    @property
    def ai_endpoint(self) -> str:
        if self.ai_base_url:
            return self.ai_base_url.rstrip("/")
        return OPENROUTER_BASE_URL if self.openrouter_api_key else OPENAI_BASE_URL

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
