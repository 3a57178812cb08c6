"""Application settings using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class Settings(BaseSettings):
    """Application configuration settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # OpenAI Configuration
    openai_api_key: SecretStr | None = Field(default=None, description="OpenAI API Key")
    openai_model: str = Field(default="gpt-3.5-turbo", description="OpenAI model name")

    # Gemini Configuration (form filling)
    gemini_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("gemini_api_key", "google_api_key"),
        description="Gemini API Key",
    )
    gemini_model: str = Field(default="gemini-1.5-flash", description="Gemini model name")

    temperature: float = Field(default=0.3, ge=0.0, le=2.0)

    # LangSmith Configuration
    langchain_tracing_v2: bool = Field(default=False)
    langchain_api_key: SecretStr | None = Field(default=None)
    langchain_project: str = Field(default="rfp-assistant")

    # Application Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_json: bool = Field(default=False)
    environment: Literal["development", "staging", "production", "test"] = Field(
        default="development"
    )

    # Web page fetching
    fetch_timeout_seconds: float = Field(default=10.0, gt=0.0)
    fetch_user_agent: str = Field(default=DEFAULT_USER_AGENT)

    # Upload limits
    max_upload_bytes: int = Field(default=10 * 1024 * 1024, ge=1)
    max_upload_files: int = Field(default=10, ge=1)

    # Extraction
    extraction_workers: int = Field(default=1, ge=1, le=16)

    # Form field catalog override (defaults to the packaged catalog)
    form_field_catalog_path: Path | None = Field(default=None)

    @field_validator("openai_api_key", "gemini_api_key", "langchain_api_key", mode="before")
    @classmethod
    def _blank_key_is_absent(cls, value: object) -> object:
        """Treat an empty credential as not configured."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
