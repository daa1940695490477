"""Configuration management using Pydantic Settings"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "credixai"
    log_level: str = "INFO"

    # Text generation (Gemini generateContent)
    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"),
    )
    gemini_api_base: str = "https://generativelanguage.googleapis.com"
    gemini_model: str = "gemini-2.5-flash"
    explanation_language: str = "Traditional Chinese (繁體中文)"

    # HTTP Client
    http_timeout_seconds: float = 15.0
    explanation_max_retries: int = 2
    explanation_backoff_base: float = 0.5  # Exponential backoff base in seconds

    # Presentation
    top_factor_count: int = 3
    highlight_factor_count: int = 2


settings = Settings()
