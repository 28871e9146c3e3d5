"""Configuration management using pydantic-settings."""

from pathlib import Path
from typing import Literal, get_args

from pydantic_settings import BaseSettings, SettingsConfigDict

ContentType = Literal["youtube", "linkedin", "twitter", "instagram", "tiktok", "keywords"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

CONTENT_TYPES: tuple[str, ...] = get_args(ContentType)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Backend credentials (an empty key disables the backend)
    google_gemini_api_key: str = ""  # https://aistudio.google.com/
    anthropic_api_key: str = ""  # https://console.anthropic.com/

    # Model trial order per backend, most preferred first (comma-separated)
    gemini_models: str = "gemini-2.5-pro,gemini-2.5-flash"
    anthropic_models: str = "claude-sonnet-4-5,claude-3-5-haiku-latest"

    # LLM Configuration
    llm_temperature: float = 0.7
    llm_max_output_tokens: int = 4096
    llm_timeout_seconds: float = 60.0  # Per model attempt

    # Logging
    log_level: LogLevel = "INFO"
    log_file: str = ""  # Empty = console only

    # Defaults
    default_content_type: ContentType = "youtube"

    @staticmethod
    def _split_csv(value: str) -> list[str]:
        """Split a comma-separated string into a trimmed list."""
        return [item.strip() for item in value.split(",") if item.strip()]

    @property
    def gemini_models_list(self) -> list[str]:
        """Get Gemini models as a list, in trial order."""
        return self._split_csv(self.gemini_models)

    @property
    def anthropic_models_list(self) -> list[str]:
        """Get Anthropic models as a list, in trial order."""
        return self._split_csv(self.anthropic_models)

    @property
    def log_file_path(self) -> Path | None:
        """Get the log file path, if file logging is enabled."""
        return Path(self.log_file) if self.log_file else None


# Global settings instance
settings = Settings()
