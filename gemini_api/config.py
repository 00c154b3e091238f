"""Configuration management for the client."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Client settings loaded from environment variables prefixed with GEMINI_."""

    # API Configuration
    key: str | None = Field(default=None, description="API key, read from GEMINI_KEY")
    base_api: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Generative language API base URL",
    )

    # Proxy Configuration
    proxy: str | None = Field(default=None, description="HTTP proxy URL")

    # Timeout Configuration
    timeout: int = Field(default=120, description="Request timeout in seconds")

    # Transport Configuration
    impersonate: str | None = Field(
        default=None, description="Browser fingerprint for curl_cffi, e.g. 'chrome131'"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Level used by setup_logging")

    class Config:
        env_prefix = "GEMINI_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Default settings instance
settings = Settings()
