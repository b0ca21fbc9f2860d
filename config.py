"""
Centralized configuration for RevRoast
All environment variables and settings are defined here
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Read once at startup and handed to the gateway explicitly.
    """

    # ======================
    # OpenRouter Configuration
    # ======================
    OPENROUTER_API_KEY: str = Field(default="", description="OpenRouter API key")
    OPENROUTER_MODEL: str = Field(
        default="openai/gpt-4o-mini",
        description="Model identifier passed to the chat-completion API"
    )
    OPENROUTER_URL: str = Field(
        default="https://openrouter.ai/api/v1/chat/completions",
        description="Chat-completion endpoint"
    )
    APP_REFERER: str = Field(
        default="http://localhost:3000",
        description="HTTP-Referer header identifying the calling application"
    )
    APP_TITLE: str = Field(
        default="RevRoast",
        description="X-Title header identifying the calling application"
    )
    ROAST_TEMPERATURE: float = Field(default=0.7, description="Sampling temperature")
    UPSTREAM_TIMEOUT: Optional[float] = Field(
        default=None,
        description="Seconds before the upstream call is abandoned (unset = wait forever)"
    )

    # ======================
    # Response Configuration
    # ======================
    ROAST_MOCK_MODE: bool = Field(
        default=False,
        description="Return a canned roast instead of calling the upstream API"
    )
    ROAST_RESPONSE_MODE: str = Field(
        default="structured",
        description="'structured' for parsed buckets, 'raw' for the completion text"
    )
    IMPROVEMENTS_PREVIEW_LIMIT: int = Field(
        default=2,
        description="Improvements shown when pro mode is off"
    )

    # ======================
    # Logging Configuration
    # ======================
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )

    @field_validator("ROAST_RESPONSE_MODE")
    @classmethod
    def _check_response_mode(cls, value: str) -> str:
        mode = value.strip().lower()
        if mode not in ("structured", "raw"):
            raise ValueError("ROAST_RESPONSE_MODE must be 'structured' or 'raw'")
        return mode

    @property
    def raw_mode(self) -> bool:
        """True when the endpoint returns the completion text unparsed"""
        return self.ROAST_RESPONSE_MODE == "raw"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"  # Allow extra env vars in .env file


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings, built on first use"""
    return Settings()
