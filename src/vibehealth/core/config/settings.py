"""Application settings loaded from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings

# Model ids used when neither the environment nor the caller names one.
DEFAULT_GEMINI_MODEL = "gemini-3-flash-preview"
DEFAULT_ANTHROPIC_MODEL = "claude-sonnet-4-5-20250929"
DEFAULT_OPENAI_MODEL = "gpt-4o"


class Settings(BaseSettings):
    """VibeHealth lifestyle server configuration."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Server
    # Loopback by default; there is no auth layer in front of the tools.
    vibe_host: str = "127.0.0.1"
    vibe_port: int = 8003
    vibe_log_level: str = "info"
    vibe_allow_insecure_bind: bool = False

    # Inner LLM
    llm_provider: Literal["gemini", "anthropic", "openai", "mock"] = "gemini"
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_GEMINI_MODEL
    anthropic_api_key: str = ""
    anthropic_model: str = DEFAULT_ANTHROPIC_MODEL
    openai_api_key: str = ""
    openai_model: str = DEFAULT_OPENAI_MODEL

    # Insight augmentation
    insight_timeout_seconds: float = 20.0
    insight_max_tokens: int = 512
    insight_temperature: float = 0.4

    # Privacy
    default_privacy_mode: Literal["strict", "standard", "explicit"] = "standard"


def get_settings() -> Settings:
    """Create and return a Settings instance."""
    return Settings()
