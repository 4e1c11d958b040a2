"""LLM provider protocol — abstract interface for inner LLM calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from vibehealth.core.config.settings import (
    DEFAULT_ANTHROPIC_MODEL,
    DEFAULT_GEMINI_MODEL,
    DEFAULT_OPENAI_MODEL,
)


@dataclass
class ProviderResponse:
    """Response from an LLM provider."""

    content: str
    input_tokens: int
    output_tokens: int
    model: str
    latency_ms: float


@runtime_checkable
class LLMProvider(Protocol):
    """Abstract interface for inner LLM calls."""

    name: str

    async def generate(
        self,
        system_message: str,
        user_message: str,
        max_tokens: int = 512,
        temperature: float = 0.4,
    ) -> ProviderResponse: ...


def create_provider(
    provider_name: str,
    api_key: str = "",
    model: str = "",
) -> LLMProvider:
    """Factory function to create an LLM provider by name.

    Args:
        provider_name: "gemini", "anthropic", "openai", or "mock"
        api_key: API key for the provider.
        model: Model identifier override.

    Returns:
        An LLMProvider instance.
    """
    if provider_name == "gemini":
        from vibehealth.core.llm.providers.gemini import GeminiProvider

        return GeminiProvider(api_key=api_key, model=model or DEFAULT_GEMINI_MODEL)
    elif provider_name == "anthropic":
        from vibehealth.core.llm.providers.anthropic import AnthropicProvider

        return AnthropicProvider(api_key=api_key, model=model or DEFAULT_ANTHROPIC_MODEL)
    elif provider_name == "openai":
        from vibehealth.core.llm.providers.openai import OpenAIProvider

        return OpenAIProvider(api_key=api_key, model=model or DEFAULT_OPENAI_MODEL)
    elif provider_name == "mock":
        from vibehealth.core.llm.providers.mock import MockProvider

        return MockProvider()
    else:
        raise ValueError(f"Unknown LLM provider: {provider_name}")
