"""LLM provider implementations."""

from vibehealth.core.llm.providers.anthropic import AnthropicProvider
from vibehealth.core.llm.providers.gemini import GeminiProvider
from vibehealth.core.llm.providers.mock import MockProvider
from vibehealth.core.llm.providers.openai import OpenAIProvider

__all__ = ["AnthropicProvider", "GeminiProvider", "MockProvider", "OpenAIProvider"]
