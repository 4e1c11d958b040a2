"""Mock LLM provider for testing and key-less local runs."""

from __future__ import annotations

import json

from vibehealth.core.llm.provider import ProviderResponse

DEFAULT_MOCK_SUGGESTIONS = [
    "Take a ten-minute walk after your largest meal of the day.",
    "Try a short wind-down routine before bed to protect your sleep.",
    "Keep a water bottle within reach while you work.",
]


class MockProvider:
    """Mock provider — returns a canned response."""

    name = "mock"

    def __init__(self, response_content: str | None = None) -> None:
        if response_content is None:
            response_content = json.dumps(DEFAULT_MOCK_SUGGESTIONS)
        self.response_content = response_content
        self.last_system_message: str = ""
        self.last_user_message: str = ""
        self.call_count: int = 0

    async def generate(
        self,
        system_message: str,
        user_message: str,
        max_tokens: int = 512,
        temperature: float = 0.4,
    ) -> ProviderResponse:
        self.last_system_message = system_message
        self.last_user_message = user_message
        self.call_count += 1
        return ProviderResponse(
            content=self.response_content,
            input_tokens=len(system_message.split()) + len(user_message.split()),
            output_tokens=len(self.response_content.split()),
            model="mock",
            latency_ms=0.0,
        )
