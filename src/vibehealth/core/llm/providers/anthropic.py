"""Anthropic Claude provider."""

from __future__ import annotations

import logging
import time

from vibehealth.core.config.settings import DEFAULT_ANTHROPIC_MODEL
from vibehealth.core.llm.provider import ProviderResponse

logger = logging.getLogger(__name__)

# Claude has no JSON response mode; opening the assistant turn with "[" pins
# the reply to the suggestion array the scaffolds ask for.
ARRAY_PREFILL = "["


class AnthropicProvider:
    """Claude provider using the Anthropic SDK, prefilled for a JSON array."""

    name = "anthropic"

    def __init__(self, api_key: str, model: str = DEFAULT_ANTHROPIC_MODEL) -> None:
        import anthropic

        self.client = anthropic.AsyncAnthropic(api_key=api_key)
        self.model = model

    async def generate(
        self,
        system_message: str,
        user_message: str,
        max_tokens: int = 512,
        temperature: float = 0.4,
    ) -> ProviderResponse:
        start = time.monotonic()
        response = await self.client.messages.create(
            model=self.model,
            max_tokens=max_tokens,
            temperature=temperature,
            system=system_message,
            messages=[
                {"role": "user", "content": user_message},
                {"role": "assistant", "content": ARRAY_PREFILL},
            ],
        )
        elapsed_ms = (time.monotonic() - start) * 1000

        if response.stop_reason == "max_tokens":
            logger.warning("Claude reply hit max_tokens=%d; array may be cut off", max_tokens)

        # The prefill is not echoed back, so the array has to be re-opened.
        text = "".join(
            block.text for block in response.content if getattr(block, "type", "") == "text"
        )
        return ProviderResponse(
            content=ARRAY_PREFILL + text,
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
            model=self.model,
            latency_ms=elapsed_ms,
        )
