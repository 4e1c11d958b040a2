"""OpenAI GPT provider."""

from __future__ import annotations

import logging
import time

from vibehealth.core.config.settings import DEFAULT_OPENAI_MODEL
from vibehealth.core.llm.provider import ProviderResponse

logger = logging.getLogger(__name__)

# JSON mode only yields objects, so the array travels under one key.
# parse_suggestions unwraps it.
JSON_OBJECT_INSTRUCTION = (
    'Respond with a JSON object of the form {"suggestions": [...]} whose '
    "array holds the suggestions."
)


class OpenAIProvider:
    """OpenAI provider using the OpenAI SDK in JSON mode."""

    name = "openai"

    def __init__(self, api_key: str, model: str = DEFAULT_OPENAI_MODEL) -> None:
        import openai

        self.client = openai.AsyncOpenAI(api_key=api_key)
        self.model = model

    async def generate(
        self,
        system_message: str,
        user_message: str,
        max_tokens: int = 512,
        temperature: float = 0.4,
    ) -> ProviderResponse:
        start = time.monotonic()
        response = await self.client.chat.completions.create(
            model=self.model,
            max_completion_tokens=max_tokens,
            temperature=temperature,
            response_format={"type": "json_object"},
            messages=[
                {"role": "system", "content": f"{system_message}\n\n{JSON_OBJECT_INSTRUCTION}"},
                {"role": "user", "content": user_message},
            ],
        )
        elapsed_ms = (time.monotonic() - start) * 1000

        if not response.choices:
            content = ""
        else:
            choice = response.choices[0]
            if choice.finish_reason == "length":
                logger.warning("GPT reply hit max_tokens=%d; JSON may be cut off", max_tokens)
            content = choice.message.content or ""

        usage = response.usage
        return ProviderResponse(
            content=content,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
            model=self.model,
            latency_ms=elapsed_ms,
        )
