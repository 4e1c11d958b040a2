"""Google Gemini provider."""

from __future__ import annotations

import time

from vibehealth.core.config.settings import DEFAULT_GEMINI_MODEL
from vibehealth.core.llm.provider import ProviderResponse


class GeminiProvider:
    """Gemini provider using the google-generativeai SDK.

    Requests a JSON response so the suggestion array parses without fences.
    """

    name = "gemini"

    def __init__(self, api_key: str, model: str = DEFAULT_GEMINI_MODEL) -> None:
        import google.generativeai as genai

        genai.configure(api_key=api_key)
        self._genai = genai
        self.model = model

    async def generate(
        self,
        system_message: str,
        user_message: str,
        max_tokens: int = 512,
        temperature: float = 0.4,
    ) -> ProviderResponse:
        # The system instruction is bound per model instance.
        model = self._genai.GenerativeModel(self.model, system_instruction=system_message)

        start = time.monotonic()
        response = await model.generate_content_async(
            user_message,
            generation_config={
                "max_output_tokens": max_tokens,
                "temperature": temperature,
                "response_mime_type": "application/json",
            },
        )
        elapsed_ms = (time.monotonic() - start) * 1000

        usage = getattr(response, "usage_metadata", None)
        return ProviderResponse(
            content=response.text or "",
            input_tokens=getattr(usage, "prompt_token_count", 0) or 0,
            output_tokens=getattr(usage, "candidates_token_count", 0) or 0,
            model=self.model,
            latency_ms=elapsed_ms,
        )
