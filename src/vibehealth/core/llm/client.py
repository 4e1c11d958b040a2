"""Inner LLM client — the bridge between scaffolds and LLM calls."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from vibehealth.core.llm.provider import LLMProvider, ProviderResponse
from vibehealth.core.llm.response import (
    check_guardrails,
    parse_suggestions,
    sanitize_suggestions,
)
from vibehealth.core.llm.system_prompt import build_full_system_prompt
from vibehealth.core.scaffold.models import AssembledPrompt, Scaffold

logger = logging.getLogger(__name__)


@dataclass
class LLMResponse:
    """Structured response from the inner LLM."""

    suggestions: list[str]
    raw_content: str
    scaffold_id: str
    scaffold_version: str
    guardrail_flags: list[str] = field(default_factory=list)
    usage: dict[str, int] = field(default_factory=dict)


class InnerLLMClient:
    """Invokes the inner LLM with scaffold-assembled prompts."""

    def __init__(
        self,
        provider: LLMProvider,
        max_tokens: int = 512,
        temperature: float = 0.4,
    ) -> None:
        self.provider = provider
        self.max_tokens = max_tokens
        self.temperature = temperature

    @property
    def provider_name(self) -> str:
        return getattr(self.provider, "name", type(self.provider).__name__)

    async def invoke(self, assembled_prompt: AssembledPrompt, scaffold: Scaffold) -> LLMResponse:
        """Call the inner LLM and return guardrail-filtered suggestions.

        Raises ResponseParseError when the output is not a JSON string array.
        Provider errors propagate to the caller.
        """
        full_system = build_full_system_prompt(assembled_prompt.system_message)

        provider_response: ProviderResponse = await self.provider.generate(
            system_message=full_system,
            user_message=assembled_prompt.user_message,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )

        logger.info(
            "Inner LLM call: scaffold=%s, model=%s, tokens=%d+%d, latency=%.0fms",
            scaffold.id,
            provider_response.model,
            provider_response.input_tokens,
            provider_response.output_tokens,
            provider_response.latency_ms,
        )

        suggestions = parse_suggestions(provider_response.content)
        guardrail_check = check_guardrails(suggestions, scaffold)
        kept = sanitize_suggestions(suggestions, guardrail_check)
        if not guardrail_check.passed:
            logger.warning(
                "Guardrails enforced on scaffold %s: %d of %d suggestions removed",
                scaffold.id,
                len(suggestions) - len(kept),
                len(suggestions),
            )

        return LLMResponse(
            suggestions=kept[: scaffold.output_calibration.item_count],
            raw_content=provider_response.content,
            scaffold_id=scaffold.id,
            scaffold_version=scaffold.version,
            guardrail_flags=guardrail_check.flags,
            usage={
                "input_tokens": provider_response.input_tokens,
                "output_tokens": provider_response.output_tokens,
            },
        )
