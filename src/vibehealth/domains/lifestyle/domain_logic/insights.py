"""Insight augmentation: short lifestyle suggestions from the inner LLM.

``fetch_insights`` always returns exactly three non-empty suggestions. Any
failure of the LLM round-trip degrades to ``FALLBACK_SUGGESTIONS`` and is
never surfaced as a scoring failure.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from vibehealth.core.privacy.policy import PrivacyMode, build_llm_data_context

if TYPE_CHECKING:
    from vibehealth.core.llm.client import InnerLLMClient
    from vibehealth.core.scaffold.engine import ScaffoldEngine
    from vibehealth.domains.lifestyle.domain_logic.risk_models import (
        LifestyleProfile,
        RiskTier,
    )

logger = logging.getLogger(__name__)

SUGGESTION_COUNT = 3

FALLBACK_SUGGESTIONS: tuple[str, ...] = (
    "Consider integrating small periods of movement into your daily routine.",
    "Mindful breathing techniques could help balance daily stress spikes.",
    "Maintaining consistent hydration supports overall metabolic energy.",
)


@dataclass
class InsightResult:
    suggestions: list[str]
    source: str                     # 'llm' | 'fallback'
    scaffold_id: str | None = None
    guardrail_flags: list[str] = field(default_factory=list)


def _fallback() -> InsightResult:
    return InsightResult(suggestions=list(FALLBACK_SUGGESTIONS), source="fallback")


def _top_up(suggestions: list[str]) -> list[str]:
    """Drop repeats, then pad to SUGGESTION_COUNT with unused fallback entries."""
    result: list[str] = []
    seen: set[str] = set()
    for text in (*suggestions, *FALLBACK_SUGGESTIONS):
        if len(result) >= SUGGESTION_COUNT:
            break
        key = text.casefold()
        if key not in seen:
            seen.add(key)
            result.append(text)
    return result


async def fetch_insights(
    profile: LifestyleProfile,
    bmi: float,
    risk_tier: RiskTier,
    *,
    engine: ScaffoldEngine,
    llm_client: InnerLLMClient,
    privacy_mode: PrivacyMode = "standard",
    scaffold_id: str | None = None,
    tone_variant: str | None = None,
    tool_name: str = "lifestyle_insights",
    timeout_seconds: float | None = 20.0,
) -> InsightResult:
    """Ask the inner LLM for three suggestions for this assessment."""
    try:
        scaffold = engine.select(
            tool_name=tool_name,
            caller_scaffold_id=scaffold_id,
            tool_context={"risk_tier": risk_tier},
        )
        data_context = build_llm_data_context(
            profile=profile,
            bmi=bmi,
            risk_tier=risk_tier,
            privacy_mode=privacy_mode,
        )
        assembled = engine.apply(
            scaffold=scaffold,
            user_query=(
                f"Analyze this lifestyle data for a {profile.age} year old and provide "
                f"exactly {SUGGESTION_COUNT} short, actionable lifestyle suggestions."
            ),
            data_context=data_context,
            tone_variant=tone_variant,
        )
        response = await asyncio.wait_for(
            llm_client.invoke(assembled_prompt=assembled, scaffold=scaffold),
            timeout=timeout_seconds,
        )
    except asyncio.TimeoutError:
        logger.warning("Insight request timed out after %ss; using fallback", timeout_seconds)
        return _fallback()
    except Exception:
        logger.exception("Insight request failed; using fallback suggestions")
        return _fallback()

    if not response.suggestions:
        logger.warning(
            "Inner LLM returned no usable suggestions (scaffold=%s); using fallback",
            response.scaffold_id,
        )
        result = _fallback()
        result.guardrail_flags = response.guardrail_flags
        return result

    if len(response.suggestions) < SUGGESTION_COUNT:
        logger.info(
            "Inner LLM returned %d suggestion(s); topping up from fallback",
            len(response.suggestions),
        )

    return InsightResult(
        suggestions=_top_up(response.suggestions),
        source="llm",
        scaffold_id=response.scaffold_id,
        guardrail_flags=response.guardrail_flags,
    )
