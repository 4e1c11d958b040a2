"""Unit tests for the insight augmentation service.

Every failure mode of the LLM round-trip must still yield exactly three
non-empty suggestions.
"""

from __future__ import annotations

import asyncio
import json

import pytest

from vibehealth.core.llm.client import InnerLLMClient
from vibehealth.core.llm.providers.mock import DEFAULT_MOCK_SUGGESTIONS, MockProvider
from vibehealth.core.scaffold.engine import ScaffoldEngine
from vibehealth.core.scaffold.registry import ScaffoldRegistry
from vibehealth.domains.lifestyle.domain_logic.insights import (
    FALLBACK_SUGGESTIONS,
    fetch_insights,
)
from vibehealth.domains.lifestyle.domain_logic.risk_models import (
    ActivityLevel,
    LifestyleProfile,
    RiskTier,
)


def _run(coro):
    """Run an async coroutine synchronously (no pytest-asyncio required)."""
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


_PROFILE = LifestyleProfile(
    age=42,
    height_cm=170.0,
    weight_kg=88.0,
    is_smoking=True,
    is_drinking=False,
    activity_level=ActivityLevel.LOW,
    stress_level=8,
)


def _fetch(engine, provider, **kwargs):
    client = InnerLLMClient(provider=provider)
    return _run(fetch_insights(
        _PROFILE, 30.4, kwargs.pop("tier", RiskTier.HIGH),
        engine=engine, llm_client=client, **kwargs,
    ))


def _assert_three_non_empty(suggestions):
    assert len(suggestions) == 3
    assert all(isinstance(s, str) and s.strip() for s in suggestions)


class TestSuccessfulInsights:
    def test_returns_llm_suggestions(self, engine):
        result = _fetch(engine, MockProvider())
        assert result.source == "llm"
        assert result.suggestions == DEFAULT_MOCK_SUGGESTIONS
        _assert_three_non_empty(result.suggestions)

    def test_routes_high_tier_to_high_strain_scaffold(self, engine):
        result = _fetch(engine, MockProvider(), tier=RiskTier.HIGH)
        assert result.scaffold_id == "lifestyle_insights.high_strain"

    def test_routes_medium_tier_to_default(self, engine):
        result = _fetch(engine, MockProvider(), tier=RiskTier.MEDIUM)
        assert result.scaffold_id == "lifestyle_insights"

    def test_extra_suggestions_are_cut_to_three(self, engine):
        provider = MockProvider(json.dumps(["a one", "b two", "c three", "d four"]))
        result = _fetch(engine, provider)
        assert result.suggestions == ["a one", "b two", "c three"]

    def test_short_answers_are_topped_up(self, engine):
        provider = MockProvider(json.dumps(["Walk after lunch."]))
        result = _fetch(engine, provider)
        assert result.source == "llm"
        assert result.suggestions[0] == "Walk after lunch."
        assert result.suggestions[1:] == list(FALLBACK_SUGGESTIONS[:2])

    def test_repeated_suggestions_are_collapsed_before_top_up(self, engine):
        provider = MockProvider(json.dumps(["Walk after lunch."] * 2 + ["walk after LUNCH."]))
        result = _fetch(engine, provider)
        assert result.source == "llm"
        assert result.suggestions == ["Walk after lunch.", *FALLBACK_SUGGESTIONS[:2]]
        assert len(set(result.suggestions)) == 3

    def test_strict_privacy_keeps_habits_out_of_prompt(self, engine):
        provider = MockProvider()
        _fetch(engine, provider, privacy_mode="strict")
        assert '"bmi": 30.4' in provider.last_user_message
        assert '"risk_level": "High Risk"' in provider.last_user_message
        assert "smoking" not in provider.last_user_message

    def test_standard_privacy_includes_habits(self, engine):
        provider = MockProvider()
        _fetch(engine, provider, privacy_mode="standard")
        assert '"smoking": "Yes"' in provider.last_user_message
        assert '"stress": "8/10"' in provider.last_user_message
        assert "height_cm" not in provider.last_user_message


class TestFallback:
    def test_provider_error(self, engine, failing_provider):
        result = _fetch(engine, failing_provider)
        assert failing_provider.call_count == 1
        assert result.source == "fallback"
        assert result.suggestions == list(FALLBACK_SUGGESTIONS)

    def test_unparsable_output(self, engine):
        result = _fetch(engine, MockProvider("Here are some tips: walk more!"))
        assert result.source == "fallback"
        _assert_three_non_empty(result.suggestions)

    def test_empty_array(self, engine):
        result = _fetch(engine, MockProvider("[]"))
        assert result.source == "fallback"
        _assert_three_non_empty(result.suggestions)

    def test_all_suggestions_redacted_by_guardrails(self, engine):
        provider = MockProvider(json.dumps([
            "Ask about medication for stress.",
            "Watch for diabetes signs.",
        ]))
        result = _fetch(engine, provider)
        assert result.source == "fallback"
        assert result.guardrail_flags
        assert result.suggestions == list(FALLBACK_SUGGESTIONS)

    def test_timeout(self, engine):
        class _SlowProvider:
            name = "slow"

            async def generate(self, *args, **kwargs):
                await asyncio.sleep(5)

        result = _fetch(engine, _SlowProvider(), timeout_seconds=0.01)
        assert result.source == "fallback"
        _assert_three_non_empty(result.suggestions)

    def test_no_scaffold_available(self):
        result = _fetch(ScaffoldEngine(ScaffoldRegistry()), MockProvider())
        assert result.source == "fallback"
        _assert_three_non_empty(result.suggestions)

    def test_fallback_list_is_fixed(self):
        assert len(FALLBACK_SUGGESTIONS) == 3
        assert len(set(FALLBACK_SUGGESTIONS)) == 3


@pytest.mark.parametrize("tier", list(RiskTier))
def test_every_tier_yields_three(engine, tier):
    result = _fetch(engine, MockProvider(), tier=tier)
    _assert_three_non_empty(result.suggestions)
