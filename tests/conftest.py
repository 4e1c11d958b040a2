"""Shared test fixtures for VibeHealth tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Test hermeticity
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _force_hermetic_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LLM_PROVIDER", "mock")
    monkeypatch.setenv("GEMINI_API_KEY", "")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "")
    monkeypatch.setenv("OPENAI_API_KEY", "")
    monkeypatch.setenv("DEFAULT_PRIVACY_MODE", "standard")

# Allow running tests without `pip install -e .` by making `src/` importable.
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_SRC_DIR = _PROJECT_ROOT / "src"
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from vibehealth.core.scaffold.engine import ScaffoldEngine  # noqa: E402
from vibehealth.core.scaffold.models import (  # noqa: E402
    Scaffold,
    ScaffoldApplicability,
    ScaffoldFraming,
    ScaffoldGuardrails,
    ScaffoldOutputCalibration,
)
from vibehealth.core.scaffold.registry import ScaffoldRegistry  # noqa: E402


def make_test_scaffold(
    id: str = "test_scaffold",
    tools: list[str] | None = None,
    risk_tiers: list[str] | None = None,
) -> Scaffold:
    """Create a test scaffold with sensible defaults."""
    return Scaffold(
        id=id,
        version="1.0.0",
        domain="lifestyle",
        display_name=f"Test: {id}",
        description=f"Test scaffold {id}",
        applicability=ScaffoldApplicability(
            tools=tools or ["default_tool"],
            risk_tiers=risk_tiers or [],
        ),
        framing=ScaffoldFraming(
            role="Test coach",
            perspective="Test perspective",
            tone="neutral",
            tone_variants={"upbeat": "Very upbeat", "calm": "Very calm"},
        ),
        reasoning_framework={"steps": ["Read the data", "Suggest habits"]},
        output_calibration=ScaffoldOutputCalibration(
            item_count=3,
            max_words_per_item=15,
            must_include=["an everyday action"],
            never_include=["disease names"],
        ),
        guardrails=ScaffoldGuardrails(
            prohibited_actions=["diagnose conditions"],
            prohibited_terms=["diabetes", "medication"],
        ),
        tags=["test"],
    )


@pytest.fixture
def registry() -> ScaffoldRegistry:
    """Create a registry with test scaffolds (neutral + high strain + resilient)."""
    reg = ScaffoldRegistry()
    reg.register(make_test_scaffold(
        id="lifestyle_insights.high_strain",
        tools=["lifestyle_insights"],
        risk_tiers=["High Risk"],
    ))
    reg.register(make_test_scaffold(
        id="lifestyle_insights.resilient",
        tools=["lifestyle_insights"],
        risk_tiers=["Low Risk"],
    ))
    reg.register(make_test_scaffold(
        id="lifestyle_insights",
        tools=["lifestyle_insights"],
    ))
    return reg


@pytest.fixture
def engine(registry: ScaffoldRegistry) -> ScaffoldEngine:
    """Create a scaffold engine with test registry."""
    return ScaffoldEngine(registry)


# ---------------------------------------------------------------------------
# LLM provider doubles
# ---------------------------------------------------------------------------

class FailingProvider:
    """Provider whose every call raises, like an unreachable LLM endpoint."""

    name = "failing"

    def __init__(self, exc: Exception | None = None) -> None:
        self.exc = exc or ConnectionError("LLM endpoint unreachable")
        self.call_count = 0

    async def generate(self, system_message, user_message, max_tokens=512, temperature=0.4):
        self.call_count += 1
        raise self.exc


@pytest.fixture
def mock_provider():
    from vibehealth.core.llm.providers.mock import MockProvider

    return MockProvider()


@pytest.fixture
def llm_client(mock_provider):
    from vibehealth.core.llm.client import InnerLLMClient

    return InnerLLMClient(provider=mock_provider)


@pytest.fixture
def failing_provider() -> FailingProvider:
    return FailingProvider()
