"""MCP tools for lifestyle risk scoring and suggestion augmentation."""

from __future__ import annotations

import json
import logging
import time
from typing import TYPE_CHECKING, Any

from fastmcp import FastMCP

if TYPE_CHECKING:
    from vibehealth.core.config.settings import Settings
    from vibehealth.core.llm.client import InnerLLMClient
    from vibehealth.core.scaffold.engine import ScaffoldEngine

from vibehealth.core.privacy.policy import validate_privacy_mode
from vibehealth.domains.lifestyle.domain_logic.insights import fetch_insights
from vibehealth.domains.lifestyle.domain_logic.risk_scorer import compute_bmi, predict_risk
from vibehealth.domains.lifestyle.domain_logic.validation import (
    validate_body_metrics,
    validate_profile,
)

logger = logging.getLogger(__name__)

DISCLAIMER = (
    "This is a heuristic lifestyle estimate, not a clinical assessment or medical advice."
)


def register_lifestyle_risk_tools(
    mcp: FastMCP,
    engine: ScaffoldEngine,
    llm_client: InnerLLMClient,
    settings: Settings,
) -> None:
    """Register lifestyle scoring and insight tools on the MCP server."""

    async def _insights(profile, prediction, *, tool_name, privacy_mode, scaffold_id, tone_variant):
        effective_privacy_mode = validate_privacy_mode(
            privacy_mode, default=settings.default_privacy_mode
        )
        return await fetch_insights(
            profile,
            prediction.bmi,
            prediction.risk_tier,
            engine=engine,
            llm_client=llm_client,
            privacy_mode=effective_privacy_mode,
            scaffold_id=scaffold_id,
            tone_variant=tone_variant,
            tool_name=tool_name,
            timeout_seconds=settings.insight_timeout_seconds,
        )

    @mcp.tool
    def calculate_bmi(weight_kg: float, height_cm: float) -> str:
        """Calculate body-mass index from weight and height.

        Args:
            weight_kg: Body weight in kilograms (10-600).
            height_cm: Height in centimetres (50-300).
        """
        weight, height = validate_body_metrics(weight_kg, height_cm)
        return json.dumps({"bmi": compute_bmi(weight, height)})

    @mcp.tool
    def predict_lifestyle_risk(
        age: int,
        height_cm: float,
        weight_kg: float,
        is_smoking: bool = False,
        is_drinking: bool = False,
        activity_level: str = "Medium",
        stress_level: int = 5,
    ) -> str:
        """Estimate lifestyle-related health strain from self-reported habits.

        Returns BMI, a Low/Medium/High risk tier, a 0-100 impact score, a
        short message and two consequence entries.

        Args:
            age: Age in years (18-100).
            height_cm: Height in centimetres (50-300).
            weight_kg: Body weight in kilograms (10-600).
            is_smoking: Whether the person smokes.
            is_drinking: Whether the person drinks alcohol regularly.
            activity_level: 'Low', 'Medium' or 'High'.
            stress_level: Self-rated stress from 1 (calm) to 10 (overwhelmed).
        """
        profile = validate_profile(
            age=age,
            height_cm=height_cm,
            weight_kg=weight_kg,
            is_smoking=is_smoking,
            is_drinking=is_drinking,
            activity_level=activity_level,
            stress_level=stress_level,
        )
        prediction = predict_risk(profile)
        logger.info(
            "Scored lifestyle profile: tier=%s, impact=%d",
            prediction.risk_tier.value,
            prediction.impact_score,
        )
        return json.dumps({**prediction.to_dict(), "disclaimer": DISCLAIMER})

    @mcp.tool
    async def lifestyle_insights(
        age: int,
        height_cm: float,
        weight_kg: float,
        is_smoking: bool = False,
        is_drinking: bool = False,
        activity_level: str = "Medium",
        stress_level: int = 5,
        privacy_mode: str | None = None,
        scaffold_id: str | None = None,
        tone_variant: str | None = None,
    ) -> str:
        """Get three short, preventive lifestyle suggestions.

        Scores the profile first, then asks the inner LLM for suggestions.
        Falls back to a fixed set of three suggestions if the LLM is
        unavailable.

        Args:
            age: Age in years (18-100).
            height_cm: Height in centimetres (50-300).
            weight_kg: Body weight in kilograms (10-600).
            is_smoking: Whether the person smokes.
            is_drinking: Whether the person drinks alcohol regularly.
            activity_level: 'Low', 'Medium' or 'High'.
            stress_level: Self-rated stress from 1 to 10.
            privacy_mode: Controls what data reaches the LLM prompt.
                'strict' — only age, BMI and risk tier.
                'standard' (default) — adds smoking, drinking, activity, stress.
                'explicit' — also adds height and weight.
            scaffold_id: Optional scaffold override.
            tone_variant: Optional tone override defined by the scaffold.
        """
        profile = validate_profile(
            age=age,
            height_cm=height_cm,
            weight_kg=weight_kg,
            is_smoking=is_smoking,
            is_drinking=is_drinking,
            activity_level=activity_level,
            stress_level=stress_level,
        )
        prediction = predict_risk(profile)
        result = await _insights(
            profile,
            prediction,
            tool_name="lifestyle_insights",
            privacy_mode=privacy_mode,
            scaffold_id=scaffold_id,
            tone_variant=tone_variant,
        )
        return json.dumps({
            "suggestions": result.suggestions,
            "source": result.source,
            "risk_level": prediction.risk_tier.value,
            "bmi": prediction.bmi,
        })

    @mcp.tool
    async def analyze_lifestyle(
        age: int,
        height_cm: float,
        weight_kg: float,
        is_smoking: bool = False,
        is_drinking: bool = False,
        activity_level: str = "Medium",
        stress_level: int = 5,
        privacy_mode: str | None = None,
        tone_variant: str | None = None,
    ) -> str:
        """Run the full assessment: risk prediction plus three suggestions.

        Args:
            age: Age in years (18-100).
            height_cm: Height in centimetres (50-300).
            weight_kg: Body weight in kilograms (10-600).
            is_smoking: Whether the person smokes.
            is_drinking: Whether the person drinks alcohol regularly.
            activity_level: 'Low', 'Medium' or 'High'.
            stress_level: Self-rated stress from 1 to 10.
            privacy_mode: 'strict' | 'standard' | 'explicit' (see lifestyle_insights).
            tone_variant: Optional tone override defined by the scaffold.
        """
        start_time = time.monotonic()
        profile = validate_profile(
            age=age,
            height_cm=height_cm,
            weight_kg=weight_kg,
            is_smoking=is_smoking,
            is_drinking=is_drinking,
            activity_level=activity_level,
            stress_level=stress_level,
        )
        prediction = predict_risk(profile)
        result = await _insights(
            profile,
            prediction,
            tool_name="analyze_lifestyle",
            privacy_mode=privacy_mode,
            scaffold_id=None,
            tone_variant=tone_variant,
        )

        payload: dict[str, Any] = {
            "prediction": prediction.to_dict(),
            "insights": {
                "suggestions": result.suggestions,
                "source": result.source,
                "scaffold_id": result.scaffold_id,
            },
            "disclaimer": DISCLAIMER,
        }
        logger.info(
            "Lifestyle analysis complete: tier=%s, insights=%s, provider=%s, %.0fms",
            prediction.risk_tier.value,
            result.source,
            llm_client.provider_name,
            (time.monotonic() - start_time) * 1000,
        )
        return json.dumps(payload)
