"""MCP Resources for scaffold discovery, demographics and the risk model."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from fastmcp import FastMCP

from vibehealth.domains.lifestyle.domain_logic import risk_models as rm
from vibehealth.domains.lifestyle.domain_logic.demographics import get_synthetic_demographics

if TYPE_CHECKING:
    from vibehealth.core.scaffold.registry import ScaffoldRegistry


def describe_risk_model() -> dict:
    """Coefficients and thresholds of the lifestyle risk formula."""
    return {
        "intercept": rm.BASE_INTERCEPT,
        "bmi": {"reference": rm.BMI_REFERENCE, "weight_per_unit_deviation": rm.BMI_DEVIATION_WEIGHT},
        "age": {"baseline": rm.AGE_BASELINE, "weight_per_year": rm.AGE_WEIGHT},
        "smoking": rm.SMOKING_WEIGHT,
        "drinking": rm.DRINKING_WEIGHT,
        "activity": {level.value: w for level, w in rm.ACTIVITY_WEIGHTS.items()},
        "stress": {"baseline": rm.STRESS_BASELINE, "weight_per_point": rm.STRESS_WEIGHT},
        "interactions": {
            "smoking_and_stress_above": {
                "threshold": rm.SMOKING_STRESS_THRESHOLD,
                "bonus": rm.SMOKING_STRESS_BONUS,
            },
            "low_activity_and_bmi_above": {
                "threshold": rm.SEDENTARY_BMI_THRESHOLD,
                "bonus": rm.SEDENTARY_BMI_BONUS,
            },
        },
        "tiers": {
            rm.RiskTier.LOW.value: f"impact < {rm.LOW_TIER_CEILING}",
            rm.RiskTier.MEDIUM.value: f"impact < {rm.MEDIUM_TIER_CEILING}",
            rm.RiskTier.HIGH.value: f"impact >= {rm.MEDIUM_TIER_CEILING}",
        },
    }


def register_lifestyle_resources(mcp: FastMCP, registry: ScaffoldRegistry) -> None:
    """Register lifestyle discovery resources on the MCP server."""

    @mcp.resource("scaffold://lifestyle/registry")
    def lifestyle_scaffold_registry_resource() -> str:
        """Discover all available lifestyle prompt scaffolds."""
        scaffolds = [s for s in registry.all() if s.domain == "lifestyle"]
        return json.dumps(
            {
                "domain": "lifestyle",
                "scaffold_count": len(scaffolds),
                "scaffolds": [
                    {
                        "id": s.id,
                        "display_name": s.display_name,
                        "description": s.description,
                        "applicability": {
                            "tools": s.applicability.tools,
                            "risk_tiers": s.applicability.risk_tiers,
                        },
                        "tone_variants": list(s.framing.tone_variants.keys()),
                        "tags": s.tags,
                    }
                    for s in scaffolds
                ],
            },
            indent=2,
        )

    @mcp.resource("lifestyle://demographics")
    def lifestyle_demographics_resource() -> str:
        """Synthetic population distribution across strain tiers and drivers."""
        return json.dumps(get_synthetic_demographics(), indent=2)

    @mcp.resource("lifestyle://risk-model")
    def lifestyle_risk_model_resource() -> str:
        """Fixed coefficients and tier thresholds of the risk formula."""
        return json.dumps(describe_risk_model(), indent=2)
