"""Lifestyle risk models and the fixed coefficients of the risk formula."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class ActivityLevel(str, Enum):
    """Self-reported weekly activity level."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class RiskTier(str, Enum):
    """Lifestyle strain tier derived from the impact score."""

    LOW = "Low Risk"
    MEDIUM = "Medium Risk"
    HIGH = "High Risk"


# ---------------------------------------------------------------------------
# Formula constants (used by risk_scorer and the risk-model resource)
# ---------------------------------------------------------------------------

BASE_INTERCEPT = -3.5

# BMI distance from the reference point costs 0.15 per unit, in either direction.
BMI_REFERENCE = 22.5
BMI_DEVIATION_WEIGHT = 0.15

AGE_BASELINE = 18
AGE_WEIGHT = 0.02

SMOKING_WEIGHT = 2.2
DRINKING_WEIGHT = 0.6

ACTIVITY_WEIGHTS: Mapping[ActivityLevel, float] = MappingProxyType({
    ActivityLevel.LOW: 1.2,
    ActivityLevel.MEDIUM: 0.4,
    ActivityLevel.HIGH: -0.5,
})

STRESS_BASELINE = 5
STRESS_WEIGHT = 0.25

# Interaction bonuses
SMOKING_STRESS_THRESHOLD = 7    # strictly greater than
SMOKING_STRESS_BONUS = 0.8
SEDENTARY_BMI_THRESHOLD = 28.0  # strictly greater than
SEDENTARY_BMI_BONUS = 0.5

# Tier thresholds on the impact score, checked in order (first match wins).
LOW_TIER_CEILING = 25
MEDIUM_TIER_CEILING = 60


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LifestyleProfile:
    """Self-reported lifestyle metrics for a single assessment."""

    age: int
    height_cm: float
    weight_kg: float
    is_smoking: bool
    is_drinking: bool
    activity_level: ActivityLevel
    stress_level: int               # 1-10


@dataclass(frozen=True)
class Consequence:
    """A narrative (area, short-term impact, long-term impact) triple."""

    area: str
    impact: str
    long_term: str

    def to_dict(self) -> dict[str, str]:
        return {"area": self.area, "impact": self.impact, "longTerm": self.long_term}


@dataclass(frozen=True)
class TierNarrative:
    message: str
    consequences: tuple[Consequence, Consequence]


@dataclass(frozen=True)
class Prediction:
    """Result of scoring one LifestyleProfile."""

    bmi: float
    logit: float
    score: int                      # logit truncated toward zero, display only
    impact_score: int               # 0-100
    risk_tier: RiskTier
    message: str
    consequences: tuple[Consequence, ...]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation."""
        return {
            "riskLevel": self.risk_tier.value,
            "score": self.score,
            "impactScore": self.impact_score,
            "bmi": self.bmi,
            "logit": round(self.logit, 4),
            "message": self.message,
            "consequences": [c.to_dict() for c in self.consequences],
        }


# ---------------------------------------------------------------------------
# Tier narratives
# ---------------------------------------------------------------------------

TIER_NARRATIVES: Mapping[RiskTier, TierNarrative] = MappingProxyType({
    RiskTier.LOW: TierNarrative(
        message=(
            "Your lifestyle metrics indicate a highly resilient physiological "
            "profile with minimal health strain."
        ),
        consequences=(
            Consequence(
                area="Physical Resilience",
                impact="High recovery speed after exertion.",
                long_term="Maintains high physical autonomy and mobility well into senior years.",
            ),
            Consequence(
                area="Metabolic Efficiency",
                impact="Optimal energy partitioning.",
                long_term="Stable weight management and consistent daily energy.",
            ),
        ),
    ),
    RiskTier.MEDIUM: TierNarrative(
        message=(
            "Moderate lifestyle-related stressors are present. Current habits "
            "may lead to cumulative metabolic strain."
        ),
        consequences=(
            Consequence(
                area="Inflammatory Drift",
                impact="Occasional localized stiffness.",
                long_term="Gradual increase in systemic inflammation over time.",
            ),
            Consequence(
                area="Restorative Quality",
                impact="Sleep may feel less refreshing.",
                long_term="Potential for chronic sleep debt impacting focus.",
            ),
        ),
    ),
    RiskTier.HIGH: TierNarrative(
        message=(
            "Multiple high-impact risk indicators detected. Your current habits "
            "show significant lifestyle-related health strain."
        ),
        consequences=(
            Consequence(
                area="Physiological Burnout",
                impact="Persistent exhaustion.",
                long_term="Significant erosion of the body's repair mechanisms.",
            ),
            Consequence(
                area="Accelerated Aging",
                impact="Biological markers exceeding age.",
                long_term="Early decline in physical strength and overall stamina.",
            ),
        ),
    ),
})
