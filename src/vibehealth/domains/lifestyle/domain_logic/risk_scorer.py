"""Deterministic lifestyle risk scoring: profile -> BMI, logit, tier, narrative.

All formulas are fixed; no LLM, no randomness, no state between calls.
``predict_risk`` never raises for numeric input. Range checks belong to the
caller (see ``validation``).
"""

from __future__ import annotations

import math
import sys
from decimal import ROUND_HALF_UP, Decimal

from vibehealth.domains.lifestyle.domain_logic.risk_models import (
    ACTIVITY_WEIGHTS,
    AGE_BASELINE,
    AGE_WEIGHT,
    BASE_INTERCEPT,
    BMI_DEVIATION_WEIGHT,
    BMI_REFERENCE,
    DRINKING_WEIGHT,
    LOW_TIER_CEILING,
    MEDIUM_TIER_CEILING,
    SEDENTARY_BMI_BONUS,
    SEDENTARY_BMI_THRESHOLD,
    SMOKING_STRESS_BONUS,
    SMOKING_STRESS_THRESHOLD,
    SMOKING_WEIGHT,
    STRESS_BASELINE,
    STRESS_WEIGHT,
    TIER_NARRATIVES,
    ActivityLevel,
    LifestyleProfile,
    Prediction,
    RiskTier,
)

_ONE_DECIMAL = Decimal("0.1")

# Beyond this magnitude a float carries no digit at the first decimal place.
_ROUNDING_LIMIT = 1e15


def _round_one_decimal(value: float) -> float:
    """Round half away from zero on the exact binary value of ``value``."""
    if not math.isfinite(value) or abs(value) >= _ROUNDING_LIMIT:
        return value
    return float(Decimal(value).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def _sigmoid(z: float) -> float:
    """Logistic transform, evaluated on the side that cannot overflow."""
    if z >= 0:
        return 1.0 / (1.0 + math.exp(-z))
    ez = math.exp(z)
    return ez / (1.0 + ez)


def _to_percent(probability: float) -> int:
    if math.isnan(probability):
        return 0
    return int(math.floor(probability * 100 + 0.5))


def _truncate(logit: float) -> int:
    if math.isnan(logit):
        return 0
    if math.isinf(logit):
        return int(math.copysign(sys.maxsize, logit))
    return math.trunc(logit)


def _tier_for(impact_score: int) -> RiskTier:
    if impact_score < LOW_TIER_CEILING:
        return RiskTier.LOW
    if impact_score < MEDIUM_TIER_CEILING:
        return RiskTier.MEDIUM
    return RiskTier.HIGH


def compute_bmi(weight_kg: float, height_cm: float) -> float:
    """Body-mass index rounded to one decimal.

    A height of 0 means "unset" and yields 0 instead of a division error.
    """
    if height_cm == 0:
        return 0.0
    height_m = height_cm / 100
    denominator = height_m * height_m
    if denominator == 0:
        # Sub-normal heights square to zero; treat them like the sentinel.
        return 0.0
    return _round_one_decimal(weight_kg / denominator)


def compute_logit(profile: LifestyleProfile, bmi: float) -> float:
    """Accumulate the weighted risk factors for ``profile`` at ``bmi``."""
    logit = BASE_INTERCEPT

    logit += abs(bmi - BMI_REFERENCE) * BMI_DEVIATION_WEIGHT
    logit += (profile.age - AGE_BASELINE) * AGE_WEIGHT
    if profile.is_smoking:
        logit += SMOKING_WEIGHT
    if profile.is_drinking:
        logit += DRINKING_WEIGHT
    logit += ACTIVITY_WEIGHTS[profile.activity_level]
    logit += (profile.stress_level - STRESS_BASELINE) * STRESS_WEIGHT

    if profile.is_smoking and profile.stress_level > SMOKING_STRESS_THRESHOLD:
        logit += SMOKING_STRESS_BONUS
    if profile.activity_level is ActivityLevel.LOW and bmi > SEDENTARY_BMI_THRESHOLD:
        logit += SEDENTARY_BMI_BONUS

    return logit


def predict_risk(profile: LifestyleProfile) -> Prediction:
    """Score a lifestyle profile.

    The impact score is rounded before the tier is chosen, so both always
    derive from the same logit.
    """
    bmi = compute_bmi(profile.weight_kg, profile.height_cm)
    logit = compute_logit(profile, bmi)

    impact_score = _to_percent(_sigmoid(logit))
    risk_tier = _tier_for(impact_score)
    narrative = TIER_NARRATIVES[risk_tier]

    return Prediction(
        bmi=bmi,
        logit=logit,
        score=_truncate(logit),
        impact_score=impact_score,
        risk_tier=risk_tier,
        message=narrative.message,
        consequences=narrative.consequences,
    )
