"""Privacy policy for controlling what lifestyle data reaches the inner LLM.

The insight service only needs age, BMI and the risk tier. Habit details and
raw body measurements are added to the prompt only when the mode allows it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from vibehealth.domains.lifestyle.domain_logic.risk_models import (
        LifestyleProfile,
        RiskTier,
    )

PrivacyMode = Literal["strict", "standard", "explicit"]

PRIVACY_MODES: tuple[str, ...] = ("strict", "standard", "explicit")


def validate_privacy_mode(value: str | None, default: str = "standard") -> PrivacyMode:
    """Validate and default a privacy_mode parameter."""
    if value in (None, ""):
        value = default
    if value not in PRIVACY_MODES:
        raise ValueError("privacy_mode must be one of: strict | standard | explicit")
    return value  # type: ignore[return-value]


def build_llm_data_context(
    *,
    profile: LifestyleProfile,
    bmi: float,
    risk_tier: RiskTier,
    privacy_mode: PrivacyMode,
) -> dict[str, Any]:
    """Build the minimized data_context that will be rendered into the LLM prompt."""
    base: dict[str, Any] = {
        "age": profile.age,
        "bmi": bmi,
        "risk_level": risk_tier.value,
    }

    if privacy_mode == "strict":
        return base

    base.update(
        {
            "smoking": "Yes" if profile.is_smoking else "No",
            "drinking": "Yes" if profile.is_drinking else "No",
            "activity": profile.activity_level.value,
            "stress": f"{profile.stress_level}/10",
        }
    )
    if privacy_mode == "standard":
        return base

    # explicit
    base.update(
        {
            "height_cm": round(profile.height_cm, 1),
            "weight_kg": round(profile.weight_kg, 1),
        }
    )
    return base
