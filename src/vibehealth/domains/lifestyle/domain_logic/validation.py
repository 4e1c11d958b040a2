"""Input validation for raw lifestyle metrics, run before the scorer."""

from __future__ import annotations

import math
from typing import Any

from vibehealth.domains.lifestyle.domain_logic.risk_models import (
    ActivityLevel,
    LifestyleProfile,
)

HEIGHT_RANGE_CM = (50.0, 300.0)
WEIGHT_RANGE_KG = (10.0, 600.0)
AGE_RANGE = (18, 100)
STRESS_RANGE = (1, 10)


class ProfileValidationError(ValueError):
    """Raised when lifestyle inputs fall outside the accepted ranges."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("; ".join(errors))


def _as_float(value: Any) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    return result if math.isfinite(result) else None


def _as_int(value: Any) -> int | None:
    number = _as_float(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def parse_activity_level(value: Any) -> ActivityLevel:
    """Accept an ActivityLevel or its name/value in any case."""
    if isinstance(value, ActivityLevel):
        return value
    text = str(value).strip().lower()
    for level in ActivityLevel:
        if text in (level.value.lower(), level.name.lower()):
            return level
    options = " | ".join(level.value for level in ActivityLevel)
    raise ProfileValidationError([f"activity_level must be one of: {options}"])


def validate_body_metrics(weight_kg: Any, height_cm: Any) -> tuple[float, float]:
    """Check height/weight ranges and return them as floats."""
    errors: list[str] = []

    height = _as_float(height_cm)
    if height is None or not HEIGHT_RANGE_CM[0] <= height <= HEIGHT_RANGE_CM[1]:
        errors.append(
            f"height_cm must be between {HEIGHT_RANGE_CM[0]:g} and {HEIGHT_RANGE_CM[1]:g}"
        )

    weight = _as_float(weight_kg)
    if weight is None or not WEIGHT_RANGE_KG[0] <= weight <= WEIGHT_RANGE_KG[1]:
        errors.append(
            f"weight_kg must be between {WEIGHT_RANGE_KG[0]:g} and {WEIGHT_RANGE_KG[1]:g}"
        )

    if errors or weight is None or height is None:
        raise ProfileValidationError(errors)
    return weight, height


def validate_profile(
    *,
    age: Any,
    height_cm: Any,
    weight_kg: Any,
    is_smoking: bool = False,
    is_drinking: bool = False,
    activity_level: Any = ActivityLevel.MEDIUM,
    stress_level: Any = 5,
) -> LifestyleProfile:
    """Build a LifestyleProfile from raw tool arguments.

    Collects every problem before raising so callers can report them together.
    """
    errors: list[str] = []

    try:
        weight, height = validate_body_metrics(weight_kg, height_cm)
    except ProfileValidationError as exc:
        errors.extend(exc.errors)
        weight = height = 0.0

    parsed_age = _as_int(age)
    if parsed_age is None or not AGE_RANGE[0] <= parsed_age <= AGE_RANGE[1]:
        errors.append(f"age must be a whole number between {AGE_RANGE[0]} and {AGE_RANGE[1]}")

    parsed_stress = _as_int(stress_level)
    if parsed_stress is None or not STRESS_RANGE[0] <= parsed_stress <= STRESS_RANGE[1]:
        errors.append(
            f"stress_level must be a whole number between {STRESS_RANGE[0]} and {STRESS_RANGE[1]}"
        )

    try:
        level = parse_activity_level(activity_level)
    except ProfileValidationError as exc:
        errors.extend(exc.errors)
        level = ActivityLevel.MEDIUM

    if errors:
        raise ProfileValidationError(errors)

    return LifestyleProfile(
        age=parsed_age,  # type: ignore[arg-type]
        height_cm=height,
        weight_kg=weight,
        is_smoking=bool(is_smoking),
        is_drinking=bool(is_drinking),
        activity_level=level,
        stress_level=parsed_stress,  # type: ignore[arg-type]
    )
