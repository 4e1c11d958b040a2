"""Synthetic population figures shown alongside an individual assessment.

These are illustrative placeholders, not survey data.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class DemographicStat:
    label: str
    value: int          # percentage
    color: str


TIER_DISTRIBUTION = (
    DemographicStat(label="Low Strain", value=42, color="#2dd4bf"),
    DemographicStat(label="Moderate", value=38, color="#fbbf24"),
    DemographicStat(label="High Strain", value=20, color="#f43f5e"),
)

PRIMARY_DRIVERS = (
    DemographicStat(label="Sedentary Lifestyle", value=45, color="#8b5cf6"),
    DemographicStat(label="Chronic Stress", value=32, color="#06b6d4"),
    DemographicStat(label="Substance Habit", value=23, color="#f43f5e"),
)


def get_synthetic_demographics() -> dict[str, list[dict]]:
    """Return tier distribution and primary strain drivers as plain dicts."""
    return {
        "tierDistribution": [asdict(s) for s in TIER_DISTRIBUTION],
        "primaryDrivers": [asdict(s) for s in PRIMARY_DRIVERS],
    }
