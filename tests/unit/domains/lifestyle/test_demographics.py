"""Unit tests for the synthetic demographics figures."""

from __future__ import annotations

from vibehealth.domains.lifestyle.domain_logic.demographics import get_synthetic_demographics


def test_each_group_sums_to_100_percent():
    data = get_synthetic_demographics()
    for group in ("tierDistribution", "primaryDrivers"):
        assert sum(item["value"] for item in data[group]) == 100


def test_items_are_plain_dicts():
    item = get_synthetic_demographics()["tierDistribution"][0]
    assert set(item) == {"label", "value", "color"}
