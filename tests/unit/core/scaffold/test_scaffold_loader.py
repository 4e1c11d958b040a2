"""Unit tests for scaffold YAML loading and validation."""

from __future__ import annotations

from pathlib import Path

from vibehealth.core.scaffold.loader import load_scaffold_directory, load_scaffold_file
from vibehealth.core.scaffold.registry import ScaffoldRegistry
from vibehealth.core.scaffold.validator import (
    validate_scaffold_directory,
    validate_scaffold_file,
)
from vibehealth.core.server.app import SCAFFOLD_DIR

_MINIMAL_YAML = """\
id: {id}
version: "1.0.0"
domain: lifestyle
display_name: Test
description: A test scaffold.
applicability:
  tools:
    - lifestyle_insights
reasoning_framework:
  steps:
    - Read the data
guardrails:
  prohibited_terms:
    - diagnosis
"""


def _write(directory: Path, filename: str, scaffold_id: str) -> Path:
    path = directory / filename
    path.write_text(_MINIMAL_YAML.format(id=scaffold_id), encoding="utf-8")
    return path


class TestPackagedScaffolds:
    def test_all_packaged_scaffolds_validate(self):
        count, errors = validate_scaffold_directory(SCAFFOLD_DIR)
        assert errors == []
        assert count == 3

    def test_packaged_scaffolds_load(self):
        registry = ScaffoldRegistry()
        assert load_scaffold_directory(SCAFFOLD_DIR, registry) == 3
        high = registry.get("lifestyle_insights.high_strain")
        assert high.applicability.risk_tiers == ["High Risk"]
        assert registry.get("lifestyle_insights.resilient").applicability.risk_tiers == ["Low Risk"]
        assert registry.get("lifestyle_insights").applicability.risk_tiers == []

    def test_packaged_scaffolds_ban_clinical_terms(self):
        registry = ScaffoldRegistry()
        load_scaffold_directory(SCAFFOLD_DIR, registry)
        for scaffold in registry.all():
            assert "diagnosis" in scaffold.guardrails.prohibited_terms
            assert scaffold.output_calibration.item_count == 3


class TestLoader:
    def test_defaults_for_optional_sections(self, tmp_path: Path):
        scaffold = load_scaffold_file(_write(tmp_path, "minimal.yaml", "minimal"))
        assert scaffold.output_calibration.format == "json_string_array"
        assert scaffold.output_calibration.item_count == 3
        assert scaffold.framing.tone_variants == {}

    def test_missing_directory_loads_nothing(self, tmp_path: Path):
        assert load_scaffold_directory(tmp_path / "missing", ScaffoldRegistry()) == 0

    def test_underscore_files_are_skipped(self, tmp_path: Path):
        _write(tmp_path, "_draft.yaml", "draft")
        _write(tmp_path, "real.yaml", "real")
        registry = ScaffoldRegistry()
        assert load_scaffold_directory(tmp_path, registry) == 1
        assert registry.get("draft") is None

    def test_broken_file_is_skipped(self, tmp_path: Path):
        (tmp_path / "broken.yaml").write_text("id: broken\n", encoding="utf-8")
        _write(tmp_path, "ok.yaml", "ok")
        assert load_scaffold_directory(tmp_path, ScaffoldRegistry()) == 1


class TestValidator:
    def test_filename_must_match_id(self, tmp_path: Path):
        _, errors = validate_scaffold_file(_write(tmp_path, "wrong.yaml", "right"))
        assert any("Filename should match" in e for e in errors)

    def test_duplicate_ids_are_reported(self, tmp_path: Path):
        _write(tmp_path, "same.yaml", "same")
        _write(tmp_path, "same.v2.yaml", "same")
        count, errors = validate_scaffold_directory(tmp_path)
        assert count == 2
        assert any("Duplicate ID" in e for e in errors)

    def test_empty_directory(self, tmp_path: Path):
        count, errors = validate_scaffold_directory(tmp_path)
        assert count == 0
        assert errors

    def test_missing_prohibited_terms(self, tmp_path: Path):
        path = tmp_path / "loose.yaml"
        path.write_text(
            _MINIMAL_YAML.format(id="loose").replace(
                "  prohibited_terms:\n    - diagnosis\n", "  prohibited_terms: []\n"
            ),
            encoding="utf-8",
        )
        _, errors = validate_scaffold_file(path)
        assert any("prohibited terms" in e for e in errors)

    def test_unknown_risk_tier(self, tmp_path: Path):
        path = tmp_path / "tiered.yaml"
        path.write_text(
            _MINIMAL_YAML.format(id="tiered").replace(
                "    - lifestyle_insights\n",
                "    - lifestyle_insights\n  risk_tiers:\n    - Severe Risk\n",
            ),
            encoding="utf-8",
        )
        _, errors = validate_scaffold_file(path)
        assert any("Unknown risk tier(s): Severe Risk" in e for e in errors)
