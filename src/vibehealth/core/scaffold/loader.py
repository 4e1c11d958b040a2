"""Scaffold loader — reads YAML definitions from disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from vibehealth.core.scaffold.models import (
    Scaffold,
    ScaffoldApplicability,
    ScaffoldFraming,
    ScaffoldGuardrails,
    ScaffoldOutputCalibration,
)
from vibehealth.core.scaffold.registry import ScaffoldRegistry

logger = logging.getLogger(__name__)


def load_scaffold_directory(directory: str | Path, registry: ScaffoldRegistry) -> int:
    """Register every ``*.yaml`` scaffold under ``directory``.

    Files whose name starts with an underscore are drafts and are skipped.
    A file that fails to parse is logged and skipped; the rest still load.
    Returns the number of scaffolds registered.
    """
    directory = Path(directory)
    if not directory.is_dir():
        logger.warning("Scaffold directory does not exist: %s", directory)
        return 0

    loaded = 0
    for path in sorted(directory.rglob("*.yaml")):
        if path.name.startswith("_"):
            continue
        try:
            scaffold = load_scaffold_file(path)
            registry.register(scaffold)
        except Exception:
            logger.exception("Skipping scaffold file %s", path)
            continue
        loaded += 1
        logger.info(
            "Loaded scaffold %s v%s (tiers=%s)",
            scaffold.id,
            scaffold.version,
            scaffold.applicability.risk_tiers or "any",
        )
    return loaded


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    return data.get(name) or {}


def _text(section: dict[str, Any], key: str) -> str:
    return str(section.get(key) or "").strip()


def _applicability(section: dict[str, Any]) -> ScaffoldApplicability:
    return ScaffoldApplicability(
        tools=list(section.get("tools") or []),
        risk_tiers=[str(t) for t in section.get("risk_tiers") or []],
    )


def _framing(section: dict[str, Any]) -> ScaffoldFraming:
    return ScaffoldFraming(
        role=_text(section, "role"),
        perspective=_text(section, "perspective"),
        tone=_text(section, "tone"),
        tone_variants={
            name: str(text).strip()
            for name, text in (section.get("tone_variants") or {}).items()
        },
    )


def _output_calibration(section: dict[str, Any]) -> ScaffoldOutputCalibration:
    return ScaffoldOutputCalibration(
        format=section.get("format", "json_string_array"),
        item_count=int(section.get("item_count", 3)),
        max_words_per_item=int(section.get("max_words_per_item", 15)),
        must_include=list(section.get("must_include") or []),
        never_include=list(section.get("never_include") or []),
    )


def _guardrails(section: dict[str, Any]) -> ScaffoldGuardrails:
    return ScaffoldGuardrails(
        prohibited_actions=list(section.get("prohibited_actions") or []),
        prohibited_terms=[str(t).lower() for t in section.get("prohibited_terms") or []],
    )


def load_scaffold_file(path: Path) -> Scaffold:
    """Parse one YAML file into a Scaffold.

    Raises KeyError when a required top-level field is missing.
    """
    with open(path, encoding="utf-8") as f:
        data: dict[str, Any] = yaml.safe_load(f) or {}

    return Scaffold(
        id=data["id"],
        version=str(data["version"]),
        domain=data["domain"],
        display_name=data["display_name"],
        description=str(data["description"]).strip(),
        applicability=_applicability(_section(data, "applicability")),
        framing=_framing(_section(data, "framing")),
        reasoning_framework=_section(data, "reasoning_framework"),
        output_calibration=_output_calibration(_section(data, "output_calibration")),
        guardrails=_guardrails(_section(data, "guardrails")),
        tags=list(data.get("tags") or []),
    )
