"""Scaffold YAML validator — ensures scaffold definitions are well-formed."""

from __future__ import annotations

from pathlib import Path

from vibehealth.core.scaffold.loader import load_scaffold_file
from vibehealth.core.scaffold.models import Scaffold
from vibehealth.domains.lifestyle.domain_logic.risk_models import RiskTier

REQUIRED_FIELDS = ["id", "version", "domain", "display_name", "description"]

KNOWN_RISK_TIERS = frozenset(tier.value for tier in RiskTier)


def validate_scaffold_file(path: Path) -> tuple[Scaffold | None, list[str]]:
    """Validate a single scaffold YAML file.

    Returns: (scaffold_or_none, errors)
    """
    try:
        scaffold = load_scaffold_file(path)
    except Exception as exc:
        return None, [f"{path.name}: Failed to load — {exc}"]

    errors: list[str] = []
    for field_name in REQUIRED_FIELDS:
        if not getattr(scaffold, field_name, None):
            errors.append(f"{path.name}: Missing or empty required field '{field_name}'")

    if not scaffold.applicability.tools:
        errors.append(f"{path.name}: Applicability lists no tools")

    unknown_tiers = sorted(set(scaffold.applicability.risk_tiers) - KNOWN_RISK_TIERS)
    if unknown_tiers:
        errors.append(f"{path.name}: Unknown risk tier(s): {', '.join(unknown_tiers)}")

    if not scaffold.reasoning_framework.get("steps"):
        errors.append(f"{path.name}: Reasoning framework has no steps")

    if not scaffold.guardrails.prohibited_terms:
        errors.append(f"{path.name}: No prohibited terms defined")

    if scaffold.output_calibration.item_count < 1:
        errors.append(f"{path.name}: item_count must be at least 1")

    if scaffold.version and not all(c.isdigit() or c == "." for c in scaffold.version):
        errors.append(
            f"{path.name}: Version '{scaffold.version}' doesn't look like a version number"
        )

    # Filename should start with the scaffold id (supports suffixes like `.v1.yaml`).
    name = path.name
    if not (name == f"{scaffold.id}.yaml" or name.startswith(f"{scaffold.id}.")):
        errors.append(
            f"{name}: Filename should match scaffold id '{scaffold.id}' "
            f"(expected '{scaffold.id}.*.yaml')"
        )

    return scaffold, errors


def validate_scaffold_directory(directory: str | Path) -> tuple[int, list[str]]:
    """Validate all scaffold YAML files in a directory (recursively).

    Returns: (scaffold_count, errors)
    """
    directory = Path(directory)
    if not directory.is_dir():
        return 0, [f"Scaffold directory not found: {directory}"]

    yaml_files = sorted(p for p in directory.rglob("*.yaml") if not p.name.startswith("_"))
    if not yaml_files:
        return 0, [f"No scaffold YAML files found in {directory}"]

    errors: list[str] = []
    seen_ids: dict[str, Path] = {}
    loaded = 0

    for path in yaml_files:
        scaffold, file_errors = validate_scaffold_file(path)
        if file_errors:
            errors.extend(file_errors)
            continue

        assert scaffold is not None  # for type checkers
        loaded += 1

        if scaffold.id in seen_ids:
            errors.append(
                f"{path.name}: Duplicate ID '{scaffold.id}' — already defined in "
                f"{seen_ids[scaffold.id].name}"
            )
        else:
            seen_ids[scaffold.id] = path

    return loaded, errors
