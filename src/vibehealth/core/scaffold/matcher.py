"""Scaffold matcher — picks a scaffold for a tool call."""

from __future__ import annotations

import logging

from vibehealth.core.scaffold.models import Scaffold
from vibehealth.core.scaffold.registry import ScaffoldRegistry

logger = logging.getLogger(__name__)


def match_scaffold(
    registry: ScaffoldRegistry,
    tool_name: str,
    risk_tier: str | None = None,
    caller_scaffold_id: str | None = None,
) -> Scaffold | None:
    """Select a scaffold.

    Selection priority:
    1. Explicit caller_scaffold_id
    2. Tool match that declares the given risk tier
    3. Tool match that declares no risk tiers (tier-neutral)
    4. None (caller handles default)
    """
    if caller_scaffold_id:
        scaffold = registry.get(caller_scaffold_id)
        if scaffold:
            logger.info("Scaffold selected by caller: %s", scaffold.id)
            return scaffold
        logger.warning(
            "Caller requested scaffold '%s' but not found, falling back",
            caller_scaffold_id,
        )

    candidates = registry.find_by_tool(tool_name)

    if risk_tier:
        for scaffold in candidates:
            if risk_tier in scaffold.applicability.risk_tiers:
                logger.info(
                    "Scaffold selected by risk tier: %s (tier=%s)", scaffold.id, risk_tier
                )
                return scaffold

    for scaffold in candidates:
        if not scaffold.applicability.risk_tiers:
            logger.info("Scaffold selected by tool match: %s (tool=%s)", scaffold.id, tool_name)
            return scaffold

    return None
