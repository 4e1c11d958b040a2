"""Scaffold engine — orchestrates selection and application of scaffolds."""

from __future__ import annotations

import logging
from typing import Any

from vibehealth.core.scaffold.matcher import match_scaffold
from vibehealth.core.scaffold.models import AssembledPrompt, Scaffold
from vibehealth.core.scaffold.registry import ScaffoldRegistry
from vibehealth.core.scaffold.renderer import render_scaffold

logger = logging.getLogger(__name__)

DEFAULT_SCAFFOLD_ID = "lifestyle_insights"


class ScaffoldNotFoundError(Exception):
    """Raised when no scaffold can be selected for a request."""


class ScaffoldEngine:
    """Selects the right scaffold and assembles it into an LLM prompt."""

    def __init__(self, registry: ScaffoldRegistry) -> None:
        self.registry = registry

    def select(
        self,
        tool_name: str,
        caller_scaffold_id: str | None = None,
        tool_context: dict[str, Any] | None = None,
    ) -> Scaffold:
        """Select the best scaffold for this invocation.

        ``tool_context["risk_tier"]`` routes to a tier-specific scaffold when
        one is registered for the tool. Raises ScaffoldNotFoundError if
        nothing matches and no default exists.
        """
        risk_tier = None
        if isinstance(tool_context, dict):
            tier = tool_context.get("risk_tier")
            risk_tier = str(getattr(tier, "value", tier)) if tier else None

        scaffold = match_scaffold(
            registry=self.registry,
            tool_name=tool_name,
            risk_tier=risk_tier,
            caller_scaffold_id=caller_scaffold_id,
        )
        if scaffold:
            return scaffold

        default = self.registry.get(DEFAULT_SCAFFOLD_ID)
        if default:
            logger.info("Using default scaffold: %s", DEFAULT_SCAFFOLD_ID)
            return default

        raise ScaffoldNotFoundError(
            f"No scaffold found for tool='{tool_name}', tier={risk_tier!r}, "
            f"and no default scaffold '{DEFAULT_SCAFFOLD_ID}' exists"
        )

    def apply(
        self,
        scaffold: Scaffold,
        user_query: str,
        data_context: dict[str, Any],
        tone_variant: str | None = None,
    ) -> AssembledPrompt:
        """Combine scaffold + user query + data into a complete LLM prompt."""
        return render_scaffold(
            scaffold=scaffold,
            user_query=user_query,
            data_context=data_context,
            tone_variant=tone_variant,
        )
