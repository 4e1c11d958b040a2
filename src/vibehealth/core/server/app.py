"""VibeHealth lifestyle MCP server — application factory.

This module provides:
- create_app() for testability (integration tests create fresh server instances)
- Module-level `mcp` variable for FastMCP discovery
"""

from __future__ import annotations

import logging
from pathlib import Path

from fastmcp import FastMCP

from vibehealth.core.config.settings import Settings, get_settings
from vibehealth.core.llm.client import InnerLLMClient
from vibehealth.core.llm.provider import LLMProvider, create_provider
from vibehealth.core.scaffold.engine import ScaffoldEngine
from vibehealth.core.scaffold.loader import load_scaffold_directory
from vibehealth.core.scaffold.registry import ScaffoldRegistry
from vibehealth.domains.lifestyle.prompts.lifestyle_prompts import register_lifestyle_prompts
from vibehealth.domains.lifestyle.resources.lifestyle_resources import (
    register_lifestyle_resources,
)
from vibehealth.domains.lifestyle.tools.lifestyle_risk_tools import (
    register_lifestyle_risk_tools,
)

logger = logging.getLogger(__name__)

# Scaffold YAML definitions live under src/vibehealth/domains/lifestyle/scaffolds/
SCAFFOLD_DIR = (
    Path(__file__).resolve().parent.parent.parent / "domains" / "lifestyle" / "scaffolds"
)


def _resolve_provider(settings: Settings) -> LLMProvider:
    """Pick the configured provider, or the mock when its API key is missing."""
    provider_name = settings.llm_provider
    api_key = ""
    model = ""
    if provider_name == "gemini":
        api_key, model = settings.gemini_api_key, settings.gemini_model
    elif provider_name == "anthropic":
        api_key, model = settings.anthropic_api_key, settings.anthropic_model
    elif provider_name == "openai":
        api_key, model = settings.openai_api_key, settings.openai_model

    if provider_name != "mock" and not api_key:
        logger.warning(
            "No API key configured for provider '%s'; falling back to mock provider",
            provider_name,
        )
        provider_name = "mock"

    return create_provider(provider_name=provider_name, api_key=api_key, model=model)


def create_app(*, provider_override: LLMProvider | None = None) -> FastMCP:
    """Create and configure the VibeHealth MCP server.

    1. Creates the FastMCP server instance
    2. Loads the scaffold registry and engine
    3. Creates the inner LLM client
    4. Registers tools, resources and prompts
    """
    settings = get_settings()

    server = FastMCP(
        "VibeHealth Lifestyle",
        instructions=(
            "Lifestyle strain estimation server. Scores self-reported habits "
            "(age, height, weight, smoking, drinking, activity, stress) with a "
            "fixed heuristic formula and adds short preventive suggestions "
            "from an inner LLM. Not a clinical model."
        ),
    )

    registry = ScaffoldRegistry()
    scaffold_count = load_scaffold_directory(SCAFFOLD_DIR, registry)
    logger.info("Loaded %d scaffolds from %s", scaffold_count, SCAFFOLD_DIR)
    engine = ScaffoldEngine(registry)

    provider = provider_override if provider_override is not None else _resolve_provider(settings)
    llm_client = InnerLLMClient(
        provider=provider,
        max_tokens=settings.insight_max_tokens,
        temperature=settings.insight_temperature,
    )

    @server.tool
    def health_check() -> dict:
        """Check server health and return basic status information."""
        return {
            "status": "ok",
            "server": "VibeHealth Lifestyle",
            "version": "0.1.0",
            "scaffolds_loaded": scaffold_count,
            "llm_provider": llm_client.provider_name,
        }

    register_lifestyle_risk_tools(server, engine, llm_client, settings)
    register_lifestyle_resources(server, registry)
    register_lifestyle_prompts(server)

    return server


# Module-level instance for FastMCP discovery ("...app.py:mcp").
# Lazy: only created when accessed, not when tests import create_app.
def __getattr__(name: str):
    if name == "mcp":
        global mcp  # noqa: PLW0603
        mcp = create_app()
        return mcp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
