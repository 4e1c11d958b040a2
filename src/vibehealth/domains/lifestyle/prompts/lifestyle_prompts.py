"""MCP Prompts — pre-built interaction templates for lifestyle check-ins."""

from __future__ import annotations

from fastmcp import FastMCP


def register_lifestyle_prompts(mcp: FastMCP) -> None:
    """Register lifestyle domain MCP prompts."""

    @mcp.prompt()
    def lifestyle_checkup_prompt() -> str:
        """Prompt template for a full lifestyle strain check-up."""
        return """I'd like a quick lifestyle strain check-up. Please:

1. Ask me for my age, height, weight, smoking and drinking habits, activity level and stress (1-10)
2. Run the analyze_lifestyle tool with my answers
3. Explain my risk tier and impact score in plain language
4. Share the three suggestions and help me pick one to start this week

Keep it friendly. I know this is an estimate, not a medical assessment."""

    @mcp.prompt()
    def habit_review_prompt(focus_area: str = "stress") -> str:
        """Prompt template for exploring how one habit moves the score."""
        return f"""I want to understand how my {focus_area} affects my lifestyle strain score.

1. Score my current profile with predict_lifestyle_risk
2. Score it again with a realistic improvement in {focus_area}
3. Compare the two impact scores and risk tiers
4. Suggest one small step toward the improved version"""
