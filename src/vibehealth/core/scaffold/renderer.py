"""Scaffold renderer — assembles scaffolds into LLM prompts."""

from __future__ import annotations

import json
from typing import Any

from vibehealth.core.scaffold.models import AssembledPrompt, Scaffold


def render_scaffold(
    scaffold: Scaffold,
    user_query: str,
    data_context: dict[str, Any],
    tone_variant: str | None = None,
) -> AssembledPrompt:
    """Combine scaffold + user query + data into a complete LLM prompt."""
    effective_tone = tone_variant if tone_variant in scaffold.framing.tone_variants else None

    return AssembledPrompt(
        system_message=_build_system_message(scaffold, effective_tone),
        user_message=_build_user_message(user_query, data_context),
        metadata={
            "scaffold_id": scaffold.id,
            "scaffold_version": scaffold.version,
            "tone": effective_tone or scaffold.framing.tone,
            "output_format": scaffold.output_calibration.format,
        },
    )


def _bullets(items: list[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def _build_system_message(scaffold: Scaffold, tone_variant: str | None) -> str:
    parts: list[str] = []

    parts.append(f"## Your Role\n{scaffold.framing.role}")
    if scaffold.framing.perspective:
        parts.append(f"## Your Perspective\n{scaffold.framing.perspective}")

    if tone_variant:
        parts.append(f"## Communication Tone\n{scaffold.framing.tone_variants[tone_variant]}")
    else:
        parts.append(f"## Communication Tone\n{scaffold.framing.tone}")

    steps = scaffold.reasoning_framework.get("steps", [])
    if steps:
        steps_text = "\n".join(f"{i+1}. {step}" for i, step in enumerate(steps))
        parts.append(f"## Reasoning Steps\nFollow these steps in order:\n{steps_text}")

    calibration = scaffold.output_calibration
    parts.append(
        "## Output Format\n"
        f"Return exactly {calibration.item_count} short, actionable lifestyle suggestions "
        "as a JSON array of strings and nothing else.\n"
        f"Each suggestion should be under {calibration.max_words_per_item} words."
    )

    if calibration.must_include:
        parts.append(f"## Required Elements\nYour suggestions MUST:\n{_bullets(calibration.must_include)}")

    if calibration.never_include:
        parts.append(
            f"## Prohibited Elements\nYour suggestions must NEVER include:\n"
            f"{_bullets(calibration.never_include)}"
        )

    if scaffold.guardrails.prohibited_actions:
        parts.append(
            f"## Prohibited Actions\nYou must NEVER:\n{_bullets(scaffold.guardrails.prohibited_actions)}"
        )

    return "\n\n".join(parts)


def _build_user_message(user_query: str, data_context: dict[str, Any]) -> str:
    parts = [f"## User Request\n{user_query}"]
    if data_context:
        parts.append(
            f"## Lifestyle Data\n```json\n{json.dumps(data_context, indent=2, default=str)}\n```"
        )
    return "\n\n".join(parts)
