"""Data models for prompt scaffolds."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ScaffoldApplicability:
    """Defines when a scaffold should be selected."""

    tools: list[str] = field(default_factory=list)
    risk_tiers: list[str] = field(default_factory=list)


@dataclass
class ScaffoldFraming:
    """The voice the inner LLM adopts."""

    role: str = ""
    perspective: str = ""
    tone: str = ""
    tone_variants: dict[str, str] = field(default_factory=dict)


@dataclass
class ScaffoldOutputCalibration:
    """Controls the shape of LLM output."""

    format: str = "json_string_array"
    item_count: int = 3
    max_words_per_item: int = 15
    must_include: list[str] = field(default_factory=list)
    never_include: list[str] = field(default_factory=list)


@dataclass
class ScaffoldGuardrails:
    """Safety boundaries for the inner LLM."""

    prohibited_actions: list[str] = field(default_factory=list)
    prohibited_terms: list[str] = field(default_factory=list)


@dataclass
class Scaffold:
    """A complete prompt scaffold for one kind of request."""

    id: str
    version: str
    domain: str
    display_name: str
    description: str
    applicability: ScaffoldApplicability
    framing: ScaffoldFraming
    reasoning_framework: dict[str, Any]
    output_calibration: ScaffoldOutputCalibration
    guardrails: ScaffoldGuardrails
    tags: list[str] = field(default_factory=list)


@dataclass
class AssembledPrompt:
    """The final prompt sent to the inner LLM after scaffold application."""

    system_message: str
    user_message: str
    metadata: dict[str, Any] = field(default_factory=dict)
