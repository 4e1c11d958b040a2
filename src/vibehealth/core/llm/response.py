"""Response parsing and guardrail enforcement for inner LLM output."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field

from vibehealth.core.scaffold.models import Scaffold

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL | re.IGNORECASE)

# Phrasing that reads as clinical advice regardless of scaffold.
_CLINICAL_PHRASES = (
    "you have been diagnosed",
    "you are suffering from",
    "you should take",
    "stop taking your",
    "you will develop",
    "consult your doctor about medication",
)


class ResponseParseError(ValueError):
    """Raised when LLM output cannot be read as a list of suggestions."""


@dataclass
class GuardrailCheck:
    """Result of checking suggestions against scaffold guardrails."""

    passed: bool
    flags: list[str] = field(default_factory=list)


def _term_pattern(term: str) -> re.Pattern[str]:
    return re.compile(r"\b" + re.escape(term) + r"\b", re.IGNORECASE)


def parse_suggestions(content: str) -> list[str]:
    """Read a JSON array of strings from raw LLM output.

    Tolerates a fenced ```json block or leading prose around the array.
    Non-string and blank items are dropped.
    """
    text = content.strip()
    fenced = _FENCE_RE.search(text)
    if fenced:
        text = fenced.group(1)

    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        start, end = text.find("["), text.rfind("]")
        if start == -1 or end <= start:
            raise ResponseParseError("LLM response contains no JSON array") from None
        try:
            data = json.loads(text[start : end + 1])
        except json.JSONDecodeError as exc:
            raise ResponseParseError(f"LLM response is not valid JSON: {exc}") from exc

    if isinstance(data, dict):
        # Some models wrap the array: {"suggestions": [...]}
        data = next((v for v in data.values() if isinstance(v, list)), None)
    if not isinstance(data, list):
        raise ResponseParseError("LLM response is not a JSON array")

    return [item.strip() for item in data if isinstance(item, str) and item.strip()]


def check_guardrails(suggestions: list[str], scaffold: Scaffold) -> GuardrailCheck:
    """Flag suggestions that name prohibited terms or read as clinical advice."""
    flags: list[str] = []

    for index, text in enumerate(suggestions):
        lowered = text.lower()
        for term in scaffold.guardrails.prohibited_terms:
            if _term_pattern(term).search(text):
                flags.append(f"prohibited_term_detected[{index}]: {term}")
        for phrase in _CLINICAL_PHRASES:
            if phrase in lowered:
                flags.append(f"clinical_phrase_detected[{index}]: {phrase}")

    if flags:
        logger.warning("Guardrail flags for scaffold %s: %s", scaffold.id, flags)

    return GuardrailCheck(passed=not flags, flags=flags)


def sanitize_suggestions(
    suggestions: list[str], guardrail_check: GuardrailCheck
) -> list[str]:
    """Drop every suggestion that triggered a guardrail flag."""
    if guardrail_check.passed:
        return suggestions

    flagged: set[int] = set()
    for flag in guardrail_check.flags:
        match = re.search(r"\[(\d+)\]", flag)
        if match:
            flagged.add(int(match.group(1)))

    return [s for i, s in enumerate(suggestions) if i not in flagged]
