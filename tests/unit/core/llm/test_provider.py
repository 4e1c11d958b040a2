"""Unit tests for provider selection."""

from __future__ import annotations

import pytest

from vibehealth.core.config.settings import Settings
from vibehealth.core.llm.provider import LLMProvider, create_provider
from vibehealth.core.llm.providers import MockProvider
from vibehealth.core.server.app import _resolve_provider


def test_create_mock_provider():
    provider = create_provider("mock")
    assert isinstance(provider, MockProvider)
    assert isinstance(provider, LLMProvider)


def test_unknown_provider_raises():
    with pytest.raises(ValueError, match="Unknown LLM provider"):
        create_provider("llama-on-a-toaster")


def test_missing_api_key_falls_back_to_mock():
    provider = _resolve_provider(Settings(llm_provider="gemini", gemini_api_key=""))
    assert provider.name == "mock"


def test_mock_setting_needs_no_key():
    provider = _resolve_provider(Settings(llm_provider="mock"))
    assert isinstance(provider, MockProvider)


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LLM_PROVIDER", "openai")
    monkeypatch.setenv("INSIGHT_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("DEFAULT_PRIVACY_MODE", "strict")
    settings = Settings()
    assert settings.llm_provider == "openai"
    assert settings.insight_timeout_seconds == 5.0
    assert settings.default_privacy_mode == "strict"
    assert settings.vibe_host == "127.0.0.1"
