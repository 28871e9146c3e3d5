"""Tests for configuration management."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from contentpilot.config import CONTENT_TYPES, Settings


def make_settings(**overrides) -> Settings:
    """Create a Settings instance with test defaults and no .env file."""
    defaults = {
        "google_gemini_api_key": "",
        "anthropic_api_key": "",
    }
    return Settings(_env_file=None, **(defaults | overrides))  # type: ignore[arg-type]


class TestSettings:
    """Test Settings class."""

    def test_default_values(self) -> None:
        settings = make_settings()
        assert settings.gemini_models_list == ["gemini-2.5-pro", "gemini-2.5-flash"]
        assert settings.anthropic_models_list == ["claude-sonnet-4-5", "claude-3-5-haiku-latest"]
        assert settings.llm_temperature == 0.7
        assert settings.llm_timeout_seconds == 60.0
        assert settings.default_content_type == "youtube"

    @pytest.mark.parametrize(
        ("models_input", "expected"),
        [
            ("m1, m2, m3", ["m1", "m2", "m3"]),
            ("  m1  ,  m2  ", ["m1", "m2"]),
            ("", []),
            ("single-model", ["single-model"]),
        ],
        ids=["csv", "whitespace", "empty", "single"],
    )
    def test_gemini_models_list(self, models_input: str, expected: list[str]) -> None:
        settings = make_settings(gemini_models=models_input)
        assert settings.gemini_models_list == expected

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANTHROPIC_MODELS", "claude-a,claude-b")
        monkeypatch.setenv("LLM_TIMEOUT_SECONDS", "12.5")
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.anthropic_models_list == ["claude-a", "claude-b"]
        assert settings.llm_timeout_seconds == 12.5

    def test_invalid_content_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_settings(default_content_type="myspace")

    def test_content_types(self) -> None:
        assert CONTENT_TYPES == ("youtube", "linkedin", "twitter", "instagram", "tiktok", "keywords")


class TestLogFilePath:
    def test_disabled_by_default(self) -> None:
        assert make_settings().log_file_path is None

    def test_path(self) -> None:
        settings = make_settings(log_file="logs/contentpilot.log")
        assert settings.log_file_path == Path("logs/contentpilot.log")
