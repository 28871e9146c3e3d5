"""Shared test fixtures for ContentPilot."""

import asyncio
from collections.abc import Callable, Mapping
from unittest.mock import MagicMock

import pytest

from contentpilot.llm import LLMProvider


class FakeProvider(LLMProvider):
    """Provider with scripted per-model outcomes and no network access.

    ``outcomes`` maps a model name to a reply string, an exception instance
    to raise, or a number of seconds to hang for (to trigger the timeout).
    """

    NAME = "Fake"
    DEFAULT_MODELS = ("fake-1",)

    def __init__(
        self,
        name: str,
        models: list[str],
        outcomes: Mapping[str, object],
        timeout: float | None = 1.0,
    ) -> None:
        super().__init__(api_key="test-key", models=models, timeout=timeout)
        self._name = name
        self.outcomes = dict(outcomes)
        self.calls: list[tuple[str, str]] = []

    @property
    def name(self) -> str:
        return self._name

    def _create_client(self, model: str):
        return MagicMock()

    async def _complete(self, model: str, prompt: str) -> str:
        self.calls.append((model, prompt))
        outcome = self.outcomes[model]
        if isinstance(outcome, BaseException):
            raise outcome
        if isinstance(outcome, (int, float)):
            await asyncio.sleep(outcome)
            return "too late"
        return str(outcome)


@pytest.fixture
def make_provider() -> Callable[..., FakeProvider]:
    """Factory for scripted fake providers."""

    def _make(
        name: str,
        outcomes: Mapping[str, object],
        timeout: float | None = 1.0,
    ) -> FakeProvider:
        return FakeProvider(name, list(outcomes), outcomes, timeout=timeout)

    return _make


@pytest.fixture
def sample_transcript() -> str:
    """Sample speech transcript with a trailing transcription artifact."""
    return (
        "Heute schauen wir uns an wie man mit PHPUnit und Symfony "
        "saubere Tests schreibt und warum das im Team hilft a"
    )


@pytest.fixture
def youtube_reply() -> str:
    """Raw model reply for a YouTube request with timestamps."""
    return (
        "TRANSCRIPT:\n"
        "Heute schauen wir uns an, wie man mit PHPUnit und Symfony saubere Tests schreibt.\n\n"
        "TITLE:\n"
        "PHPUnit und Symfony: saubere Tests im Team\n\n"
        "DESCRIPTION:\n"
        "Absatz eins.\n\nAbsatz zwei.\n\nAbsatz drei.\n\n"
        "TIMESTAMPS:\n"
        "- 0:00 Einstieg\n"
        "- 1:49 PHPUnit Setup\n"
        "- 3:38 Symfony Tests\n"
        "- 5:27 Team Workflow\n"
        "- 7:16 Fazit\n"
    )


@pytest.fixture
def mock_chat_response() -> MagicMock:
    """Chat model response in the block-list format of newer models."""
    response = MagicMock()
    response.content = [{"type": "text", "text": "Mocked "}, {"type": "text", "text": "reply"}]
    return response
