"""Generation service - transcript to social media content.

Single responsibility: run one validated request through cleanup, prompt
building, provider fallback and response parsing.
"""

import dataclasses
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from ..content import ResponseParser, clean_transcript
from ..llm import AllProvidersFailed, ProviderFailure, ProviderManager, get_provider_manager
from ..prompts import PromptBuilder, get_prompt_builder
from ..validation import GenerateRequest
from .exceptions import ProvidersUnavailableError

logger = logging.getLogger(__name__)


def failure_report(failures: Sequence[ProviderFailure]) -> list[dict[str, Any]]:
    """Render failure records for logs or API responses."""
    return [dataclasses.asdict(failure) for failure in failures]


@dataclass
class GeneratedContent:
    """Result of one content generation request.

    Attributes:
        content_type: The requested content type
        fields: Parsed sections (e.g. title/description, linkedin_post, keywords)
        model_used: Model that produced the reply (telemetry)
        provider_used: Provider that produced the reply (telemetry)
        transcript_cleaned: Whether transcript cleanup removed a trailing character
        failures: Providers exhausted before the one that answered
    """

    content_type: str
    fields: dict[str, Any]
    model_used: str
    provider_used: str
    transcript_cleaned: bool = False
    failures: list[ProviderFailure] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Flatten into a JSON-serializable response body."""
        return {
            **self.fields,
            "model_used": self.model_used,
            "provider_used": self.provider_used,
            "transcript_cleaned": self.transcript_cleaned,
        }


class GenerationService:
    """Service for content generation operations.

    The provider manager is resolved lazily so that constructing the service
    never requires configured credentials.
    """

    def __init__(
        self,
        manager: ProviderManager | None = None,
        prompt_builder: PromptBuilder | None = None,
        parser: ResponseParser | None = None,
    ) -> None:
        self._manager = manager
        self._prompt_builder = prompt_builder or get_prompt_builder()
        self._parser = parser or ResponseParser()

    @property
    def manager(self) -> ProviderManager:
        """Get the provider manager, building it from settings on first use.

        Raises:
            NoProvidersConfigured: If no backend credential is configured
        """
        if self._manager is None:
            self._manager = get_provider_manager()
        return self._manager

    async def generate(self, request: GenerateRequest) -> GeneratedContent:
        """Generate content for a validated request.

        Args:
            request: Validated generation request

        Returns:
            GeneratedContent with parsed sections and telemetry

        Raises:
            ProvidersUnavailableError: If every configured provider failed
            NoProvidersConfigured: If no backend credential is configured
        """
        transcript, cleaned = clean_transcript(request.transcript)
        prompt = self._prompt_builder.build(
            request.content_type,
            transcript,
            video_duration=request.video_duration,
            keywords=request.keywords,
        )

        try:
            result = await self.manager.generate_content(prompt)
        except AllProvidersFailed as e:
            logger.error("Content generation failed: %s", e.summary())
            raise ProvidersUnavailableError(e.failures) from e

        logger.debug("Raw %s response from %s:\n%s", request.content_type, result.model, result.text)
        fields = self._parser.parse(request.content_type, result.text)
        logger.debug("Parsed %s response: %s", request.content_type, fields)

        return GeneratedContent(
            content_type=request.content_type,
            fields=fields,
            model_used=result.model,
            provider_used=result.provider,
            transcript_cleaned=cleaned,
            failures=list(result.failures),
        )
