"""Provider manager for resilient content generation.

Tries every configured backend in priority order, each of which tries its
own models in order, and returns the first completion. When every backend
is exhausted the caller gets a single AllProvidersFailed carrying the full
failure log of that call.
"""

import dataclasses
import logging
from collections.abc import Sequence
from typing import Any

from ..config import settings
from ..utils.logging import llm_context
from .base import (
    AllProvidersFailed,
    CompletionResult,
    LLMProvider,
    NoProvidersConfigured,
    ProviderExhausted,
    ProviderFailure,
)
from .factory import LLMFactory

logger = logging.getLogger(__name__)


class ProviderManager:
    """Coordinates backend-level fallback on top of model-level fallback.

    The provider list is fixed at construction and never empty. Attempts are
    strictly sequential: one model call in flight per generation.

    The failure log of a call travels with its outcome (CompletionResult.failures
    or AllProvidersFailed.failures). ``last_errors`` is a convenience copy of the
    log of the most recently completed call; it is replaced in one assignment
    when a call finishes and is never appended to in place.
    """

    def __init__(self, providers: Sequence[LLMProvider]) -> None:
        """Initialize the manager.

        Args:
            providers: Providers in priority order

        Raises:
            NoProvidersConfigured: If no provider is given
        """
        self._providers: tuple[LLMProvider, ...] = tuple(providers)
        if not self._providers:
            raise NoProvidersConfigured()
        self._last_errors: tuple[ProviderFailure, ...] = ()

    @classmethod
    def from_credentials(
        cls,
        google_api_key: str | None = None,
        anthropic_api_key: str | None = None,
        *,
        gemini_models: Sequence[str] | None = None,
        anthropic_models: Sequence[str] | None = None,
        temperature: float | None = None,
        timeout: float | None = None,
    ) -> "ProviderManager":
        """Build a manager from backend credentials.

        Every present credential registers its provider; Gemini always comes
        before Anthropic regardless of which keys were supplied.

        Raises:
            NoProvidersConfigured: If no credential is present
        """
        providers = LLMFactory.create_configured(
            {"gemini": google_api_key, "anthropic": anthropic_api_key},
            models={"gemini": gemini_models, "anthropic": anthropic_models},
            temperature=temperature,
            timeout=timeout,
        )
        return cls(providers)

    @classmethod
    def from_settings(cls) -> "ProviderManager":
        """Build a manager from the application settings."""
        return cls.from_credentials(
            google_api_key=settings.google_gemini_api_key,
            anthropic_api_key=settings.anthropic_api_key,
        )

    @property
    def providers(self) -> tuple[LLMProvider, ...]:
        """Return the registered providers in priority order."""
        return self._providers

    @property
    def last_errors(self) -> list[ProviderFailure]:
        """Failure log of the most recently completed call."""
        return list(self._last_errors)

    async def generate_content(self, prompt: str) -> CompletionResult:
        """Generate content with the first provider that succeeds.

        Args:
            prompt: Fully rendered prompt, forwarded unmodified to each provider

        Returns:
            CompletionResult whose ``failures`` lists providers exhausted
            before the one that answered

        Raises:
            AllProvidersFailed: If every provider was exhausted
        """
        failures: list[ProviderFailure] = []

        for provider in self._providers:
            try:
                result = await provider.generate_content(prompt)
            except ProviderExhausted as e:
                failure = e.to_failure()
                failures.append(failure)
                logger.warning(
                    "Provider exhausted: %s (%s)",
                    provider.name,
                    failure.message,
                    extra=llm_context(provider.name),
                )
                continue

            if failures:
                logger.info(
                    "Served by %s/%s after %d failed provider(s)",
                    result.provider,
                    result.model,
                    len(failures),
                    extra=llm_context(result.provider, result.model),
                )
            self._last_errors = tuple(failures)
            return dataclasses.replace(result, failures=tuple(failures))

        self._last_errors = tuple(failures)
        logger.error("All %d AI providers failed", len(self._providers))
        raise AllProvidersFailed(failures)

    def get_status(self) -> dict[str, Any]:
        """Get current configuration and last-call status of the manager."""
        return {
            "providers": [
                {"name": provider.name, "models": list(provider.models)}
                for provider in self._providers
            ],
            "last_errors": [dataclasses.asdict(failure) for failure in self.last_errors],
        }


# Global instance, built lazily from settings
_provider_manager: ProviderManager | None = None


def get_provider_manager() -> ProviderManager:
    """Get the global provider manager instance.

    Raises:
        NoProvidersConfigured: If no backend credential is configured
    """
    global _provider_manager
    if _provider_manager is None:
        _provider_manager = ProviderManager.from_settings()
    return _provider_manager
