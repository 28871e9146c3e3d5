"""LLM provider factory.

Centralizes provider instantiation and configuration.
"""

from collections.abc import Mapping, Sequence
from typing import Literal

from ..config import settings
from .anthropic import AnthropicProvider
from .base import LLMProvider, sanitize_api_key
from .gemini import GeminiProvider

ProviderType = Literal["gemini", "anthropic"]


class LLMFactory:
    """Factory for creating LLM providers.

    PROVIDERS order is the registration order: a configured Gemini backend
    always precedes a configured Anthropic backend.
    New providers can be added by:
    1. Creating a new provider class implementing LLMProvider
    2. Registering it in PROVIDERS dict (position = fallback priority)
    3. Adding a `<key>_models` setting
    """

    PROVIDERS: dict[str, type[LLMProvider]] = {
        "gemini": GeminiProvider,
        "anthropic": AnthropicProvider,
    }

    @classmethod
    def configured_models(cls, provider: str) -> list[str]:
        """Return the model order configured in settings for a provider."""
        return list(getattr(settings, f"{provider}_models_list", []))

    @classmethod
    def create(
        cls,
        provider: ProviderType,
        api_key: str,
        models: Sequence[str] | None = None,
        temperature: float | None = None,
        timeout: float | None = None,
    ) -> LLMProvider:
        """Create an LLM provider instance.

        Args:
            provider: Provider type
            api_key: Backend credential
            models: Model order. Defaults to settings, then the provider's defaults
            temperature: Sampling temperature. Defaults to config setting
            timeout: Per-attempt timeout in seconds. Defaults to config setting

        Returns:
            Configured LLMProvider instance

        Raises:
            ValueError: If provider type is unknown
        """
        if provider not in cls.PROVIDERS:
            raise ValueError(
                f"Unknown provider: {provider}. Available: {list(cls.PROVIDERS.keys())}"
            )

        provider_class = cls.PROVIDERS[provider]
        return provider_class(
            api_key=api_key,
            models=models or cls.configured_models(provider) or None,
            temperature=temperature if temperature is not None else settings.llm_temperature,
            max_output_tokens=settings.llm_max_output_tokens,
            timeout=timeout if timeout is not None else settings.llm_timeout_seconds,
        )

    @classmethod
    def create_configured(
        cls,
        credentials: Mapping[str, str | None],
        models: Mapping[str, Sequence[str] | None] | None = None,
        temperature: float | None = None,
        timeout: float | None = None,
    ) -> list[LLMProvider]:
        """Create every provider whose credential is present, in registration order.

        Blank or quote-only credentials count as absent.
        """
        models = models or {}
        providers: list[LLMProvider] = []
        for key in cls.PROVIDERS:
            api_key = credentials.get(key)
            if not api_key or not sanitize_api_key(api_key):
                continue
            providers.append(
                cls.create(
                    key,  # type: ignore[arg-type]
                    api_key,
                    models=models.get(key),
                    temperature=temperature,
                    timeout=timeout,
                )
            )
        return providers
