"""LLM provider abstraction layer.

Provides a unified interface over the supported LLM backends and the
fallback manager that tries them in priority order.
"""

from .anthropic import AnthropicProvider
from .base import (
    AllProvidersFailed,
    CompletionResult,
    LLMError,
    LLMProvider,
    LLMResponseError,
    ModelAttemptFailed,
    NoProvidersConfigured,
    ProviderExhausted,
    ProviderFailure,
)
from .factory import LLMFactory
from .gemini import GeminiProvider
from .manager import ProviderManager, get_provider_manager

__all__ = [
    "AllProvidersFailed",
    "AnthropicProvider",
    "CompletionResult",
    "GeminiProvider",
    "LLMError",
    "LLMFactory",
    "LLMProvider",
    "LLMResponseError",
    "ModelAttemptFailed",
    "NoProvidersConfigured",
    "ProviderExhausted",
    "ProviderFailure",
    "ProviderManager",
    "get_provider_manager",
]
