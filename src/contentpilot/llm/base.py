"""Base LLM provider interface.

Defines the abstract provider that every backend extends, the shared
model-fallback loop, the completion result type and the error taxonomy
used by the provider manager.
"""

import asyncio
import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from langchain_core.language_models.chat_models import BaseChatModel

from ..utils.logging import llm_context

logger = logging.getLogger(__name__)

# Status codes as SDKs word them: "Error code: 429 - ..." (Anthropic),
# "429 Resource has been exhausted" (Google), "status=503"
_STATUS_CODE_PATTERN = re.compile(
    r"(?:^|(?:error code|status(?: code)?)\s*[:=]?\s*)([45]\d{2})\b", re.IGNORECASE
)


@dataclass(frozen=True)
class ProviderFailure:
    """One exhausted provider in a failure log."""

    provider: str
    message: str
    status_code: int | None = None


@dataclass(frozen=True)
class CompletionResult:
    """Successful outcome of a generation attempt.

    ``model`` and ``provider`` are telemetry only. ``failures`` lists the
    providers exhausted earlier in the same call, in trial order.
    """

    text: str
    model: str
    provider: str = ""
    failures: tuple[ProviderFailure, ...] = field(default_factory=tuple)


class LLMError(Exception):
    """Base exception for LLM errors."""

    pass


class LLMResponseError(LLMError):
    """Raised when LLM returns invalid response."""

    pass


class ModelAttemptFailed(LLMError):
    """One model call failed. Recorded by the provider, never surfaced alone."""

    def __init__(
        self,
        provider: str,
        model: str,
        message: str,
        status_code: int | None = None,
    ) -> None:
        self.provider = provider
        self.model = model
        self.message = message
        self.status_code = status_code
        super().__init__(f"{provider} model '{model}' failed: {message}")


class ProviderExhausted(LLMError):
    """Every model of one provider failed.

    Attributes:
        provider: Name of the exhausted provider
        attempts: Per-model failures in trial order
    """

    def __init__(self, provider: str, attempts: Sequence[ModelAttemptFailed]) -> None:
        self.provider = provider
        self.attempts = tuple(attempts)
        super().__init__(f"{provider} failed: {self.reason}")

    @property
    def reason(self) -> str:
        """Summarize the per-model failures into one line."""
        if not self.attempts:
            return "no models attempted"
        return "; ".join(f"{a.model}: {a.message}" for a in self.attempts)

    @property
    def status_code(self) -> int | None:
        """Return the most recent status code reported by a model attempt."""
        for attempt in reversed(self.attempts):
            if attempt.status_code is not None:
                return attempt.status_code
        return None

    def to_failure(self) -> ProviderFailure:
        """Convert to a failure log record."""
        return ProviderFailure(self.provider, self.reason, self.status_code)


class AllProvidersFailed(LLMError):
    """Every configured provider was exhausted.

    Carries the complete failure log of the call that raised it.
    """

    def __init__(self, failures: Sequence[ProviderFailure]) -> None:
        self.failures = tuple(failures)
        super().__init__(f"All AI providers failed: {self.summary()}")

    def summary(self) -> str:
        """Human-readable breakdown of what was tried and why it failed."""
        parts = []
        for failure in self.failures:
            code = f" [{failure.status_code}]" if failure.status_code is not None else ""
            parts.append(f"{failure.provider}{code}: {failure.message}")
        return " | ".join(parts)


class NoProvidersConfigured(LLMError):
    """Raised at construction when no backend credential was supplied."""

    def __init__(self, message: str = "No API keys provided for AI providers") -> None:
        super().__init__(message)


def sanitize_api_key(api_key: str) -> str:
    """Normalize an API key: trim whitespace and strip quote characters."""
    return api_key.strip().replace('"', "").replace("'", "").strip()


def extract_status_code(error: BaseException) -> int | None:
    """Best-effort status code for a backend error.

    Looks at the ``status_code`` attribute (Anthropic / httpx errors), then an
    integer ``code`` attribute, then a code the message states as one: at the
    start, or after "Error code" / "status". Other numbers are ignored.
    """
    status = getattr(error, "status_code", None)
    if isinstance(status, int):
        return status
    code = getattr(error, "code", None)
    if isinstance(code, int) and not isinstance(code, bool):
        return code
    match = _STATUS_CODE_PATTERN.search(str(error))
    return int(match.group(1)) if match else None


def parse_content(content: Any) -> str:
    """Parse chat model response content to string.

    Handles plain strings and the block lists returned by newer Gemini and
    Claude models ([{'type': 'text', 'text': '...'}]).

    Raises:
        LLMResponseError: If the content has an unexpected shape
    """
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for item in content:
            if isinstance(item, dict) and "text" in item:
                parts.append(item["text"])
            elif isinstance(item, str):
                parts.append(item)
        return "".join(parts)
    raise LLMResponseError(f"Unexpected response content type: {type(content).__name__}")


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    A provider wraps one backend and owns an ordered list of models, most
    preferred first. ``generate_content`` tries each model once, in order,
    and returns the first non-empty completion.

    To add a new provider:
    1. Create a new class that extends LLMProvider
    2. Set NAME and DEFAULT_MODELS, implement _create_client()
    3. Register it in LLMFactory.PROVIDERS (llm/factory.py)
    """

    NAME: str = ""
    DEFAULT_MODELS: tuple[str, ...] = ()

    def __init__(
        self,
        api_key: str,
        models: Sequence[str] | None = None,
        temperature: float = 0.7,
        max_output_tokens: int = 4096,
        timeout: float | None = 60.0,
    ) -> None:
        """Initialize the provider.

        Args:
            api_key: API key for the backend, normalized once here
            models: Model identifiers in trial order. Defaults to DEFAULT_MODELS
            temperature: Sampling temperature
            max_output_tokens: Completion length limit
            timeout: Per-attempt timeout in seconds (None disables it)

        Raises:
            ValueError: If the resulting model list is empty
        """
        self._api_key = sanitize_api_key(api_key)
        self._models: tuple[str, ...] = tuple(models) if models else self.DEFAULT_MODELS
        if not self._models:
            raise ValueError(f"{self.NAME or type(self).__name__} requires at least one model")
        self._temperature = temperature
        self._max_output_tokens = max_output_tokens
        self._timeout = timeout

    @property
    def name(self) -> str:
        """Return the human-readable provider name."""
        return self.NAME

    @property
    def models(self) -> tuple[str, ...]:
        """Return the model identifiers in trial order."""
        return self._models

    @abstractmethod
    def _create_client(self, model: str) -> BaseChatModel:
        """Build the LangChain chat model for one model identifier."""
        ...

    async def _complete(self, model: str, prompt: str) -> str:
        """Issue one completion request against a single model."""
        client = self._create_client(model)
        response = await client.ainvoke(prompt)
        return parse_content(response.content)

    async def generate_content(self, prompt: str) -> CompletionResult:
        """Generate a completion, falling back through this provider's models.

        Args:
            prompt: The prompt text, forwarded unmodified

        Returns:
            CompletionResult from the first model that answered

        Raises:
            ProviderExhausted: If every model failed
        """
        attempts: list[ModelAttemptFailed] = []

        for model in self._models:
            try:
                text = await asyncio.wait_for(self._complete(model, prompt), timeout=self._timeout)
            except TimeoutError:
                failure = ModelAttemptFailed(
                    self.name, model, f"timed out after {self._timeout}s"
                )
            except Exception as e:
                failure = ModelAttemptFailed(
                    self.name,
                    model,
                    str(e) or type(e).__name__,
                    status_code=extract_status_code(e),
                )
            else:
                if text.strip():
                    logger.info(
                        "%s: generated content with %s",
                        self.name,
                        model,
                        extra=llm_context(self.name, model),
                    )
                    return CompletionResult(text=text, model=model, provider=self.name)
                failure = ModelAttemptFailed(self.name, model, "empty response")

            logger.warning(
                "%s: %s failed (%s), trying next model",
                self.name,
                model,
                failure.message,
                extra=llm_context(self.name, model),
            )
            attempts.append(failure)

        raise ProviderExhausted(self.name, attempts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(models={list(self._models)!r})"
