"""Service layer exceptions.

Centralized exception hierarchy for the service layer.
"""

from collections.abc import Sequence

from ..llm.base import ProviderFailure


class ServiceError(Exception):
    """Base exception for service errors."""

    pass


class GenerationError(ServiceError):
    """Raised when content generation fails."""

    pass


class ProvidersUnavailableError(GenerationError):
    """Raised when every configured AI provider failed (service unavailable).

    Attributes:
        failures: Per-provider failure records of the failed call
    """

    def __init__(self, failures: Sequence[ProviderFailure]) -> None:
        self.failures = tuple(failures)
        names = ", ".join(failure.provider for failure in self.failures) or "none"
        super().__init__(f"AI service unavailable: all providers failed ({names})")
