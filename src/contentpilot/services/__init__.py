"""Service layer for ContentPilot business logic."""

from .exceptions import GenerationError, ProvidersUnavailableError, ServiceError
from .generation_service import GeneratedContent, GenerationService, failure_report

__all__ = [
    "GeneratedContent",
    "GenerationError",
    "GenerationService",
    "ProvidersUnavailableError",
    "ServiceError",
    "failure_report",
]
