"""Input validation models using Pydantic."""

from .models import MAX_TRANSCRIPT_LENGTH, GenerateRequest

__all__ = [
    "GenerateRequest",
    "MAX_TRANSCRIPT_LENGTH",
]
