"""Input validation models using Pydantic.

These models validate user inputs before they reach business logic,
preventing invalid states and providing user-friendly error messages.
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config import CONTENT_TYPES, settings

MAX_TRANSCRIPT_LENGTH = 50_000

# M:SS, MM:SS or H:MM:SS
VIDEO_DURATION_PATTERN = re.compile(r"^\d{1,2}:[0-5]\d(?::[0-5]\d)?$")


class GenerateRequest(BaseModel):
    """Validated input for content generation."""

    model_config = ConfigDict(populate_by_name=True)

    transcript: str = Field(
        max_length=MAX_TRANSCRIPT_LENGTH,
        description="Raw speech transcript",
    )
    content_type: str = Field(
        default_factory=lambda: settings.default_content_type,
        alias="type",
        description="Content type to generate",
    )
    video_duration: str | None = Field(
        default=None,
        description="Video duration (e.g. 7:16), enables YouTube timestamps",
    )
    keywords: list[str] = Field(
        default_factory=list,
        description="Keywords to prioritize in the generated content",
    )

    @field_validator("transcript")
    @classmethod
    def validate_transcript(cls, v: str) -> str:
        """Reject empty or whitespace-only transcripts."""
        if not v.strip():
            raise ValueError("Transcript is missing")
        return v

    @field_validator("content_type")
    @classmethod
    def validate_content_type(cls, v: str) -> str:
        """Validate content type against the supported platforms."""
        v = v.strip().lower()
        if v not in CONTENT_TYPES:
            raise ValueError(f"Invalid type '{v}'. Expected one of: {', '.join(CONTENT_TYPES)}")
        return v

    @field_validator("video_duration")
    @classmethod
    def validate_video_duration(cls, v: str | None) -> str | None:
        """Validate video duration format (M:SS, MM:SS or H:MM:SS)."""
        if v is None or not v.strip():
            return None
        v = v.strip()
        if not VIDEO_DURATION_PATTERN.match(v):
            raise ValueError(f"Invalid video duration '{v}'. Use M:SS, MM:SS or H:MM:SS")
        return v

    @field_validator("keywords")
    @classmethod
    def validate_keywords(cls, v: list[str]) -> list[str]:
        """Drop blank keywords and surrounding whitespace."""
        return [keyword.strip() for keyword in v if keyword.strip()]
