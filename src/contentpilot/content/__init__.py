"""Transcript preparation and response parsing."""

from .parser import POST_SECTIONS, ResponseParser, extract_section
from .transcript import clean_transcript

__all__ = [
    "POST_SECTIONS",
    "ResponseParser",
    "clean_transcript",
    "extract_section",
]
