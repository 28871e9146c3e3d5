"""Transcript cleanup before prompt rendering."""

import logging

logger = logging.getLogger(__name__)


def clean_transcript(transcript: str) -> tuple[str, bool]:
    """Drop a trailing single-character word, a common transcription artifact.

    Args:
        transcript: Raw transcript text

    Returns:
        Tuple of (cleaned transcript, whether a character was removed)
    """
    words = transcript.split()
    if len(words) > 1 and len(words[-1]) == 1:
        logger.info("Removed trailing single character %r from transcript", words[-1])
        stripped = transcript.rstrip()
        return stripped[: len(stripped) - 1].rstrip(), True
    return transcript.strip(), False
