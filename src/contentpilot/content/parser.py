"""Extraction of labeled sections from free-text LLM replies.

Replies follow the layout requested by the prompts:

    TITLE:
    ...
    DESCRIPTION:
    ...

Labels may carry markdown decoration (``**TITLE:**``, ``## TITLE:``). A missing
section parses to an empty value instead of raising.
"""

import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

YOUTUBE_LABELS: tuple[str, ...] = ("TRANSCRIPT", "TITLE", "DESCRIPTION", "TIMESTAMPS")

# Single-post platforms: content type -> (section label, result key)
POST_SECTIONS: dict[str, tuple[str, str]] = {
    "linkedin": ("LINKEDIN POST", "linkedin_post"),
    "twitter": ("TWITTER POST", "twitter_post"),
    "instagram": ("INSTAGRAM POST", "instagram_post"),
    "tiktok": ("TIKTOK POST", "tiktok_post"),
}

# Bullets and numbering models like to put in front of list items
_LIST_MARKER = re.compile(r"^\s*(?:[-*•]+|\d+[.)])\s*")


def _label_pattern(label: str) -> str:
    return rf"^[ \t]*(?:#+[ \t]*)?\**[ \t]*{re.escape(label)}[ \t]*\**[ \t]*:[ \t]*\**"


def extract_section(text: str, label: str, next_labels: tuple[str, ...] = ()) -> str:
    """Return the trimmed body following ``label`` up to the next known label.

    Args:
        text: Raw LLM reply
        label: Section label without the colon (e.g. "TITLE")
        next_labels: Labels that terminate the section

    Returns:
        Section text, or "" if the label is absent
    """
    start = re.search(_label_pattern(label), text, re.MULTILINE | re.IGNORECASE)
    if not start:
        return ""
    body = text[start.end() :]
    end = None
    for next_label in next_labels:
        match = re.search(_label_pattern(next_label), body, re.MULTILINE | re.IGNORECASE)
        if match and (end is None or match.start() < end):
            end = match.start()
    return (body[:end] if end is not None else body).strip()


def _split_lines(section: str) -> list[str]:
    return [line.strip() for line in section.splitlines() if line.strip()]


class ResponseParser:
    """Turns raw completions into the structured fields of each content type."""

    def parse_youtube(self, text: str) -> dict[str, Any]:
        """Parse transcript, title, description and timestamps."""
        sections = {}
        for index, label in enumerate(YOUTUBE_LABELS):
            following = YOUTUBE_LABELS[index + 1 :]
            sections[label.lower()] = extract_section(text, label, following)

        timestamps = [_LIST_MARKER.sub("", line) for line in _split_lines(sections["timestamps"])]
        return {
            "transcript": sections["transcript"],
            "title": sections["title"],
            "description": sections["description"],
            "timestamps": timestamps,
        }

    def parse_post(self, content_type: str, text: str) -> dict[str, Any]:
        """Parse the single post section of a social platform reply."""
        label, key = POST_SECTIONS[content_type]
        return {key: extract_section(text, label)}

    def parse_keywords(self, text: str) -> list[str]:
        """Parse the KEYWORDS section into a de-duplicated list.

        Accepts one keyword per line or a comma-separated line.
        """
        section = extract_section(text, "KEYWORDS")
        keywords: list[str] = []
        seen: set[str] = set()
        for line in _split_lines(section):
            for item in line.split(","):
                keyword = _LIST_MARKER.sub("", item).strip().strip('"')
                if keyword and keyword.lower() not in seen:
                    seen.add(keyword.lower())
                    keywords.append(keyword)
        return keywords

    def parse(self, content_type: str, text: str) -> dict[str, Any]:
        """Parse a reply for any content type.

        Raises:
            ValueError: If the content type is unknown
        """
        if content_type == "youtube":
            parsed = self.parse_youtube(text)
        elif content_type == "keywords":
            parsed = {"keywords": self.parse_keywords(text)}
        elif content_type in POST_SECTIONS:
            parsed = self.parse_post(content_type, text)
        else:
            raise ValueError(f"Unsupported platform type: {content_type}")

        if not any(parsed.values()):
            logger.warning("No labeled sections found in %s response", content_type)
        return parsed
