"""Centralized prompt construction service.

Renders the per-platform .md templates with the transcript, the shared
writing guidelines and the optional keyword / video duration blocks.
"""

from collections.abc import Sequence

from ..config import CONTENT_TYPES
from .loader import load_prompt


class PromptBuilder:
    """Centralized prompt construction service."""

    # Guideline files shared by every social platform, in prompt order
    SOCIAL_GUIDELINES: tuple[str, ...] = (
        "brand_names",
        "avoid_exaggeration",
        "informal_address",
    )

    # Keyword extraction only needs the brand spelling rules
    KEYWORD_GUIDELINES: tuple[str, ...] = ("brand_names",)

    def _guidelines(self, content_type: str) -> str:
        names = self.KEYWORD_GUIDELINES if content_type == "keywords" else self.SOCIAL_GUIDELINES
        return "\n\n".join(load_prompt(name).strip() for name in names)

    @staticmethod
    def _keywords_block(keywords: Sequence[str] | None) -> str:
        cleaned = [k.strip() for k in keywords or () if k.strip()]
        if not cleaned:
            return ""
        return (
            "\n\nPRIORITÄT-KEYWORDS: Diese Keywords sollen priorisiert und prominent "
            f"verwendet werden: {', '.join(cleaned)}"
        )

    def _youtube_fields(self, video_duration: str | None) -> dict[str, str]:
        if not video_duration:
            return {
                "duration_block": "",
                "timestamps_task": "",
                "timestamps_rules": "",
                "timestamps_format": "",
            }
        return {
            "duration_block": f"\n\nVideo-Dauer: {video_duration}",
            "timestamps_task": (
                "\n4. SEO-optimierte Zeitstempel mit Topics generieren "
                f"(GENAU 5 Zeitstempel basierend auf der Video-Dauer: {video_duration})"
            ),
            "timestamps_rules": load_prompt("youtube_timestamps").rstrip().format(
                video_duration=video_duration
            ),
            "timestamps_format": (
                "\n\nTIMESTAMPS:\n"
                f"[5 SEO-optimierte Zeitstempel mit Topics, gleichmäßig über {video_duration} verteilt]"
            ),
        }

    def build(
        self,
        content_type: str,
        transcript: str,
        video_duration: str | None = None,
        keywords: Sequence[str] | None = None,
    ) -> str:
        """Build the generation prompt for one content type.

        Args:
            content_type: One of CONTENT_TYPES
            transcript: Cleaned transcript text
            video_duration: Optional duration ("7:16"), adds timestamps to YouTube prompts
            keywords: Optional priority keywords (ignored for keyword extraction)

        Returns:
            Formatted prompt ready for LLM invocation

        Raises:
            ValueError: If the content type is unknown
        """
        if content_type not in CONTENT_TYPES:
            raise ValueError(f"Unsupported platform type: {content_type}")

        fields: dict[str, str] = {
            "guidelines": self._guidelines(content_type),
            "transcript": transcript,
        }
        if content_type != "keywords":
            fields["keywords_block"] = self._keywords_block(keywords)
        if content_type == "youtube":
            fields.update(self._youtube_fields(video_duration))

        return load_prompt(content_type).format(**fields).strip()


# Module-level singleton for convenience
_builder: PromptBuilder | None = None


def get_prompt_builder() -> PromptBuilder:
    """Get the prompt builder singleton.

    Returns:
        PromptBuilder instance
    """
    global _builder
    if _builder is None:
        _builder = PromptBuilder()
    return _builder
