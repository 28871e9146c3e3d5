"""LLM prompts for transcript-to-content generation."""

from .builders import PromptBuilder, get_prompt_builder
from .loader import load_prompt

__all__ = [
    "PromptBuilder",
    "get_prompt_builder",
    "load_prompt",
]
