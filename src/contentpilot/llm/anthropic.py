"""Anthropic Claude LLM provider.

Implements the LLMProvider interface for Anthropic's Claude models.
"""

from langchain_anthropic import ChatAnthropic
from pydantic import SecretStr

from .base import LLMProvider


class AnthropicProvider(LLMProvider):
    """Anthropic Claude LLM provider.

    Supports Claude models through the langchain-anthropic integration.
    """

    NAME = "Anthropic Claude"
    DEFAULT_MODELS = ("claude-sonnet-4-5", "claude-3-5-haiku-latest")

    def _create_client(self, model: str) -> ChatAnthropic:
        return ChatAnthropic(
            model=model,
            api_key=SecretStr(self._api_key),
            temperature=self._temperature,
            max_tokens=self._max_output_tokens,
            max_retries=0,
        )
