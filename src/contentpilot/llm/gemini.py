"""Google Gemini LLM provider.

Implements the LLMProvider interface for Google's Gemini models.
"""

from langchain_google_genai import ChatGoogleGenerativeAI

from .base import LLMProvider


class GeminiProvider(LLMProvider):
    """Google Gemini LLM provider.

    Supports Gemini models through the langchain-google-genai integration.
    The model order comes from settings (GEMINI_MODELS); DEFAULT_MODELS is
    used when none is given.
    """

    NAME = "Google Gemini"
    DEFAULT_MODELS = ("gemini-2.5-pro", "gemini-2.5-flash")

    def _create_client(self, model: str) -> ChatGoogleGenerativeAI:
        # SDK retries disabled: a failing model hands over to the next one
        return ChatGoogleGenerativeAI(
            model=model,
            google_api_key=self._api_key,
            temperature=self._temperature,
            max_output_tokens=self._max_output_tokens,
            max_retries=0,
        )
