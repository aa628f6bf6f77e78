"""
LLM client using Google Generative AI (Gemini).

The SDK is synchronous; async callers go through run_completion(),
which runs it in the default thread pool with a timeout.
"""
import asyncio
import logging
from typing import Optional, Protocol

from ..config import Settings

logger = logging.getLogger(__name__)


class LLMError(Exception):
    """Raised when the model cannot produce usable text."""


class LLMClient(Protocol):
    def complete(self, prompt: str) -> str:
        ...


class GeminiClient:
    """Thin wrapper around google.generativeai.GenerativeModel."""

    def __init__(self, api_key: Optional[str], model: str):
        self.api_key = api_key
        self.model = model

    def complete(self, prompt: str) -> str:
        import google.generativeai as genai

        if not self.api_key:
            raise LLMError("LLM_API_KEY not configured")
        genai.configure(api_key=self.api_key)
        gemini = genai.GenerativeModel(self.model)
        response = gemini.generate_content(prompt)
        if not response or not response.text:
            raise LLMError("Empty response from LLM")
        return response.text


def create_client(settings: Settings) -> LLMClient:
    return GeminiClient(settings.llm_api_key, settings.llm_model)


async def run_completion(client: LLMClient, prompt: str, timeout: float) -> str:
    """
    Run a blocking completion off the event loop.

    The timeout bounds the wait only. On timeout the SDK call keeps its
    executor thread until it returns; its result is discarded.
    """
    loop = asyncio.get_running_loop()
    return await asyncio.wait_for(
        loop.run_in_executor(None, client.complete, prompt),
        timeout=timeout,
    )
