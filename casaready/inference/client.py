# This project was developed with assistance from AI tools.
"""Thin OpenAI-compatible LLM client.

Wraps the openai Python SDK with configurable base_url so it works
against any OpenAI-compatible endpoint (OpenAI, vLLM, Ollama, etc.).
"""

import logging
from typing import Any

from openai import AsyncOpenAI

from ..core.config import settings

logger = logging.getLogger(__name__)

# Per-endpoint client cache (avoids re-creating HTTP connections)
_clients: dict[str, AsyncOpenAI] = {}


def _get_client(base_url: str, api_key: str) -> AsyncOpenAI:
    """Return a cached AsyncOpenAI client for the given endpoint."""
    if base_url not in _clients:
        logger.debug("Creating LLM client for %s", base_url)
        _clients[base_url] = AsyncOpenAI(base_url=base_url, api_key=api_key or "not-needed")
    return _clients[base_url]


async def get_completion(
    messages: list[dict[str, str]],
    model: str | None = None,
    **kwargs: Any,
) -> str:
    """Get a non-streaming completion from the configured endpoint."""
    client = _get_client(settings.LLM_BASE_URL, settings.LLM_API_KEY)

    response = await client.chat.completions.create(
        model=model or settings.LLM_MODEL,
        messages=messages,
        **kwargs,
    )
    if not response.choices:
        return ""
    return response.choices[0].message.content or ""
