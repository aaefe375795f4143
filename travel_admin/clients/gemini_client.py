"""Singleton accessor for the Gemini generative-AI client.

Gemini exposes an OpenAI-compatible endpoint, so the client is a plain
:class:`openai.OpenAI` pointed at ``GEMINI_BASE_URL``.
"""

from __future__ import annotations

import logging
from typing import Any

from openai import OpenAI as _OpenAIClient

from .. import config

logger = logging.getLogger(__name__)

_client: _OpenAIClient | None = None


class GenerativeModel:
    """A Gemini model bound to the shared client."""

    def __init__(self, client: _OpenAIClient, model_name: str) -> None:
        self.client = client
        self.model_name = model_name

    def generate_content(self, prompt: str, **kwargs: Any) -> str:
        """Send *prompt* as a single user message and return the reply text."""
        logger.info("Requesting content from %s", self.model_name)
        resp = self.client.chat.completions.create(
            model=self.model_name,
            messages=[{"role": "user", "content": prompt}],
            **kwargs,
        )
        return (resp.choices[0].message.content or "").strip()


def get_gemini_client() -> _OpenAIClient:
    """Return a singleton client authenticated with ``GEMINI_API_KEY``."""
    global _client
    if _client is not None:
        return _client
    if not config.GEMINI_API_KEY:
        raise EnvironmentError("Missing GEMINI_API_KEY env var")
    _client = _OpenAIClient(api_key=config.GEMINI_API_KEY, base_url=config.GEMINI_BASE_URL)
    return _client


def get_generative_model(model_name: str | None = None) -> GenerativeModel:
    """Return a :class:`GenerativeModel` for *model_name*.

    Falls back to ``GEMINI_MODEL`` from the environment, then to
    ``GEMINI_DEFAULT_MODEL``.
    """
    client = get_gemini_client()
    resolved = model_name or config.GEMINI_MODEL or config.GEMINI_DEFAULT_MODEL
    return GenerativeModel(client, resolved)

__all__ = ["GenerativeModel", "get_gemini_client", "get_generative_model"]
