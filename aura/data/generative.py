"""
Generative-text fallback backend.

When the intent resolver can't answer from structured data, the question
is forwarded to a Gemini generateContent endpoint together with the
student's record as context. This module is the only place that talks to
that backend.
"""

import json
import logging
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import (
    ASSISTANT_PERSONA,
    FALLBACK_BACKOFF_FACTOR,
    FALLBACK_MAX_RETRIES,
    GEMINI_ENDPOINT,
    Settings,
    get_settings,
)

logger = logging.getLogger(__name__)


class FallbackError(Exception):
    """The backend could not be reached or returned an unusable response."""


def create_retry_session(max_retries: int = FALLBACK_MAX_RETRIES) -> requests.Session:
    """Session that retries rate-limit and server errors with backoff."""
    session = requests.Session()
    retries = Retry(
        total=max_retries,
        backoff_factor=FALLBACK_BACKOFF_FACTOR,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["POST"],
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("https://", adapter)
    session.headers.update({"Content-Type": "application/json"})
    return session


def build_prompt(query: str, record_payload: Optional[dict] = None, username: str = "") -> str:
    """Assemble the single text prompt sent to the backend."""
    prompt = f"{ASSISTANT_PERSONA} The user's name is {username or 'Student'}. "
    if record_payload is not None:
        prompt += f"Here is the user's attendance data: {json.dumps(record_payload)}. "
    prompt += f"Please respond helpfully to the following query: {query}"
    return prompt


def extract_text(body) -> Optional[str]:
    """
    Pull candidates[0].content.parts[0].text out of a response body.

    Any other shape means "no answer available" and returns None.
    """
    try:
        text = body["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None


class GenerativeFallback:
    """
    Client for the generative backend.

    Usage:
        fallback = GenerativeFallback()
        text = fallback.generate("How do I improve my attendance?", record.to_dict(), "asha")

    generate() returns the backend's text, None when the response had no
    usable text, and raises FallbackError on network, HTTP or decoding
    failures. Each call is bounded by the configured timeout.
    """

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or get_settings()
        self.session = session or create_retry_session()

    @property
    def url(self) -> str:
        return f"{GEMINI_ENDPOINT}/{self.settings.gemini_model}:generateContent"

    def generate(self, query: str, record_payload: Optional[dict] = None,
                 username: str = "") -> Optional[str]:
        if not self.settings.fallback_configured:
            raise FallbackError("GEMINI_API_KEY is not configured")

        body = {"contents": [{"parts": [{"text": build_prompt(query, record_payload, username)}]}]}

        try:
            resp = self.session.post(
                self.url,
                params={"key": self.settings.gemini_api_key},
                json=body,
                timeout=self.settings.fallback_timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as e:
            raise FallbackError(f"Generative backend request failed: {e}") from e
        except ValueError as e:
            raise FallbackError(f"Generative backend returned invalid JSON: {e}") from e

        text = extract_text(data)
        if text is None:
            logger.warning("Generative backend response had no candidate text")
        return text
