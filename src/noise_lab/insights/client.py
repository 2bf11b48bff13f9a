"""
Insights Generators
===================

An insights generator turns a prompt into free-form text. The simulation
never depends on one; it is injected where analysis text is wanted.

``GeminiInsightsGenerator`` talks to the Gemini ``generateContent`` REST
endpoint over httpx:

    POST {base_url}/v1beta/models/{model}:generateContent
    Header: x-goog-api-key: <key>
    Body:   {"contents": [{"parts": [{"text": "<prompt>"}]}]}

and returns the concatenated text parts of the first candidate.

Env overrides
-------------
- NOISE_LAB_API_KEY / GEMINI_API_KEY   (API key, first one set wins)
- NOISE_LAB_MODEL                      (model name)
- NOISE_LAB_HTTP_TIMEOUT               (seconds, float; default 30)
"""

from __future__ import annotations

import os
from typing import Optional, Protocol

import httpx

from ..exceptions import InsightsError

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"
DEFAULT_MODEL = "gemini-3-flash-preview"


class InsightsGenerator(Protocol):
    def generate(self, prompt: str) -> str:
        ...


def _api_key_from_env() -> Optional[str]:
    for name in ("NOISE_LAB_API_KEY", "GEMINI_API_KEY"):
        value = os.environ.get(name)
        if value:
            return value
    return None


class GeminiInsightsGenerator:
    """
    Synchronous Gemini client. Safe to use as a context manager.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        model: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.api_key = api_key or _api_key_from_env()
        self.model = model or os.environ.get("NOISE_LAB_MODEL", DEFAULT_MODEL)
        self.base_url = base_url.rstrip("/")
        self.timeout = float(os.getenv("NOISE_LAB_HTTP_TIMEOUT", timeout if timeout is not None else 30.0))
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=self.timeout)

    def __enter__(self) -> "GeminiInsightsGenerator":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/v1beta/models/{self.model}:generateContent"

    def generate(self, prompt: str) -> str:
        if not self.api_key:
            raise InsightsError("No API key configured (set NOISE_LAB_API_KEY or GEMINI_API_KEY)")

        try:
            response = self._client.post(
                self.endpoint,
                headers={"x-goog-api-key": self.api_key},
                json={"contents": [{"parts": [{"text": prompt}]}]},
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            raise InsightsError(f"Insights request failed: {e}") from e
        except ValueError as e:
            raise InsightsError("Insights service returned a non-JSON body") from e

        try:
            parts = payload["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError) as e:
            raise InsightsError(f"Unexpected insights payload: {payload!r}") from e
        return "".join(part.get("text", "") for part in parts if isinstance(part, dict))
