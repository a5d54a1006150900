"""
Thin HTTP client for Gemini ``generateContent`` with Google Search grounding.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class GatewayError(RuntimeError):
    """Any failure talking to the generative backend."""


@dataclass(slots=True)
class GeminiConfig:
    api_url: str
    api_key: str | None = None
    timeout: float | None = None


@dataclass(slots=True)
class GroundedResponse:
    text: str | None
    grounding_chunks: list[dict[str, Any]] = field(default_factory=list)


class GeminiClient:
    """Issues one grounded generation request per call; never retries."""

    def __init__(self, config: GeminiConfig, transport: httpx.BaseTransport | None = None) -> None:
        self.config = config
        self._transport = transport

    def generate(self, model: str, prompt: str) -> GroundedResponse:
        if not self.config.api_key:
            raise GatewayError("GEMINI_API_KEY is not configured.")

        url = f"{self.config.api_url.rstrip('/')}/models/{model}:generateContent"
        headers = {"x-goog-api-key": self.config.api_key, "Content-Type": "application/json"}
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "tools": [{"google_search": {}}],
        }
        logger.debug("Grounded generation using model %s", model)
        try:
            with httpx.Client(timeout=self.config.timeout, transport=self._transport) as client:
                response = client.post(url, headers=headers, json=payload)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as exc:
            raise GatewayError(
                f"Gemini returned HTTP {exc.response.status_code}: {exc.response.text[:200]}"
            ) from exc
        except httpx.HTTPError as exc:
            raise GatewayError(f"Gemini request failed: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise GatewayError("Gemini returned a non-JSON body.") from exc

        return self._parse_response(data)

    def _parse_response(self, data: Any) -> GroundedResponse:
        if not isinstance(data, dict):
            raise GatewayError(f"Unexpected Gemini response: {json.dumps(data)[:200]}")
        candidates = data.get("candidates") or []
        if not candidates:
            return GroundedResponse(text=None)
        candidate = candidates[0]
        if not isinstance(candidate, dict):
            raise GatewayError(f"Unexpected Gemini candidate: {json.dumps(candidate)[:200]}")

        parts = (candidate.get("content") or {}).get("parts") or []
        texts = [part["text"] for part in parts if isinstance(part, dict) and isinstance(part.get("text"), str)]
        text = "".join(texts) or None

        metadata = candidate.get("groundingMetadata") or {}
        chunks = [chunk for chunk in metadata.get("groundingChunks") or [] if isinstance(chunk, dict)]
        return GroundedResponse(text=text, grounding_chunks=chunks)
