"""HTTP client for the hosted text-generation model (Gemini generateContent)."""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from career_platform.config import Settings, settings


logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 3
INITIAL_DELAY_SECONDS = 0.5


class LLMServiceError(RuntimeError):
    pass


class LLMNotConfiguredError(LLMServiceError):
    pass


class GeminiClient:
    def __init__(
        self,
        *,
        api_key: str | None,
        model: str,
        api_base: str,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._api_base = api_base.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, cfg: Settings) -> "GeminiClient":
        return cls(
            api_key=cfg.gemini_api_key,
            model=cfg.gemini_model,
            api_base=cfg.gemini_api_base,
            timeout=cfg.llm_timeout_seconds,
        )

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    def generate(self, prompt: str) -> str:
        if not self.configured:
            raise LLMNotConfiguredError("GEMINI_API_KEY is not set")

        url = f"{self._api_base}/models/{self._model}:generateContent"
        payload = {"contents": [{"parts": [{"text": prompt}]}]}

        delay = INITIAL_DELAY_SECONDS
        start = time.perf_counter()
        for attempt in range(MAX_ATTEMPTS):
            try:
                with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                    resp = client.post(url, params={"key": self._api_key}, json=payload)
                break
            except httpx.TransportError as exc:
                logger.warning("llm.generate transport error attempt=%d: %s", attempt + 1, exc)
                if attempt == MAX_ATTEMPTS - 1:
                    raise LLMServiceError("AI service unreachable") from exc
                time.sleep(delay)
                delay *= 2

        latency_ms = (time.perf_counter() - start) * 1000
        if resp.status_code >= 400:
            logger.error("llm.generate status=%s latency=%.1f ms", resp.status_code, latency_ms)
            raise LLMServiceError(f"AI service failed with status {resp.status_code}.")

        logger.info("llm.generate model=%s latency=%.1f ms", self._model, latency_ms)
        try:
            body = resp.json()
        except ValueError as exc:
            logger.error("llm.generate non-json body status=%s", resp.status_code)
            raise LLMServiceError("AI returned an empty or malformed response.") from exc
        return _extract_text(body)


def _extract_text(body: Any) -> str:
    try:
        text = body["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as exc:
        raise LLMServiceError("AI returned an empty or malformed response.") from exc
    if not isinstance(text, str) or not text.strip():
        raise LLMServiceError("AI returned an empty or malformed response.")
    return text


def get_llm_client() -> GeminiClient:
    return GeminiClient.from_settings(settings)
