"""Async LLM provider for the Google Gemini ``generateContent`` REST API."""

from __future__ import annotations

import time
from typing import Any, Dict, List, Optional

import httpx

from .base import (
    LLMMessage,
    LLMProvider,
    LLMProviderAPIError,
    LLMProviderAuthError,
    LLMProviderError,
    LLMProviderRateLimitError,
    LLMResponse,
)

# Gemini names the assistant side of a conversation "model"
_ROLE_MAP = {"user": "user", "assistant": "model", "model": "model"}


class GeminiProvider(LLMProvider):
    """Gemini chat provider."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        *,
        base_url: str | None = None,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
        **kwargs: Any,
    ) -> None:
        self.base_url = (base_url or "https://generativelanguage.googleapis.com").rstrip("/")
        self.timeout = timeout
        self._transport = transport
        super().__init__(api_key, model, **kwargs)

    def _setup_client(self, **kwargs: Any) -> None:
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
            headers={"Content-Type": "application/json"},
        )

    @property
    def _generate_path(self) -> str:
        return f"/v1beta/models/{self.model}:generateContent"

    async def _post(self, path: str, json: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = await self._client.post(path, json=json, params={"key": self.api_key})
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            message = exc.response.text
            if status in (401, 403):
                raise LLMProviderAuthError(f"Gemini authentication failed: {message}") from exc
            if status == 429:
                raise LLMProviderRateLimitError("Gemini rate limit exceeded") from exc
            raise LLMProviderAPIError(f"Gemini API error ({status}): {message}") from exc
        except httpx.RequestError as exc:
            raise LLMProviderAPIError(f"Gemini request error: {exc}") from exc

    async def generate_response(
        self,
        messages: List[LLMMessage],
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> LLMResponse:
        start_time = time.time()

        payload = self._build_payload(messages=messages, max_tokens=max_tokens, temperature=temperature)
        data = await self._post(self._generate_path, json=payload)

        candidates = data.get("candidates") or []
        if not candidates:
            feedback = data.get("promptFeedback") or {}
            reason = feedback.get("blockReason")
            if reason:
                raise LLMProviderError(f"Gemini blocked the prompt: {reason}")
            raise LLMProviderError("Gemini response missing candidates")

        candidate = candidates[0]
        parts = (candidate.get("content") or {}).get("parts") or []
        text = "".join(str(part["text"]) for part in parts if isinstance(part, dict) and part.get("text"))

        usage = data.get("usageMetadata") or {}
        return self._create_response(
            content=text,
            tokens_used=usage.get("totalTokenCount"),
            finish_reason=candidate.get("finishReason"),
            response_time_ms=self._measure_time(start_time),
        )

    async def __aenter__(self) -> "GeminiProvider":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self._client.aclose()

    async def close(self) -> None:
        await self._client.aclose()

    def _build_payload(
        self,
        *,
        messages: List[LLMMessage],
        max_tokens: Optional[int],
        temperature: Optional[float],
    ) -> Dict[str, Any]:
        contents = []
        for msg in messages:
            role = _ROLE_MAP.get(msg.role)
            if role is None:
                raise ValueError(f"Unsupported message role for Gemini: {msg.role}")
            contents.append({"role": role, "parts": [{"text": msg.content}]})

        payload: Dict[str, Any] = {"contents": contents}

        generation_config: Dict[str, Any] = {}
        if max_tokens is not None:
            generation_config["maxOutputTokens"] = max_tokens
        if temperature is not None:
            generation_config["temperature"] = temperature
        if generation_config:
            payload["generationConfig"] = generation_config

        return payload
