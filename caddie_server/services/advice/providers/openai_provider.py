from __future__ import annotations

from typing import Any, Mapping

import httpx

from .base import CaddieProvider, CaddieProviderError, CaddieProviderTimeout

OPENAI_CHAT_URL = "https://api.openai.com/v1/chat/completions"


class OpenAICaddieProvider(CaddieProvider):
    name = "openai"

    def __init__(
        self,
        *,
        api_key: str | None = None,
        model: str = "gpt-4o-mini",
        timeout: float = 10.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._timeout = timeout
        self._client = http_client

    def _post(self, payload: Mapping[str, Any]) -> httpx.Response:
        if not self._api_key:
            raise CaddieProviderError("OPENAI_API_KEY is not configured")
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        client = self._client
        try:
            if client is not None:
                return client.post(
                    "/chat/completions",
                    json=payload,
                    headers=headers,
                    timeout=self._timeout,
                )
            return httpx.post(
                OPENAI_CHAT_URL,
                json=payload,
                headers=headers,
                timeout=self._timeout,
            )
        except httpx.TimeoutException as exc:
            raise CaddieProviderTimeout("OpenAI request timed out") from exc
        except httpx.HTTPError as exc:
            raise CaddieProviderError("OpenAI request failed") from exc

    def generate(self, prompt: str, *, max_tokens: int = 150) -> str:
        payload = {
            "model": self._model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": max_tokens,
        }

        response = self._post(payload)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise CaddieProviderError(
                f"OpenAI responded with status {exc.response.status_code}"
            ) from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise CaddieProviderError("OpenAI response was not JSON") from exc
        if not isinstance(data, dict):
            raise CaddieProviderError("OpenAI response was not an object")
        choices = data.get("choices") or []
        if not choices or not isinstance(choices[0], dict):
            raise CaddieProviderError("OpenAI response missing choices")
        message = choices[0].get("message") or {}
        content = message.get("content")
        if isinstance(content, str) and content.strip():
            return content.strip()
        raise CaddieProviderError("OpenAI did not return advice text")
