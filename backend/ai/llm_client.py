"""
backend.ai.llm_client – minimal async client for chat-completion APIs.

Speaks the OpenAI-compatible ``POST {base}/chat/completions`` protocol
(OpenRouter, OpenAI).  Every failure mode is reported as
ServiceUnavailable so callers have a single exception to degrade on.
"""
from __future__ import annotations

import logging

import httpx

from rights.errors import ServiceUnavailable

from backend.config import Settings

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT_SECONDS = 20.0


class ChatCompletionClient:
    """
    One-shot chat completion requests.  No retries.

    Usage::

        client = ChatCompletionClient(api_key="...", base_url=OPENROUTER_BASE_URL)
        text = await client.complete(system="...", user="...", max_tokens=200)
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str,
        model: str = "google/gemini-2.0-flash-001",
        timeout_seconds: float = REQUEST_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = httpx.Timeout(timeout_seconds, connect=timeout_seconds)
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "ChatCompletionClient":
        return cls(
            api_key=settings.ai_api_key,
            base_url=settings.ai_endpoint,
            model=settings.ai_model,
            timeout_seconds=settings.ai_timeout_seconds,
            transport=transport,
        )

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def complete(
        self,
        system: str,
        user: str,
        max_tokens: int = 200,
        temperature: float = 0.3,
    ) -> str:
        """
        Send one system + user message pair and return the completion text.

        Raises:
            ServiceUnavailable when unconfigured, on transport errors and
            timeouts, on non-2xx responses, and when the envelope carries
            no text.
        """
        if not self.configured:
            raise ServiceUnavailable("AI service not configured")

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "max_tokens": max_tokens,
            "temperature": temperature,
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.post("/chat/completions", json=payload, headers=headers)
        except httpx.TimeoutException as exc:
            raise ServiceUnavailable("AI service timed out") from exc
        except httpx.HTTPError as exc:
            raise ServiceUnavailable(f"AI service unreachable: {exc}") from exc

        if response.status_code != 200:
            raise ServiceUnavailable(f"AI service returned HTTP {response.status_code}")

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise ServiceUnavailable("AI service returned an unexpected envelope") from exc

        if not isinstance(content, str) or not content.strip():
            raise ServiceUnavailable("AI service returned empty content")

        logger.debug("Completion received (%d chars) from %s", len(content), self.model)
        return content.strip()
