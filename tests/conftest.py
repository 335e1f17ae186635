"""
Pytest configuration and fixtures.

Outbound HTTP is faked with httpx.MockTransport; nothing here reaches the
network or reads a real .env file.
"""
from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from backend.ai.llm_client import ChatCompletionClient
from backend.config import Settings


def completion_body(text: str) -> dict:
    """Minimal OpenAI-style chat completion envelope."""
    return {"choices": [{"message": {"role": "assistant", "content": text}}]}


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    def _make(**overrides) -> Settings:
        values = {"openrouter_api_key": None, "openai_api_key": None}
        values.update(overrides)
        return Settings(_env_file=None, **values)
    return _make


@pytest.fixture
def chat_client() -> Callable[..., ChatCompletionClient]:
    """
    Build a configured client whose transport answers every request with
    ``handler(request)``.  Requests are recorded on ``client.requests``.
    """
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> ChatCompletionClient:
        requests: list[dict] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(json.loads(request.content or b"{}"))
            return handler(request)

        client = ChatCompletionClient(
            api_key="sk-test-key-0000000000",
            base_url="https://llm.test/v1",
            transport=httpx.MockTransport(recording_handler),
        )
        client.requests = requests  # type: ignore[attr-defined]
        return client
    return _make


@pytest.fixture
def reply_with() -> Callable[[str], Callable[[httpx.Request], httpx.Response]]:
    def _reply(text: str):
        return lambda request: httpx.Response(200, json=completion_body(text))
    return _reply
