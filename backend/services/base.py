"""
backend.services.base – shared plumbing for optional remote collaborators.

A service that lacks configuration still constructs; it reports
``configured = False`` and raises ServiceUnavailable on use.
"""
from __future__ import annotations

import logging
from typing import Any

import httpx

from rights.errors import ServiceUnavailable

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 15.0


class RemoteService:
    """Base for httpx-backed collaborators; one AsyncClient per call."""

    name = "remote service"

    def __init__(
        self,
        base_url: str = "",
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = httpx.Timeout(timeout_seconds)
        self._transport = transport

    @property
    def configured(self) -> bool:
        return True

    def _require_configured(self) -> None:
        if not self.configured:
            raise ServiceUnavailable(f"{self.name} not configured")

    def _headers(self) -> dict[str, str]:
        return {}

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """
        Send one request and return a 2xx response.

        Raises:
            ServiceUnavailable on transport errors and non-2xx statuses.
        """
        headers = {**self._headers(), **kwargs.pop("headers", {})}
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(method, url, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s request failed: %s", self.name, exc)
            raise ServiceUnavailable(f"{self.name} unreachable") from exc

        if response.is_error:
            logger.warning("%s returned HTTP %d for %s %s",
                           self.name, response.status_code, method, url)
            raise ServiceUnavailable(f"{self.name} returned HTTP {response.status_code}")
        return response
