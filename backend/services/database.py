"""
backend.services.database – recording and shared-card rows in Supabase.

Talks to the PostgREST interface directly:

    GET/POST/PATCH/DELETE {SUPABASE_URL}/rest/v1/{table}?column=eq.value
"""
from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic.alias_generators import to_camel

from backend.config import Settings
from backend.db.schemas import Recording, ShareableCardData

from .base import RemoteService

logger = logging.getLogger(__name__)

RECORDINGS_TABLE = "recordings"
SHAREABLE_CARDS_TABLE = "shareable_cards"


class DatabaseService(RemoteService):
    name = "Database"

    def __init__(
        self,
        url: str | None,
        anon_key: str | None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(f"{url.rstrip('/')}/rest/v1" if url else "", transport=transport)
        self.anon_key = anon_key

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "DatabaseService":
        return cls(settings.supabase_url, settings.supabase_anon_key, transport=transport)

    @property
    def configured(self) -> bool:
        return bool(self.base_url and self.anon_key)

    def _headers(self) -> dict[str, str]:
        return {
            "apikey": self.anon_key or "",
            "Authorization": f"Bearer {self.anon_key}",
            "Prefer": "return=representation",
        }

    # ------------------------------------------------------------------
    # Recordings
    # ------------------------------------------------------------------

    async def save_recording(self, recording: Recording) -> Recording:
        self._require_configured()
        response = await self._request(
            "POST", f"/{RECORDINGS_TABLE}",
            json=recording.model_dump(mode="json", by_alias=True),
        )
        return Recording.model_validate(self._single(response))

    async def get_user_recordings(self, user_id: str) -> list[Recording]:
        """Newest first."""
        self._require_configured()
        response = await self._request(
            "GET", f"/{RECORDINGS_TABLE}",
            params={"select": "*", "userId": f"eq.{user_id}", "order": "createdAt.desc"},
        )
        return [Recording.model_validate(row) for row in response.json() or []]

    async def update_recording(self, recording_id: str, **changes: Any) -> Recording:
        self._require_configured()
        body = {to_camel(field): value for field, value in changes.items()}
        response = await self._request(
            "PATCH", f"/{RECORDINGS_TABLE}",
            params={"recordingId": f"eq.{recording_id}"},
            json=body,
        )
        return Recording.model_validate(self._single(response))

    async def delete_recording(self, recording_id: str) -> None:
        self._require_configured()
        await self._request(
            "DELETE", f"/{RECORDINGS_TABLE}",
            params={"recordingId": f"eq.{recording_id}"},
        )
        logger.info("Deleted remote recording %s", recording_id)

    # ------------------------------------------------------------------
    # Shareable cards
    # ------------------------------------------------------------------

    async def save_shareable_card(self, card: ShareableCardData) -> ShareableCardData:
        self._require_configured()
        response = await self._request(
            "POST", f"/{SHAREABLE_CARDS_TABLE}",
            json=card.model_dump(mode="json", by_alias=True),
        )
        return ShareableCardData.model_validate(self._single(response))

    async def get_shareable_cards(self, limit: int = 50) -> list[ShareableCardData]:
        self._require_configured()
        response = await self._request(
            "GET", f"/{SHAREABLE_CARDS_TABLE}",
            params={"select": "*", "order": "createdAt.desc", "limit": str(max(1, limit))},
        )
        return [ShareableCardData.model_validate(row) for row in response.json() or []]

    @staticmethod
    def _single(response: httpx.Response) -> dict[str, Any]:
        data = response.json()
        return data[0] if isinstance(data, list) else data
