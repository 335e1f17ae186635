"""
backend.services.ipfs – pin recordings and shareable cards to IPFS via Pinata.
"""
from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from rights.errors import ServiceUnavailable

from backend.config import Settings

from .base import RemoteService

logger = logging.getLogger(__name__)

PINATA_API_URL = "https://api.pinata.cloud"
PINATA_GATEWAY_URL = "https://gateway.pinata.cloud/ipfs"


class IPFSService(RemoteService):
    """
    Usage::

        ipfs = IPFSService.from_settings(get_settings())
        cid = await ipfs.upload_file(blob.data, "recording.webm", blob.mime_type)
        url = ipfs.get_ipfs_url(cid)
    """

    name = "IPFS service"

    def __init__(
        self,
        api_key: str | None,
        secret_api_key: str | None,
        base_url: str = PINATA_API_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(base_url, transport=transport)
        self.api_key = api_key
        self.secret_api_key = secret_api_key

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "IPFSService":
        return cls(settings.pinata_api_key, settings.pinata_secret_api_key, transport=transport)

    @property
    def configured(self) -> bool:
        return bool(self.api_key and self.secret_api_key)

    def _headers(self) -> dict[str, str]:
        return {
            "pinata_api_key": self.api_key or "",
            "pinata_secret_api_key": self.secret_api_key or "",
        }

    async def upload_file(
        self,
        data: bytes,
        filename: str,
        content_type: str = "application/octet-stream",
    ) -> str:
        """Pin raw bytes and return the IPFS hash."""
        self._require_configured()
        metadata = {"name": filename, "keyvalues": {"app": "rightscard", "type": "recording"}}
        response = await self._request(
            "POST",
            "/pinning/pinFileToIPFS",
            files={"file": (filename, data, content_type)},
            data={
                "pinataMetadata": json.dumps(metadata),
                "pinataOptions": json.dumps({"cidVersion": 0}),
            },
        )
        return self._ipfs_hash(response)

    async def upload_json(self, payload: Any, filename: str) -> str:
        """Pin a JSON document and return the IPFS hash."""
        self._require_configured()
        response = await self._request(
            "POST",
            "/pinning/pinJSONToIPFS",
            json={
                "pinataContent": payload,
                "pinataMetadata": {
                    "name": filename,
                    "keyvalues": {"app": "rightscard", "type": "shareable-card"},
                },
            },
        )
        return self._ipfs_hash(response)

    @staticmethod
    def get_ipfs_url(ipfs_hash: str) -> str:
        return f"{PINATA_GATEWAY_URL}/{ipfs_hash}"

    @staticmethod
    def _ipfs_hash(response: httpx.Response) -> str:
        try:
            ipfs_hash = response.json()["IpfsHash"]
        except (ValueError, KeyError, TypeError) as exc:
            raise ServiceUnavailable("IPFS service returned no hash") from exc
        logger.info("Pinned %s", ipfs_hash)
        return ipfs_hash
