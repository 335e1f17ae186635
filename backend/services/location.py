"""
backend.services.location – turn coordinates into a "City, Region" string.

Reverse geocoding uses the keyless BigDataCloud client endpoint and never
raises: any failure falls back to the rounded coordinates.
"""
from __future__ import annotations

import logging
from typing import Awaitable, Callable

import httpx

from rights.errors import ServiceUnavailable

from .base import RemoteService

logger = logging.getLogger(__name__)

GEOCODE_BASE_URL = "https://api.bigdatacloud.net"
GEOCODE_PATH = "/data/reverse-geocode-client"

PositionProvider = Callable[[], Awaitable[tuple[float, float]]]


class LocationService(RemoteService):
    """
    Also usable as a capture LocationProvider when given a position source.

    Usage::

        service = LocationService(position_provider=gps.current_position)
        capture = RecordingCapture(devices, location_provider=service)
    """

    name = "Location service"

    def __init__(
        self,
        position_provider: PositionProvider | None = None,
        base_url: str = GEOCODE_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(base_url, timeout_seconds=10.0, transport=transport)
        self.position_provider = position_provider

    async def reverse_geocode(self, lat: float, lng: float, language: str = "en") -> str:
        fallback = f"{lat:.4f}, {lng:.4f}"
        try:
            response = await self._request(
                "GET", GEOCODE_PATH,
                params={"latitude": lat, "longitude": lng, "localityLanguage": language},
            )
            data = response.json()
        except (ServiceUnavailable, ValueError) as exc:
            logger.warning("Reverse geocoding failed, using coordinates: %s", exc)
            return fallback

        if not isinstance(data, dict):
            return fallback
        city = data.get("city") or data.get("locality") or "Unknown"
        region = data.get("principalSubdivision") or data.get("countryName") or "Unknown"
        return f"{city}, {region}"

    async def current_location(self) -> str:
        """
        Raises:
            ServiceUnavailable when no position source is available.
        """
        if self.position_provider is None:
            raise ServiceUnavailable("Geolocation not supported")
        lat, lng = await self.position_provider()
        return await self.reverse_geocode(lat, lng)
