"""
tests/test_services.py
Remote collaborators against httpx.MockTransport.
"""
import json

import httpx
import pytest

from backend.db.schemas import Recording, ShareableCardData
from backend.services.database import DatabaseService
from backend.services.ipfs import IPFSService
from backend.services.location import LocationService
from rights.errors import ServiceUnavailable


def _transport(handler, seen=None):
    def wrapped(request):
        if seen is not None:
            seen.append(request)
        return handler(request)
    return httpx.MockTransport(wrapped)


# ── UNCONFIGURED ─────────────────────────────────────────────

class TestUnconfigured:

    def test_construction_never_fails(self, make_settings):
        settings = make_settings()
        assert IPFSService.from_settings(settings).configured is False
        assert DatabaseService.from_settings(settings).configured is False

    @pytest.mark.asyncio
    async def test_ipfs_raises_service_unavailable(self):
        with pytest.raises(ServiceUnavailable):
            await IPFSService(None, None).upload_json({"a": 1}, "card.json")

    @pytest.mark.asyncio
    async def test_database_raises_service_unavailable(self):
        with pytest.raises(ServiceUnavailable):
            await DatabaseService(None, None).get_shareable_cards()


# ── IPFS ─────────────────────────────────────────────────────

class TestIPFS:

    @pytest.mark.asyncio
    async def test_upload_json(self):
        seen = []
        service = IPFSService(
            "key", "secret",
            transport=_transport(lambda r: httpx.Response(200, json={"IpfsHash": "QmCard"}), seen),
        )
        assert await service.upload_json({"summary": "s"}, "card.json") == "QmCard"
        request = seen[0]
        assert request.url.path == "/pinning/pinJSONToIPFS"
        assert request.headers["pinata_api_key"] == "key"
        body = json.loads(request.content)
        assert body["pinataContent"] == {"summary": "s"}
        assert body["pinataMetadata"]["keyvalues"]["type"] == "shareable-card"

    @pytest.mark.asyncio
    async def test_upload_file(self):
        seen = []
        service = IPFSService(
            "key", "secret",
            transport=_transport(lambda r: httpx.Response(200, json={"IpfsHash": "QmFile"}), seen),
        )
        assert await service.upload_file(b"\x00\x01", "rec.webm", "audio/webm") == "QmFile"
        assert seen[0].url.path == "/pinning/pinFileToIPFS"
        assert b"rec.webm" in seen[0].read()

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        service = IPFSService("key", "secret", transport=_transport(lambda r: httpx.Response(401)))
        with pytest.raises(ServiceUnavailable):
            await service.upload_json({}, "x.json")

    def test_gateway_url(self):
        assert IPFSService.get_ipfs_url("QmX") == "https://gateway.pinata.cloud/ipfs/QmX"


# ── DATABASE ─────────────────────────────────────────────────

class TestDatabase:

    @pytest.mark.asyncio
    async def test_save_recording_round_trip(self):
        seen = []

        def handler(request):
            return httpx.Response(201, json=[json.loads(request.content)])

        service = DatabaseService("https://db.test", "anon", transport=_transport(handler, seen))
        recording = Recording(recording_id="r1", media_ref="blob:r1", duration=7)
        saved = await service.save_recording(recording)
        assert saved == recording
        assert seen[0].url.path == "/rest/v1/recordings"
        assert seen[0].headers["apikey"] == "anon"

    @pytest.mark.asyncio
    async def test_get_user_recordings_filters(self):
        seen = []
        service = DatabaseService(
            "https://db.test/", "anon",
            transport=_transport(lambda r: httpx.Response(200, json=[]), seen),
        )
        assert await service.get_user_recordings("u1") == []
        params = seen[0].url.params
        assert params["userId"] == "eq.u1"
        assert params["order"] == "createdAt.desc"

    @pytest.mark.asyncio
    async def test_update_recording_sends_camel_case(self):
        seen = []
        row = Recording(recording_id="r1", media_ref="blob:r1", is_uploaded=True)

        service = DatabaseService(
            "https://db.test", "anon",
            transport=_transport(
                lambda r: httpx.Response(200, json=[row.model_dump(mode="json", by_alias=True)]),
                seen,
            ),
        )
        updated = await service.update_recording("r1", is_uploaded=True, ipfs_hash="Qm1")
        assert updated.is_uploaded is True
        assert json.loads(seen[0].content) == {"isUploaded": True, "ipfsHash": "Qm1"}
        assert seen[0].method == "PATCH"

    @pytest.mark.asyncio
    async def test_shareable_cards_limit(self):
        seen = []
        card = ShareableCardData(interaction_type="arrest", summary="s", shareable_text="t")
        service = DatabaseService(
            "https://db.test", "anon",
            transport=_transport(
                lambda r: httpx.Response(200, json=[card.model_dump(mode="json", by_alias=True)]),
                seen,
            ),
        )
        cards = await service.get_shareable_cards(limit=5)
        assert cards == [card]
        assert seen[0].url.params["limit"] == "5"


# ── LOCATION ─────────────────────────────────────────────────

class TestLocation:

    @pytest.mark.asyncio
    async def test_reverse_geocode(self):
        payload = {"city": "Sacramento", "principalSubdivision": "California"}
        service = LocationService(transport=_transport(lambda r: httpx.Response(200, json=payload)))
        assert await service.reverse_geocode(38.58, -121.49) == "Sacramento, California"

    @pytest.mark.asyncio
    async def test_reverse_geocode_falls_back_to_coordinates(self):
        service = LocationService(transport=_transport(lambda r: httpx.Response(503)))
        assert await service.reverse_geocode(38.581572, -121.4944) == "38.5816, -121.4944"

    @pytest.mark.asyncio
    async def test_current_location_without_position_source(self):
        with pytest.raises(ServiceUnavailable):
            await LocationService().current_location()

    @pytest.mark.asyncio
    async def test_current_location(self):
        async def position():
            return 30.27, -97.74

        payload = {"locality": "Austin", "countryName": "United States"}
        service = LocationService(
            position_provider=position,
            transport=_transport(lambda r: httpx.Response(200, json=payload)),
        )
        assert await service.current_location() == "Austin, United States"
