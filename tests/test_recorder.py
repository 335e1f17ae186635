"""
tests/test_recorder.py
Capture state machine with fake media devices.
"""
import asyncio

import pytest

from backend.capture.recorder import (
    LOCATION_UNAVAILABLE,
    CaptureState,
    Medium,
    RecordingCapture,
)
from rights.errors import CaptureError, InvalidTransition, PermissionDenied


# ── FAKE DEVICES ─────────────────────────────────────────────

class FakeStream:
    def __init__(self):
        self.stop_calls = 0

    def stop_tracks(self):
        self.stop_calls += 1


class FakeRecorder:
    def __init__(self, chunks=(b"ab", b"cd"), fail_on_start=False, fail_on_stop=False):
        self.chunks = list(chunks)
        self.fail_on_start = fail_on_start
        self.fail_on_stop = fail_on_stop
        self.started = False

    def start(self):
        if self.fail_on_start:
            raise RuntimeError("encoder unavailable")
        self.started = True

    async def stop(self):
        if self.fail_on_stop:
            raise RuntimeError("encoder crashed")
        return self.chunks


class FakeDevices:
    def __init__(self, deny=False, recorder=None):
        self.deny = deny
        self.recorder = recorder or FakeRecorder()
        self.streams = []
        self.mime_types = []

    async def get_user_media(self, medium):
        if self.deny:
            raise PermissionError("NotAllowedError")
        stream = FakeStream()
        self.streams.append(stream)
        return stream

    def create_recorder(self, stream, mime_type):
        self.mime_types.append(mime_type)
        return self.recorder


class FakeLocation:
    def __init__(self, value=None, error=None):
        self.value = value
        self.error = error

    async def current_location(self):
        if self.error:
            raise self.error
        return self.value


class HangingDevices(FakeDevices):
    """Permission prompt that never resolves."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.waiting = asyncio.Event()

    async def get_user_media(self, medium):
        self.waiting.set()
        await asyncio.Event().wait()


class HangingLocation:
    def __init__(self):
        self.waiting = asyncio.Event()

    async def current_location(self):
        self.waiting.set()
        await asyncio.Event().wait()


def _make_capture(**kwargs):
    devices = kwargs.pop("devices", None) or FakeDevices()
    return RecordingCapture(devices, auto_tick=False, **kwargs), devices


# ── LIFECYCLE ────────────────────────────────────────────────

class TestLifecycle:

    @pytest.mark.asyncio
    async def test_start_then_stop(self):
        capture, devices = _make_capture()
        await capture.start(Medium.VIDEO, "traffic_stop")
        assert capture.state is CaptureState.CAPTURING
        assert devices.mime_types == ["video/webm"]

        result = await capture.stop(location="Oakland, California")
        assert capture.state is CaptureState.IDLE
        assert result.blob.data == b"abcd"
        assert result.blob.mime_type == "video/webm"
        assert result.recording.medium == "video"
        assert result.recording.interaction_type == "traffic_stop"
        assert result.recording.location == "Oakland, California"
        assert result.recording.media_ref.startswith("blob:")
        assert result.recording.is_uploaded is False

    @pytest.mark.asyncio
    async def test_five_ticks_give_five_seconds(self):
        capture, _ = _make_capture()
        await capture.start("audio", "questioning")
        for _ in range(5):
            capture.tick()
        result = await capture.stop()
        assert result.recording.duration == 5

    @pytest.mark.asyncio
    async def test_tracks_released_exactly_once(self):
        capture, devices = _make_capture()
        await capture.start(Medium.AUDIO, "arrest")
        await capture.stop()
        await capture.stop()
        assert devices.streams[0].stop_calls == 1

    @pytest.mark.asyncio
    async def test_stop_while_idle_is_noop(self):
        capture, devices = _make_capture()
        assert await capture.stop() is None
        assert capture.state is CaptureState.IDLE
        assert devices.streams == []

    def test_tick_outside_capture_does_nothing(self):
        capture, _ = _make_capture()
        assert capture.tick() == 0

    @pytest.mark.asyncio
    async def test_on_complete_receives_result(self):
        received = []
        capture, _ = _make_capture(on_complete=received.append)
        await capture.start(Medium.AUDIO, "other")
        result = await capture.stop()
        assert received == [result]


# ── ILLEGAL TRANSITIONS AND ERRORS ───────────────────────────

class TestRejections:

    @pytest.mark.asyncio
    async def test_double_start_rejected_without_side_effects(self):
        capture, devices = _make_capture()
        await capture.start(Medium.AUDIO, "traffic_stop")
        capture.tick()

        with pytest.raises(InvalidTransition):
            await capture.start(Medium.VIDEO, "arrest")

        assert capture.state is CaptureState.CAPTURING
        assert capture.medium is Medium.AUDIO
        assert capture.interaction_type == "traffic_stop"
        assert capture.duration == 1
        assert len(devices.streams) == 1

    @pytest.mark.asyncio
    async def test_permission_denied_returns_to_idle(self):
        capture, _ = _make_capture(devices=FakeDevices(deny=True))
        with pytest.raises(PermissionDenied):
            await capture.start(Medium.VIDEO, "protest")
        assert capture.state is CaptureState.IDLE

    @pytest.mark.asyncio
    async def test_recorder_start_failure_releases_stream(self):
        devices = FakeDevices(recorder=FakeRecorder(fail_on_start=True))
        capture, _ = _make_capture(devices=devices)
        with pytest.raises(CaptureError):
            await capture.start(Medium.AUDIO, "other")
        assert capture.state is CaptureState.IDLE
        assert devices.streams[0].stop_calls == 1

    @pytest.mark.asyncio
    async def test_recorder_stop_failure_still_releases_stream(self):
        devices = FakeDevices(recorder=FakeRecorder(fail_on_stop=True))
        capture, _ = _make_capture(devices=devices)
        await capture.start(Medium.AUDIO, "other")
        with pytest.raises(CaptureError):
            await capture.stop()
        assert capture.state is CaptureState.IDLE
        assert devices.streams[0].stop_calls == 1


# ── LOCATION ─────────────────────────────────────────────────

class TestLocation:

    @pytest.mark.asyncio
    async def test_provider_used_when_no_location_given(self):
        capture, _ = _make_capture(location_provider=FakeLocation("Austin, Texas"))
        await capture.start(Medium.AUDIO, "traffic_stop")
        result = await capture.stop()
        assert result.recording.location == "Austin, Texas"

    @pytest.mark.asyncio
    async def test_provider_failure_is_reported_as_unavailable(self):
        capture, _ = _make_capture(location_provider=FakeLocation(error=TimeoutError()))
        await capture.start(Medium.AUDIO, "traffic_stop")
        result = await capture.stop()
        assert result.recording.location == LOCATION_UNAVAILABLE


# ── TIMER ────────────────────────────────────────────────────

class TestAutoTick:

    @pytest.mark.asyncio
    async def test_timer_task_is_cancelled_on_stop(self):
        capture = RecordingCapture(FakeDevices(), auto_tick=True)
        await capture.start(Medium.AUDIO, "other")
        timer = capture._timer
        assert timer is not None and not timer.done()
        await capture.stop()
        assert timer.cancelled()
        assert capture._timer is None


# ── CANCELLATION ─────────────────────────────────────────────

class TestCancellation:

    @pytest.mark.asyncio
    async def test_cancel_during_permission_prompt_returns_to_idle(self):
        devices = HangingDevices()
        capture, _ = _make_capture(devices=devices)
        task = asyncio.create_task(capture.start(Medium.VIDEO, "protest"))
        await devices.waiting.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert capture.state is CaptureState.IDLE

        capture.devices = FakeDevices()
        await capture.start(Medium.AUDIO, "protest")
        assert capture.state is CaptureState.CAPTURING

    @pytest.mark.asyncio
    async def test_cancel_while_finalising_returns_to_idle(self):
        location = HangingLocation()
        capture, devices = _make_capture(location_provider=location)
        await capture.start(Medium.AUDIO, "traffic_stop")
        task = asyncio.create_task(capture.stop())
        await location.waiting.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        assert capture.state is CaptureState.IDLE
        assert capture.medium is None
        assert devices.streams[0].stop_calls == 1

        await capture.start(Medium.AUDIO, "traffic_stop")
        assert capture.state is CaptureState.CAPTURING
