"""
backend.capture.recorder – start/stop lifecycle of one audio or video capture.

The session is an explicit state machine::

    IDLE ──start──▶ REQUESTING_PERMISSION ──grant──▶ CAPTURING ──stop──▶ FINALIZING
      ▲                     │ deny / fail                │ fail              │ finish / fail
      └─────────────────────┴────────────────────────────┴───────────────────┘

Any (state, action) pair missing from _TRANSITIONS raises InvalidTransition
and leaves the state untouched.  The media stream is owned by the session
and its tracks are stopped exactly once when the session ends, on every
path.

Device access is abstracted behind small protocols so the platform
capability can be swapped for a fake in tests.
"""
from __future__ import annotations

import asyncio
import contextlib
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Awaitable, Callable, Protocol

from rights.errors import CaptureError, InvalidTransition, PermissionDenied

from backend.db.schemas import Recording

logger = logging.getLogger(__name__)

LOCATION_UNAVAILABLE = "Location unavailable"
TICK_SECONDS = 1.0


class Medium(str, Enum):
    AUDIO = "audio"
    VIDEO = "video"

    @property
    def mime_type(self) -> str:
        return f"{self.value}/webm"


class CaptureState(str, Enum):
    IDLE                  = "idle"
    REQUESTING_PERMISSION = "requesting_permission"
    CAPTURING             = "capturing"
    FINALIZING            = "finalizing"


_TRANSITIONS: dict[tuple[CaptureState, str], CaptureState] = {
    (CaptureState.IDLE,                  "start"):  CaptureState.REQUESTING_PERMISSION,
    (CaptureState.REQUESTING_PERMISSION, "grant"):  CaptureState.CAPTURING,
    (CaptureState.REQUESTING_PERMISSION, "deny"):   CaptureState.IDLE,
    (CaptureState.REQUESTING_PERMISSION, "fail"):   CaptureState.IDLE,
    (CaptureState.CAPTURING,             "stop"):   CaptureState.FINALIZING,
    (CaptureState.CAPTURING,             "fail"):   CaptureState.IDLE,
    (CaptureState.FINALIZING,            "finish"): CaptureState.IDLE,
    (CaptureState.FINALIZING,            "fail"):   CaptureState.IDLE,
}


# ---------------------------------------------------------------------------
# Device protocols
# ---------------------------------------------------------------------------

class MediaStream(Protocol):
    def stop_tracks(self) -> None:
        """Release the underlying camera / microphone."""


class MediaRecorder(Protocol):
    def start(self) -> None: ...

    async def stop(self) -> list[bytes]:
        """Stop encoding and return every chunk emitted, in order."""


class MediaDevices(Protocol):
    async def get_user_media(self, medium: Medium) -> MediaStream:
        """Prompt for permission; raise PermissionError on denial."""

    def create_recorder(self, stream: MediaStream, mime_type: str) -> MediaRecorder: ...


class LocationProvider(Protocol):
    async def current_location(self) -> str: ...


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MediaBlob:
    data:      bytes
    mime_type: str

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class CaptureResult:
    recording: Recording
    blob:      MediaBlob


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------

class RecordingCapture:
    """
    One capture session at a time.

    Usage::

        capture = RecordingCapture(devices)
        await capture.start(Medium.VIDEO, "traffic_stop")
        ...
        result = await capture.stop()
        store.add_recording(result.recording)
    """

    def __init__(
        self,
        devices: MediaDevices,
        user_id: str = "local-user",
        auto_tick: bool = True,
        location_provider: LocationProvider | None = None,
        on_complete: Callable[[CaptureResult], Awaitable[None] | None] | None = None,
    ) -> None:
        self.devices = devices
        self.user_id = user_id
        self.auto_tick = auto_tick
        self.location_provider = location_provider
        self.on_complete = on_complete

        self.state = CaptureState.IDLE
        self.duration = 0
        self.medium: Medium | None = None
        self.interaction_type: str | None = None
        self.started_at: datetime | None = None

        self._stream: MediaStream | None = None
        self._recorder: MediaRecorder | None = None
        self._timer: asyncio.Task | None = None

    @property
    def is_capturing(self) -> bool:
        return self.state is CaptureState.CAPTURING

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self, medium: Medium | str, interaction_type: str) -> None:
        """
        Request the device and begin capturing.

        Raises:
            InvalidTransition   a session is already active.
            PermissionDenied    the user or platform refused the device.
            CaptureError        the recorder could not be started.
        """
        medium = Medium(medium)
        self._transition("start")

        try:
            stream = await self.devices.get_user_media(medium)
        except (PermissionError, PermissionDenied) as exc:
            self._transition("deny")
            logger.info("Capture permission denied for %s", medium.value)
            raise PermissionDenied(f"Permission to use the {medium.value} device was denied") from exc
        except asyncio.CancelledError:
            self._transition("fail")
            logger.info("Capture start cancelled while requesting %s", medium.value)
            raise
        except Exception as exc:
            self._transition("fail")
            raise CaptureError(f"Could not access {medium.value} device: {exc}") from exc

        self._stream = stream
        self._transition("grant")

        try:
            self._recorder = self.devices.create_recorder(stream, medium.mime_type)
            self._recorder.start()
        except Exception as exc:
            self._release_stream()
            self._reset()
            self._transition("fail")
            raise CaptureError(f"Could not start recorder: {exc}") from exc

        self.medium = medium
        self.interaction_type = interaction_type
        self.started_at = datetime.now(timezone.utc)
        self.duration = 0
        if self.auto_tick:
            self._timer = asyncio.create_task(self._run_timer())
        logger.info("Capture started: %s / %s", medium.value, interaction_type)

    def tick(self) -> int:
        """Advance the duration by one second while capturing."""
        if self.state is CaptureState.CAPTURING:
            self.duration += 1
        return self.duration

    async def stop(self, location: str | None = None) -> CaptureResult | None:
        """
        Finalise the session and return the completed recording.

        Returns:
            None when no session is active.

        Raises:
            InvalidTransition   called while permission is still pending.
            CaptureError        the recorder failed while finalising.
        """
        if self.state is CaptureState.IDLE:
            return None

        self._transition("stop")
        medium = self.medium or Medium.AUDIO

        # Every exit from FINALIZING other than "finish", cancellation
        # included, releases the stream and returns to IDLE.
        try:
            await self._cancel_timer()
            duration = self.duration
            try:
                chunks = await self._recorder.stop()  # type: ignore[union-attr]
            except Exception as exc:
                raise CaptureError(f"Recorder failed while stopping: {exc}") from exc
            finally:
                self._release_stream()

            blob = MediaBlob(data=b"".join(chunks), mime_type=medium.mime_type)

            if location is None and self.location_provider is not None:
                location = await self._lookup_location()
        except (Exception, asyncio.CancelledError):
            self._release_stream()
            self._reset()
            self._transition("fail")
            raise

        recording = Recording(
            user_id=self.user_id,
            created_at=self.started_at or datetime.now(timezone.utc),
            duration=duration,
            media_ref=f"blob:{uuid.uuid4()}",
            medium=medium.value,
            interaction_type=self.interaction_type or "other",
            location=location,
        )
        result = CaptureResult(recording=recording, blob=blob)

        self._transition("finish")
        self._reset()
        logger.info(
            "Capture finished: %s, %ds, %d bytes",
            recording.recording_id, duration, blob.size,
        )

        if self.on_complete is not None:
            outcome = self.on_complete(result)
            if asyncio.iscoroutine(outcome):
                await outcome
        return result

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _transition(self, action: str) -> None:
        target = _TRANSITIONS.get((self.state, action))
        if target is None:
            raise InvalidTransition(self.state.value, action)
        logger.debug("Capture %s: %s → %s", action, self.state.value, target.value)
        self.state = target

    async def _run_timer(self) -> None:
        while True:
            await asyncio.sleep(TICK_SECONDS)
            self.tick()

    async def _cancel_timer(self) -> None:
        timer, self._timer = self._timer, None
        if timer is None:
            return
        timer.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await timer

    async def _lookup_location(self) -> str:
        try:
            return await self.location_provider.current_location()  # type: ignore[union-attr]
        except Exception as exc:
            logger.warning("Location lookup failed: %s", exc)
            return LOCATION_UNAVAILABLE

    def _release_stream(self) -> None:
        stream, self._stream = self._stream, None
        if stream is not None:
            stream.stop_tracks()

    def _reset(self) -> None:
        self._recorder = None
        self.medium = None
        self.interaction_type = None
        self.started_at = None
