"""backend.capture – audio/video capture session."""
from .recorder import (
    CaptureResult,
    CaptureState,
    LocationProvider,
    MediaBlob,
    MediaDevices,
    MediaRecorder,
    MediaStream,
    Medium,
    RecordingCapture,
)

__all__ = [
    "CaptureResult",
    "CaptureState",
    "LocationProvider",
    "MediaBlob",
    "MediaDevices",
    "MediaRecorder",
    "MediaStream",
    "Medium",
    "RecordingCapture",
]
