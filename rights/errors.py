"""
errors – exception taxonomy shared by the rights package and the backend.

Every error carries the HTTP status the API layer reports it with, so the
FastAPI exception handler can map them without a lookup table.
"""
from __future__ import annotations


class RightsCardError(Exception):
    """Base class for all RightsCard errors."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnknownInteractionType(RightsCardError):
    """The interaction type is outside the supported enumeration."""

    status_code = 400

    def __init__(self, interaction_type: str) -> None:
        super().__init__(f"Invalid interaction type: {interaction_type!r}")
        self.interaction_type = interaction_type


class ValidationError(RightsCardError):
    """A request payload failed validation at the HTTP boundary."""

    status_code = 400


class ServiceUnavailable(RightsCardError):
    """An external collaborator is unconfigured or unreachable."""

    status_code = 503


class ParseFailure(RightsCardError):
    """A generated response could not be turned into a structured value."""

    status_code = 502


class PermissionDenied(RightsCardError):
    """The user (or platform) refused access to a capture device."""

    status_code = 403


class InvalidTransition(RightsCardError):
    """A capture action is not allowed in the current capture state."""

    status_code = 409

    def __init__(self, current: str, action: str) -> None:
        super().__init__(f"Cannot {action} while capture is {current}")
        self.current = current
        self.action = action


class CaptureError(RightsCardError):
    """The media backend failed during a capture session."""

    status_code = 500
