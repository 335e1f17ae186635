"""
backend.db.schemas – persisted client-state records.

Serialised with camelCase keys so the stored document matches the browser
layout (``emergencyContacts``, ``aiSummary``, ...).  Field names accept
either spelling on input.
"""
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from rights.models import DEFAULT_LANGUAGE, GENERAL_JURISDICTION

Medium = Literal["audio", "video"]
Language = Literal["en", "es"]
Theme = Literal["light", "dark", "system"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Recording(_CamelModel):
    """A finished capture, created when a session stops."""
    recording_id:     str            = Field(default_factory=lambda: str(uuid.uuid4()))
    user_id:          str            = "local-user"
    created_at:       datetime       = Field(default_factory=_utcnow)
    duration:         int            = Field(default=0, ge=0, description="Whole seconds")
    media_ref:        str            = Field(description="Opaque blob handle or URI")
    medium:           Medium         = "audio"
    interaction_type: str            = "other"
    location:         str | None     = None
    ai_summary:       str | None     = None
    is_uploaded:      bool           = False
    ipfs_hash:        str | None     = None


class Preferences(_CamelModel):
    language:                 Language = DEFAULT_LANGUAGE
    default_recording_type:   Medium   = "audio"
    enable_location_tracking: bool     = True
    enable_offline_mode:      bool     = True
    enable_notifications:     bool     = True
    auto_record:              bool     = False
    theme:                    Theme    = "system"


class Selections(_CamelModel):
    state:    str      = GENERAL_JURISDICTION
    language: Language = DEFAULT_LANGUAGE


class EmergencyContact(_CamelModel):
    id:           str  = Field(default_factory=lambda: str(uuid.uuid4()))
    name:         str
    phone:        str
    relationship: str  = ""
    is_lawyer:    bool = False


class PersistedState(_CamelModel):
    """Exactly the subset of client state that survives a restart."""
    selections:         Selections             = Field(default_factory=Selections)
    preferences:        Preferences            = Field(default_factory=Preferences)
    recordings:         list[Recording]        = Field(default_factory=list)
    emergency_contacts: list[EmergencyContact] = Field(default_factory=list)


class ShareableCardData(_CamelModel):
    """Row written to the remote store when a card is shared."""
    interaction_type: str
    jurisdiction:     str            = GENERAL_JURISDICTION
    summary:          str
    key_points:       list[str]      = Field(default_factory=list)
    shareable_text:   str
    language:         Language       = DEFAULT_LANGUAGE
    created_at:       datetime       = Field(default_factory=_utcnow)
