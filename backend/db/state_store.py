"""
backend.db.state_store – client selections, preferences and recordings.

ClientStateStore is an explicitly owned container: callers construct it
with a KeyValueStorage and pass it to whatever needs it.  Every mutation
writes the whole persisted document back under one key.

Persisted document (camelCase JSON)::

    {
        "selections":        {"state": "CA", "language": "en"},
        "preferences":       {...},
        "recordings":        [...],   # newest first
        "emergencyContacts": [...]
    }

Transient flags (is_generating, modal_visible, is_online) live only on the
instance and are never written.
"""
from __future__ import annotations

import logging
from typing import Any, Protocol

import pydantic

from rights.content_store import normalise_jurisdiction
from rights.errors import ValidationError
from rights.models import LANGUAGES

from .schemas import EmergencyContact, PersistedState, Preferences, Recording

logger = logging.getLogger(__name__)

STORAGE_KEY = "rightscard-storage"

_RECORDING_UPDATABLE = frozenset({"ai_summary", "is_uploaded", "ipfs_hash", "location"})


# ---------------------------------------------------------------------------
# Storage backends
# ---------------------------------------------------------------------------

class KeyValueStorage(Protocol):
    """String-keyed, string-valued storage with local-storage semantics."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class InMemoryStorage:
    """Dict-backed KeyValueStorage; survives a store restart, not a process one."""

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def __len__(self) -> int:
        return len(self._items)


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------

def _apply(model: pydantic.BaseModel, changes: dict[str, Any]) -> Any:
    """Return a validated copy of ``model`` with ``changes`` applied."""
    unknown = set(changes) - set(type(model).model_fields)
    if unknown:
        raise ValidationError(f"Unknown field(s): {', '.join(sorted(unknown))}")
    try:
        return type(model).model_validate({**model.model_dump(), **changes})
    except pydantic.ValidationError as exc:
        raise ValidationError(str(exc)) from exc


class ClientStateStore:
    """
    Synchronous state container persisted on every change.

    Usage::

        storage = InMemoryStorage()
        store = ClientStateStore.load(storage)
        store.set_selected_state("CA")
        store.add_recording(recording)
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        storage_key: str = STORAGE_KEY,
        state: PersistedState | None = None,
    ) -> None:
        self.storage = storage
        self.storage_key = storage_key
        self._state = state or PersistedState()

        # Transient; never persisted
        self.is_generating = False
        self.modal_visible = False
        self.is_online = True

    @classmethod
    def load(cls, storage: KeyValueStorage, storage_key: str = STORAGE_KEY) -> "ClientStateStore":
        """Restore from storage; a missing or corrupt snapshot yields defaults."""
        raw = storage.get_item(storage_key)
        if raw is None:
            return cls(storage, storage_key)
        try:
            state = PersistedState.model_validate_json(raw)
        except pydantic.ValidationError as exc:
            logger.warning("Discarding corrupt state snapshot %r: %s", storage_key, exc)
            return cls(storage, storage_key)
        logger.debug("Loaded state with %d recording(s)", len(state.recordings))
        return cls(storage, storage_key, state)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def selected_state(self) -> str:
        return self._state.selections.state

    @property
    def selected_language(self) -> str:
        return self._state.selections.language

    @property
    def preferences(self) -> Preferences:
        return self._state.preferences

    @property
    def recordings(self) -> list[Recording]:
        return list(self._state.recordings)

    @property
    def emergency_contacts(self) -> list[EmergencyContact]:
        return list(self._state.emergency_contacts)

    def get_recording(self, recording_id: str) -> Recording | None:
        return next(
            (r for r in self._state.recordings if r.recording_id == recording_id),
            None,
        )

    def snapshot(self) -> dict[str, Any]:
        """The persisted subset as a camelCase JSON-compatible dict."""
        return self._state.model_dump(mode="json", by_alias=True)

    # ------------------------------------------------------------------
    # Selections and preferences
    # ------------------------------------------------------------------

    def set_selected_state(self, jurisdiction: str) -> None:
        selections = self._state.selections.model_copy(
            update={"state": normalise_jurisdiction(jurisdiction)}
        )
        self._state = self._state.model_copy(update={"selections": selections})
        self._persist()

    def set_selected_language(self, language: str) -> None:
        if language not in LANGUAGES:
            raise ValidationError(f"Unsupported language: {language!r}")
        selections = self._state.selections.model_copy(update={"language": language})
        self._state = self._state.model_copy(update={"selections": selections})
        self._persist()

    def update_preferences(self, **changes: Any) -> Preferences:
        preferences = _apply(self._state.preferences, changes)
        self._state = self._state.model_copy(update={"preferences": preferences})
        self._persist()
        return preferences

    # ------------------------------------------------------------------
    # Recordings
    # ------------------------------------------------------------------

    def add_recording(self, recording: Recording) -> None:
        """Prepend; the list is kept newest first."""
        recordings = [recording, *self._state.recordings]
        self._state = self._state.model_copy(update={"recordings": recordings})
        self._persist()

    def update_recording(self, recording_id: str, **changes: Any) -> Recording | None:
        """
        Attach a summary, uploaded flag, IPFS hash or location.

        Returns:
            The updated recording, or None if the id is unknown.
        """
        disallowed = set(changes) - _RECORDING_UPDATABLE
        if disallowed:
            raise ValidationError(
                f"Recording field(s) cannot be changed: {', '.join(sorted(disallowed))}"
            )
        updated: Recording | None = None
        recordings = []
        for recording in self._state.recordings:
            if recording.recording_id == recording_id:
                recording = updated = _apply(recording, changes)
            recordings.append(recording)
        if updated is None:
            logger.debug("update_recording: no recording %s", recording_id)
            return None
        self._state = self._state.model_copy(update={"recordings": recordings})
        self._persist()
        return updated

    def remove_recording(self, recording_id: str) -> bool:
        recordings = [r for r in self._state.recordings if r.recording_id != recording_id]
        if len(recordings) == len(self._state.recordings):
            return False
        self._state = self._state.model_copy(update={"recordings": recordings})
        self._persist()
        return True

    def clear_recordings(self) -> None:
        self._state = self._state.model_copy(update={"recordings": []})
        self._persist()

    # ------------------------------------------------------------------
    # Emergency contacts
    # ------------------------------------------------------------------

    def add_emergency_contact(self, contact: EmergencyContact) -> None:
        contacts = [*self._state.emergency_contacts, contact]
        self._state = self._state.model_copy(update={"emergency_contacts": contacts})
        self._persist()

    def update_emergency_contact(self, contact_id: str, **changes: Any) -> EmergencyContact | None:
        updated: EmergencyContact | None = None
        contacts = []
        for contact in self._state.emergency_contacts:
            if contact.id == contact_id:
                contact = updated = _apply(contact, changes)
            contacts.append(contact)
        if updated is None:
            return None
        self._state = self._state.model_copy(update={"emergency_contacts": contacts})
        self._persist()
        return updated

    def remove_emergency_contact(self, contact_id: str) -> bool:
        contacts = [c for c in self._state.emergency_contacts if c.id != contact_id]
        if len(contacts) == len(self._state.emergency_contacts):
            return False
        self._state = self._state.model_copy(update={"emergency_contacts": contacts})
        self._persist()
        return True

    # ------------------------------------------------------------------

    def _persist(self) -> None:
        self.storage.set_item(
            self.storage_key,
            self._state.model_dump_json(by_alias=True),
        )
