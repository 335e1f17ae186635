"""backend.db – persisted client state."""
from .schemas import EmergencyContact, PersistedState, Preferences, Recording, Selections
from .state_store import STORAGE_KEY, ClientStateStore, InMemoryStorage, KeyValueStorage

__all__ = [
    "ClientStateStore",
    "EmergencyContact",
    "InMemoryStorage",
    "KeyValueStorage",
    "PersistedState",
    "Preferences",
    "Recording",
    "STORAGE_KEY",
    "Selections",
]
