"""
rights – rights-content catalog and card resolution.

Submodules
----------
catalog         Static base cards, state variations and reference tables.
content_store   ContentStore: base-card and variation lookups.
resolver        CardResolver: merges base + variation into a RightsCard.
models          Immutable value types (RightsCard, StateVariation, ...).
errors          Exception taxonomy shared with the backend.
disclaimer      Returns the standard not-legal-advice notice.
"""

from .content_store import ContentStore, get_store
from .errors import UnknownInteractionType
from .models import RightsCard, StateVariation
from .resolver import CardResolver, resolve_card

__all__ = [
    "ContentStore",
    "get_store",
    "CardResolver",
    "resolve_card",
    "RightsCard",
    "StateVariation",
    "UnknownInteractionType",
]
