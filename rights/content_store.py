"""
content_store – read-only lookup over the rights catalog.

ContentStore answers two questions:

    get_base_card(interaction_type, language)   → RightsCard
    get_variation(jurisdiction, interaction_type) → StateVariation | None

Both are pure lookups; the underlying catalog dicts are never mutated.
A store can be built over custom catalogs, which is how tests inject
specific variations.
"""
from __future__ import annotations

import logging
from typing import Mapping

from .catalog import BASE_CARDS, STATE_NAMES, STATE_VARIATIONS, US_STATES
from .errors import UnknownInteractionType
from .models import (
    DEFAULT_LANGUAGE,
    GENERAL_JURISDICTION,
    INTERACTION_TYPES,
    LANGUAGES,
    CardContent,
    CardScript,
    RightsCard,
    StateVariation,
)

logger = logging.getLogger(__name__)


def normalise_language(language: str | None) -> str:
    """Return a supported language code, falling back to English."""
    code = (language or "").strip().lower()
    if code in LANGUAGES:
        return code
    if code:
        logger.debug("Unsupported language %r, serving %s", language, DEFAULT_LANGUAGE)
    return DEFAULT_LANGUAGE


def normalise_jurisdiction(jurisdiction: str | None) -> str:
    """Upper-case a state code; blank or "general" maps to the General sentinel."""
    code = (jurisdiction or "").strip()
    if not code or code.lower() == GENERAL_JURISDICTION.lower():
        return GENERAL_JURISDICTION
    return code.upper()


class ContentStore:
    """
    Static catalog of base rights content and per-state variations.

    Usage::

        store = ContentStore()
        card = store.get_base_card("traffic_stop", "es")
        extra = store.get_variation("CA", "traffic_stop")
    """

    def __init__(
        self,
        base_cards: Mapping[str, Mapping[str, Mapping[str, object]]] | None = None,
        variations: Mapping[str, Mapping[str, Mapping[str, list[str]]]] | None = None,
    ) -> None:
        self._base_cards = base_cards if base_cards is not None else BASE_CARDS
        self._variations = variations if variations is not None else STATE_VARIATIONS

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_base_card(self, interaction_type: str, language: str = DEFAULT_LANGUAGE) -> RightsCard:
        """
        Return the unmodified catalog card for an interaction type.

        Args:
            interaction_type  One of INTERACTION_TYPES.
            language          "en" | "es"; anything else serves English.

        Raises:
            UnknownInteractionType if the type is not in the enumeration.
        """
        if interaction_type not in INTERACTION_TYPES:
            raise UnknownInteractionType(interaction_type)

        lang = normalise_language(language)
        cards = self._base_cards.get(lang, {})
        entry = cards.get(interaction_type)
        if entry is None:
            # Catalog gap for this language; fall back to English.
            lang = DEFAULT_LANGUAGE
            entry = self._base_cards.get(DEFAULT_LANGUAGE, {}).get(interaction_type)
        if entry is None:
            raise UnknownInteractionType(interaction_type)

        return self._build_card(interaction_type, GENERAL_JURISDICTION, lang, entry)

    def get_variation(self, jurisdiction: str, interaction_type: str) -> StateVariation | None:
        """
        Return the additive variation for a state, or None.

        Missing data is not an error: states without custom content
        contribute nothing.
        """
        code = normalise_jurisdiction(jurisdiction)
        if code == GENERAL_JURISDICTION:
            return None
        by_type = self._variations.get(code)
        if not by_type or interaction_type not in by_type:
            return None
        raw = by_type[interaction_type]
        return StateVariation(
            jurisdiction=code,
            interaction_type=interaction_type,
            additional_rights=tuple(raw.get("additional_rights", ())),
            additional_dos=tuple(raw.get("additional_dos", ())),
        )

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    @staticmethod
    def interaction_types() -> tuple[str, ...]:
        return INTERACTION_TYPES

    @staticmethod
    def languages() -> tuple[str, ...]:
        return LANGUAGES

    @staticmethod
    def jurisdictions() -> list[dict[str, str]]:
        """General first, then every state as {"code", "name"}."""
        listing = [{"code": GENERAL_JURISDICTION, "name": GENERAL_JURISDICTION}]
        listing.extend({"code": code, "name": STATE_NAMES[code]} for code in US_STATES)
        return listing

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _build_card(
        interaction_type: str,
        jurisdiction: str,
        language: str,
        entry: Mapping[str, object],
    ) -> RightsCard:
        def items(key: str) -> tuple[str, ...]:
            return tuple(entry.get(key, ()))  # type: ignore[arg-type]

        return RightsCard(
            card_id=f"{interaction_type}-{jurisdiction}-{language}",
            interaction_type=interaction_type,
            jurisdiction=jurisdiction,
            language=language,
            title=str(entry["title"]),
            content=CardContent(
                dos=items("dos"),
                donts=items("donts"),
                key_rights=items("key_rights"),
                emergency_contacts=items("emergency_contacts"),
                legal_resources=items("legal_resources"),
            ),
            script=CardScript(
                phrases=items("phrases"),
                responses=items("responses"),
                emergency_phrases=items("emergency_phrases"),
            ),
        )


# ---------------------------------------------------------------------------
# Module-level singleton
# ---------------------------------------------------------------------------

_store: ContentStore | None = None


def get_store() -> ContentStore:
    """Return the shared ContentStore singleton."""
    global _store            # noqa: PLW0603
    if _store is None:
        _store = ContentStore()
    return _store
