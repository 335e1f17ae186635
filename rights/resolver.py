"""
resolver – builds the rights card shown to the user.

Merges the base card for (interaction type, language) with any per-state
variation.  Variation entries are appended after the base entries; nothing
is removed, reordered or deduplicated.
"""
from __future__ import annotations

import logging
from dataclasses import replace

from .content_store import (
    ContentStore,
    get_store,
    normalise_jurisdiction,
)
from .models import DEFAULT_LANGUAGE, GENERAL_JURISDICTION, RightsCard

logger = logging.getLogger(__name__)


class CardResolver:
    """
    Resolve (interaction type, jurisdiction, language) into a RightsCard.

    Usage::

        resolver = CardResolver(ContentStore())
        card = resolver.resolve("traffic_stop", "CA", "en")
    """

    def __init__(self, store: ContentStore | None = None) -> None:
        self.store = store or get_store()

    def resolve(
        self,
        interaction_type: str,
        jurisdiction: str = GENERAL_JURISDICTION,
        language: str = DEFAULT_LANGUAGE,
        context: str | None = None,
        id_suffix: str | None = None,
    ) -> RightsCard:
        """
        Return the merged card.

        Args:
            interaction_type  One of the supported interaction types.
            jurisdiction      State code or "General".
            language          "en" | "es".
            context           Free-form user text, carried as metadata only.
            id_suffix         Overrides the language part of card_id
                              (the POST route uses "custom").

        Raises:
            UnknownInteractionType, propagated from the content store.
        """
        base = self.store.get_base_card(interaction_type, language)
        code = normalise_jurisdiction(jurisdiction)
        card_id = f"{interaction_type}-{code}-{id_suffix or base.language}"

        variation = self.store.get_variation(code, interaction_type)
        if variation is None:
            logger.debug("No variation for %s/%s", code, interaction_type)
            return replace(base, card_id=card_id, jurisdiction=code, context=context)

        content = replace(
            base.content,
            key_rights=base.content.key_rights + variation.additional_rights,
            dos=base.content.dos + variation.additional_dos,
        )
        return replace(
            base,
            card_id=card_id,
            jurisdiction=code,
            content=content,
            context=context,
        )


# ---------------------------------------------------------------------------
# Convenience function
# ---------------------------------------------------------------------------

_resolver: CardResolver | None = None


def resolve_card(
    interaction_type: str,
    jurisdiction: str = GENERAL_JURISDICTION,
    language: str = DEFAULT_LANGUAGE,
    context: str | None = None,
) -> RightsCard:
    """
    Resolve a card with the shared catalog.

    Example
    -------
    >>> from rights.resolver import resolve_card
    >>> card = resolve_card("traffic_stop", "CA", "en")
    >>> card.card_id
    'traffic_stop-CA-en'
    """
    global _resolver          # noqa: PLW0603
    if _resolver is None:
        _resolver = CardResolver()
    return _resolver.resolve(interaction_type, jurisdiction, language, context)
