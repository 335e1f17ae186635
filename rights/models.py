"""
models – immutable value types for rights content.

RightsCard values are derived on demand from the catalog and never
persisted; list-like fields are tuples so a resolved card cannot be
mutated after the fact.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


INTERACTION_TYPES: tuple[str, ...] = (
    "traffic_stop",
    "questioning",
    "home_search",
    "arrest",
    "protest",
    "other",
)

LANGUAGES: tuple[str, ...] = ("en", "es")

DEFAULT_LANGUAGE = "en"

GENERAL_JURISDICTION = "General"

SHAREABLE_TEXT_LIMIT = 280


@dataclass(frozen=True)
class CardContent:
    dos:                tuple[str, ...]
    donts:              tuple[str, ...]
    key_rights:         tuple[str, ...]
    emergency_contacts: tuple[str, ...] = ()
    legal_resources:    tuple[str, ...] = ()


@dataclass(frozen=True)
class CardScript:
    phrases:           tuple[str, ...]
    responses:         tuple[str, ...]
    emergency_phrases: tuple[str, ...] = ()


@dataclass(frozen=True)
class RightsCard:
    """
    The resolved bundle of rights content for one type/jurisdiction/language.

    Attributes
    ----------
    card_id           Deterministic "{type}-{jurisdiction}-{suffix}" key.
    interaction_type  One of INTERACTION_TYPES.
    jurisdiction      US state code or "General".
    language          Language the content is written in.
    title             Display title.
    content           Do's, don'ts, key rights and optional extras.
    script            Phrases to say and responses to give.
    context           Free-form user text carried as metadata only.
    """
    card_id:          str
    interaction_type: str
    jurisdiction:     str
    language:         str
    title:            str
    content:          CardContent
    script:           CardScript
    context:          str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Render the camelCase wire shape used by the HTTP API."""
        payload: dict[str, Any] = {
            "cardId":          self.card_id,
            "jurisdiction":    self.jurisdiction,
            "interactionType": self.interaction_type,
            "language":        self.language,
            "title":           self.title,
            "content": {
                "dos":       list(self.content.dos),
                "donts":     list(self.content.donts),
                "keyRights": list(self.content.key_rights),
            },
            "script": {
                "phrases":   list(self.script.phrases),
                "responses": list(self.script.responses),
            },
        }
        if self.content.emergency_contacts:
            payload["content"]["emergencyContacts"] = list(self.content.emergency_contacts)
        if self.content.legal_resources:
            payload["content"]["legalResources"] = list(self.content.legal_resources)
        if self.script.emergency_phrases:
            payload["script"]["emergencyPhrases"] = list(self.script.emergency_phrases)
        if self.context is not None:
            payload["context"] = self.context
        return payload


@dataclass(frozen=True)
class StateVariation:
    """Additive, per-jurisdiction extras appended to a base card."""
    jurisdiction:      str
    interaction_type:  str
    additional_rights: tuple[str, ...] = ()
    additional_dos:    tuple[str, ...] = ()


@dataclass
class GeneratedCard:
    """AI-written (or fallback) summary bundle for sharing."""
    title:            str
    summary:          str
    key_points:       list[str]
    shareable_text:   str
    created_at:       float = field(default_factory=time.time)
    interaction_type: str | None = None
    jurisdiction:     str | None = None
    generated:        bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "title":         self.title,
            "summary":       self.summary,
            "keyPoints":     list(self.key_points),
            "shareableText": self.shareable_text,
        }


class SectionSource(str, Enum):
    """Where the items of one custom-card section came from."""
    GENERATED = "generated"
    DEFAULTED = "defaulted"
    BASE      = "base"


CARD_SECTIONS: tuple[str, ...] = ("dos", "donts", "key_rights", "phrases", "responses")


@dataclass
class CustomCard:
    """
    A rights card built from generated text.

    ``sections`` tags every section so callers can tell model output from
    substituted defaults; ``origin`` is BASE when the whole card fell back
    to the catalog.
    """
    card:     RightsCard
    sections: dict[str, SectionSource]
    origin:   SectionSource

    def to_dict(self) -> dict[str, Any]:
        return {
            "card":     self.card.to_dict(),
            "sections": {name: source.value for name, source in self.sections.items()},
            "origin":   self.origin.value,
        }
