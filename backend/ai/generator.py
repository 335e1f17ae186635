"""
backend.ai.generator – AI summaries and cards with deterministic fallbacks.

CardGenerator wraps a ChatCompletionClient.  Each public method makes at
most one request and never raises for generation faults: unconfigured
service, transport error, non-2xx status, empty or malformed content all
resolve to a fallback built purely from the caller's inputs.

Operations
----------
generate_summary         Objective recording summary (plain text).
generate_shareable_card  Social-media text, at most 280 characters.
generate_custom_card     Parsed do's/don'ts/rights/phrases card.
generate_card            JSON card {title, summary, keyPoints, shareableText}.
"""
from __future__ import annotations

import json
import logging
import re
from dataclasses import replace
from typing import Any

from rights.content_store import ContentStore, get_store, normalise_jurisdiction, normalise_language
from rights.errors import ParseFailure, ServiceUnavailable
from rights.models import (
    CARD_SECTIONS,
    DEFAULT_LANGUAGE,
    CardContent,
    CardScript,
    CustomCard,
    GeneratedCard,
    SectionSource,
)
from backend.utils.formatting import clamp_shareable, format_duration_human, interaction_label

from .card_parser import apply_defaults, parse_sections
from .llm_client import ChatCompletionClient
from .prompts import (
    CARD_SYSTEM,
    SHAREABLE_SYSTEM,
    SUMMARY_SYSTEM,
    build_card_prompt,
    build_custom_card_prompt,
    build_shareable_prompt,
    build_summary_prompt,
)

logger = logging.getLogger(__name__)

# (max_tokens, temperature) per operation
_SUMMARY_PARAMS = (200, 0.3)
_SHAREABLE_PARAMS = (150, 0.4)
_CUSTOM_CARD_PARAMS = (600, 0.3)
_CARD_PARAMS = (400, 0.3)


# ---------------------------------------------------------------------------
# Fallback text
# ---------------------------------------------------------------------------

_SHAREABLE_FALLBACK: dict[str, str] = {
    "en": (
        "Know your rights during police interactions: you can remain silent, "
        "refuse consent to searches, ask if you are free to leave, and record "
        "in public. Stay calm, stay safe. #KnowYourRights #CivilRights"
    ),
    "es": (
        "Conoce tus derechos ante la policía: puedes permanecer en silencio, "
        "negarte a un registro, preguntar si eres libre de irte y grabar en "
        "público. Mantén la calma. #ConoceTusDerechos #DerechosCiviles"
    ),
}

_CARD_FALLBACK: dict[str, dict[str, Any]] = {
    "en": {
        "title": "{label} Rights",
        "summary": (
            "Know your rights during police interactions. Stay calm, be "
            "respectful, and remember you have constitutional protections."
        ),
        "key_points": [
            "You have the right to remain silent",
            "You can refuse consent to searches",
            "You can ask if you are being detained",
            "You have the right to record interactions",
        ],
        "shareable": (
            "Know your rights during {label_lower} interactions. Stay informed, "
            "stay safe. #KnowYourRights #CivilRights"
        ),
    },
    "es": {
        "title": "Derechos: {label}",
        "summary": (
            "Conoce tus derechos durante encuentros con la policía. Mantén la "
            "calma, sé respetuoso y recuerda que tienes protecciones "
            "constitucionales."
        ),
        "key_points": [
            "Tienes derecho a permanecer en silencio",
            "Puedes negarte a dar consentimiento para registros",
            "Puedes preguntar si estás detenido",
            "Tienes derecho a grabar la interacción",
        ],
        "shareable": (
            "Conoce tus derechos durante una {label_lower}. Mantente informado, "
            "mantente seguro. #ConoceTusDerechos #DerechosCiviles"
        ),
    },
}


def fallback_summary(
    interaction_type: str,
    duration_seconds: int,
    language: str = DEFAULT_LANGUAGE,
) -> str:
    """The fixed summary used whenever generation fails."""
    language = normalise_language(language)
    duration = format_duration_human(duration_seconds, language)
    label = interaction_label(interaction_type, language)
    if language == "es":
        return f"Interacción de {label} grabada durante {duration}"
    return f"{label} interaction recorded for {duration}"


def fallback_shareable(language: str = DEFAULT_LANGUAGE) -> str:
    """The fixed shareable text used whenever generation fails."""
    return _SHAREABLE_FALLBACK[normalise_language(language)]


def fallback_card(
    interaction_type: str,
    jurisdiction: str | None = None,
    language: str = DEFAULT_LANGUAGE,
) -> GeneratedCard:
    """The static card returned when the JSON card cannot be generated."""
    language = normalise_language(language)
    template = _CARD_FALLBACK[language]
    label = interaction_label(interaction_type, language)
    label = label[:1].upper() + label[1:]
    return GeneratedCard(
        title=template["title"].format(label=label),
        summary=template["summary"],
        key_points=list(template["key_points"]),
        shareable_text=clamp_shareable(
            template["shareable"].format(label_lower=label.lower())
        ),
        interaction_type=interaction_type,
        jurisdiction=jurisdiction,
        generated=False,
    )


# ---------------------------------------------------------------------------
# JSON extraction
# ---------------------------------------------------------------------------

_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)
_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


def extract_json_object(text: str) -> dict[str, Any]:
    """
    Parse the first JSON object in a model response.

    Handles markdown fences and prose around the object.

    Raises:
        ParseFailure if no JSON object can be decoded.
    """
    clean = _FENCE.sub("", text.strip()).strip()
    candidates = [clean]
    match = _OBJECT.search(clean)
    if match and match.group(0) != clean:
        candidates.append(match.group(0))
    for candidate in candidates:
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(data, dict):
            return data
    raise ParseFailure("Generated text did not contain a JSON object")


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------

class CardGenerator:
    """
    Summary and card generation with local fallbacks.

    Usage::

        generator = CardGenerator(ChatCompletionClient.from_settings(settings))
        summary = await generator.generate_summary("traffic_stop", 125)
    """

    def __init__(
        self,
        client: ChatCompletionClient | None,
        store: ContentStore | None = None,
    ) -> None:
        self.client = client
        self.store = store or get_store()

    @property
    def available(self) -> bool:
        """True when an API key is configured; checked before every call."""
        return self.client is not None and self.client.configured

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    async def generate_summary(
        self,
        interaction_type: str,
        duration_seconds: int,
        jurisdiction: str | None = None,
        language: str = DEFAULT_LANGUAGE,
        location: str | None = None,
    ) -> str:
        """Return an objective summary, or the fixed fallback sentence."""
        language = normalise_language(language)
        prompt = build_summary_prompt(
            interaction_type, duration_seconds, jurisdiction, location, language
        )
        max_tokens, temperature = _SUMMARY_PARAMS
        text = await self._complete(SUMMARY_SYSTEM, prompt, max_tokens, temperature, "summary")
        if text is None:
            return fallback_summary(interaction_type, duration_seconds, language)
        return text

    async def generate_shareable_card(
        self,
        interaction_type: str,
        summary: str,
        key_rights: list[str],
        language: str = DEFAULT_LANGUAGE,
        jurisdiction: str | None = None,
    ) -> str:
        """Return shareable text (≤280 chars), or the fixed awareness message."""
        language = normalise_language(language)
        prompt = build_shareable_prompt(
            interaction_type, summary, list(key_rights), jurisdiction, language
        )
        max_tokens, temperature = _SHAREABLE_PARAMS
        text = await self._complete(SHAREABLE_SYSTEM, prompt, max_tokens, temperature, "shareable")
        if text is None:
            return fallback_shareable(language)
        return clamp_shareable(text)

    async def generate_custom_card(
        self,
        interaction_type: str,
        jurisdiction: str,
        language: str = DEFAULT_LANGUAGE,
    ) -> CustomCard:
        """
        Ask for a headed free-text card and parse it.

        Empty sections are filled with generic defaults; no content, a
        request error or an unparseable response yields the catalog card.

        Raises:
            UnknownInteractionType, since that is an input error rather
            than a generation fault.
        """
        language = normalise_language(language)
        base = self.store.get_base_card(interaction_type, language)
        code = normalise_jurisdiction(jurisdiction)
        base = replace(base, card_id=f"{interaction_type}-{code}-ai", jurisdiction=code)

        def from_base() -> CustomCard:
            return CustomCard(
                card=base,
                sections={name: SectionSource.BASE for name in CARD_SECTIONS},
                origin=SectionSource.BASE,
            )

        prompt = build_custom_card_prompt(interaction_type, code, language)
        max_tokens, temperature = _CUSTOM_CARD_PARAMS
        text = await self._complete(CARD_SYSTEM, prompt, max_tokens, temperature, "custom card")
        if text is None:
            return from_base()

        try:
            items, sources = apply_defaults(parse_sections(text, language), language)
        except ParseFailure as exc:
            logger.warning("Custom card fallback to catalog: %s", exc)
            return from_base()

        card = replace(
            base,
            content=CardContent(
                dos=items["dos"],
                donts=items["donts"],
                key_rights=items["key_rights"],
                emergency_contacts=base.content.emergency_contacts,
                legal_resources=base.content.legal_resources,
            ),
            script=CardScript(
                phrases=items["phrases"],
                responses=items["responses"],
                emergency_phrases=base.script.emergency_phrases,
            ),
        )
        return CustomCard(card=card, sections=sources, origin=SectionSource.GENERATED)

    async def generate_card(
        self,
        interaction_type: str,
        jurisdiction: str | None = None,
        context: str | None = None,
        language: str = DEFAULT_LANGUAGE,
    ) -> GeneratedCard:
        """Return a JSON-derived shareable card, or the static fallback card."""
        language = normalise_language(language)
        prompt = build_card_prompt(interaction_type, jurisdiction, context, language)
        max_tokens, temperature = _CARD_PARAMS
        text = await self._complete(CARD_SYSTEM, prompt, max_tokens, temperature, "card")
        if text is None:
            return fallback_card(interaction_type, jurisdiction, language)

        try:
            data = extract_json_object(text)
            return self._card_from_json(data, interaction_type, jurisdiction, language)
        except ParseFailure as exc:
            logger.warning("Card JSON fallback: %s", exc)
            return fallback_card(interaction_type, jurisdiction, language)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    async def _complete(
        self,
        system: str,
        prompt: str,
        max_tokens: int,
        temperature: float,
        purpose: str,
    ) -> str | None:
        """Single attempt; None on any generation fault."""
        if not self.available:
            logger.info("AI unavailable, using %s fallback", purpose)
            return None
        try:
            return await self.client.complete(  # type: ignore[union-attr]
                system=system,
                user=prompt,
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except ServiceUnavailable as exc:
            logger.warning("AI %s generation failed: %s", purpose, exc)
            return None

    @staticmethod
    def _card_from_json(
        data: dict[str, Any],
        interaction_type: str,
        jurisdiction: str | None,
        language: str,
    ) -> GeneratedCard:
        fallback = fallback_card(interaction_type, jurisdiction, language)

        summary = data.get("summary")
        if not isinstance(summary, str) or not summary.strip():
            raise ParseFailure("Card JSON has no summary")

        raw_points = data.get("keyPoints", data.get("key_points"))
        key_points = [
            str(p).strip() for p in raw_points if str(p).strip()
        ] if isinstance(raw_points, list) else []

        title = data.get("title")
        shareable = data.get("shareableText", data.get("shareable_text"))

        return GeneratedCard(
            title=title.strip() if isinstance(title, str) and title.strip() else fallback.title,
            summary=summary.strip(),
            key_points=key_points or fallback.key_points,
            shareable_text=clamp_shareable(
                shareable if isinstance(shareable, str) and shareable.strip()
                else fallback.shareable_text
            ),
            interaction_type=interaction_type,
            jurisdiction=jurisdiction,
            generated=True,
        )
