"""
backend.utils.formatting – duration and label formatting helpers.
"""
from __future__ import annotations

from rights.catalog import INTERACTION_LABELS, STATE_NAMES
from rights.models import DEFAULT_LANGUAGE, GENERAL_JURISDICTION, SHAREABLE_TEXT_LIMIT

_DURATION_WORDS: dict[str, tuple[str, str, str]] = {
    # (minutes, seconds, conjunction)
    "en": ("minutes", "seconds", "and"),
    "es": ("minutos", "segundos", "y"),
}


def format_duration(seconds: int) -> str:
    """Clock style: 125 → "2:05"."""
    seconds = max(0, int(seconds))
    return f"{seconds // 60}:{seconds % 60:02d}"


def format_duration_human(seconds: int, language: str = DEFAULT_LANGUAGE) -> str:
    """Spelled out: 125 → "2 minutes and 5 seconds"."""
    seconds = max(0, int(seconds))
    minutes_word, seconds_word, conj = _DURATION_WORDS.get(
        language, _DURATION_WORDS[DEFAULT_LANGUAGE]
    )
    return f"{seconds // 60} {minutes_word} {conj} {seconds % 60} {seconds_word}"


def interaction_label(interaction_type: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Human label for an interaction type; unknown types are de-underscored."""
    labels = INTERACTION_LABELS.get(language, INTERACTION_LABELS[DEFAULT_LANGUAGE])
    return labels.get(interaction_type, interaction_type.replace("_", " "))


def jurisdiction_name(jurisdiction: str | None) -> str | None:
    """Full state name for a code, None for General / blank."""
    if not jurisdiction or jurisdiction.lower() == GENERAL_JURISDICTION.lower():
        return None
    return STATE_NAMES.get(jurisdiction.upper(), jurisdiction)


def clamp_shareable(text: str, limit: int = SHAREABLE_TEXT_LIMIT) -> str:
    """Trim to ``limit`` characters, cutting on a word boundary with an ellipsis."""
    text = " ".join(text.split())
    if len(text) <= limit:
        return text
    cut = text[: limit - 1]
    if " " in cut:
        cut = cut.rsplit(" ", 1)[0]
    return cut.rstrip(",;:.") + "…"
