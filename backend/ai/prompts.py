"""
backend.ai.prompts – system instructions and prompt builders.

All prompts are plain f-strings; the language instruction is appended so
the model answers in the user's selected language.
"""
from __future__ import annotations

from backend.utils.formatting import (
    format_duration_human,
    interaction_label,
    jurisdiction_name,
)

SUMMARY_SYSTEM = (
    "You are a legal assistant helping to create objective summaries of "
    "police interactions for documentation purposes. Keep summaries "
    "factual, concise, and professional."
)

SHAREABLE_SYSTEM = (
    "Create shareable social media content about legal rights. Keep it "
    "concise, informative, and empowering. Stay under 280 characters."
)

CARD_SYSTEM = (
    "You are a legal rights educator creating accessible, accurate "
    "information about civil rights during police interactions. Always "
    "emphasize de-escalation and legal compliance while informing about "
    "constitutional rights."
)

_LANGUAGE_NAMES: dict[str, str] = {"en": "English", "es": "Spanish"}


def _language_line(language: str) -> str:
    return f"Respond in {_LANGUAGE_NAMES.get(language, 'English')}."


def build_summary_prompt(
    interaction_type: str,
    duration_seconds: int,
    jurisdiction: str | None = None,
    location: str | None = None,
    language: str = "en",
) -> str:
    state = jurisdiction_name(jurisdiction)
    lines = [
        "Generate a concise summary for a legal rights interaction recording "
        "with the following details:",
        f"- Interaction Type: {interaction_label(interaction_type)}",
        f"- Duration: {format_duration_human(duration_seconds)}",
    ]
    if state:
        lines.append(f"- State: {state}")
    lines.append(f"- Location: {location or 'Not specified'}")
    lines.append("")
    lines.append(
        "Create a brief, professional summary that could be shared with legal "
        "counsel or trusted contacts. Focus on the key facts and maintain "
        "objectivity."
    )
    lines.append(_language_line(language))
    return "\n".join(lines)


def build_shareable_prompt(
    interaction_type: str,
    summary: str,
    key_rights: list[str],
    jurisdiction: str | None = None,
    language: str = "en",
) -> str:
    state = jurisdiction_name(jurisdiction)
    where = f" in {state}" if state else ""
    return (
        f"Create a shareable card for a {interaction_label(interaction_type).lower()}{where}. "
        f"Summary: {summary}. "
        f"Key rights: {', '.join(key_rights)}. "
        "Make it educational and empowering, include one or two hashtags, and "
        "keep it under 280 characters. "
        f"{_language_line(language)}"
    )


def build_card_prompt(
    interaction_type: str,
    jurisdiction: str | None,
    context: str | None = None,
    language: str = "en",
) -> str:
    state = jurisdiction_name(jurisdiction) or "General (no specific state)"
    return (
        "Create a shareable legal rights card for the following scenario:\n"
        f"- Interaction Type: {interaction_label(interaction_type)}\n"
        f"- State: {state}\n"
        f"- Context: {context or 'General interaction'}\n\n"
        "Respond ONLY with a valid JSON object. No markdown, no explanation.\n"
        "{\n"
        '  "title": "brief, clear title",\n'
        '  "summary": "2-3 sentence summary of key rights",\n'
        '  "keyPoints": ["3-4 most important points"],\n'
        '  "shareableText": "social media friendly text under 280 characters"\n'
        "}\n\n"
        "Focus on practical, actionable information that empowers individuals "
        "during police interactions. "
        f"{_language_line(language)}"
    )


_CUSTOM_CARD_HEADERS: dict[str, tuple[str, str, str, str, str]] = {
    # (dos, donts, rights, phrases, responses)
    "en": ("Do's", "Don'ts", "Key Rights", "Phrases", "Responses"),
    "es": ("Qué hacer", "Qué no hacer", "Derechos", "Frases", "Respuestas"),
}


def build_custom_card_prompt(
    interaction_type: str,
    jurisdiction: str | None,
    language: str = "en",
) -> str:
    dos, donts, rights, phrases, responses = _CUSTOM_CARD_HEADERS.get(
        language, _CUSTOM_CARD_HEADERS["en"]
    )
    state = jurisdiction_name(jurisdiction) or "the United States in general"
    return (
        f"Write a know-your-rights card for a {interaction_label(interaction_type).lower()} "
        f"in {state}.\n"
        "Use exactly these section headers, each on its own line followed by "
        "a bulleted list of 3-6 short items:\n"
        f"{dos}:\n{donts}:\n{rights}:\n{phrases}:\n{responses}:\n\n"
        f"{phrases} are sentences the person can say to the officer; "
        f"{responses} are calm replies to common officer requests. "
        f"{_language_line(language)}"
    )
