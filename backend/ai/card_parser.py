"""
backend.ai.card_parser – best-effort parser for free-text rights cards.

The model is asked for five headed sections with bulleted items.  The
parser walks the text line by line:

    header line   → switches the current section (language-specific keywords)
    bullet line   → appended to the current section
    anything else → ignored

Each section of the result is tagged GENERATED when the model supplied at
least one item, or DEFAULTED when a generic default list was substituted.
A text in which no section yields any item raises ParseFailure.
"""
from __future__ import annotations

import logging
import re

from rights.errors import ParseFailure
from rights.models import CARD_SECTIONS, DEFAULT_LANGUAGE, SectionSource

logger = logging.getLogger(__name__)

# Checked in order: "don't" must win over "do", "no hacer" over "hacer".
_HEADER_KEYWORDS: dict[str, list[tuple[str, tuple[str, ...]]]] = {
    "en": [
        ("donts",      ("don'ts", "donts", "don't", "dont", "do not",
                        "what not to do", "not to do", "never", "avoid")),
        ("dos",        ("do's", "dos", "do", "what to do")),
        ("key_rights", ("rights", "right")),
        ("phrases",    ("phrases", "phrase", "what to say", "script")),
        ("responses",  ("responses", "response", "replies")),
    ],
    "es": [
        ("donts",      ("qué no hacer", "que no hacer", "no hacer", "no debes")),
        ("dos",        ("qué hacer", "que hacer", "hacer", "debes")),
        ("key_rights", ("derechos", "derecho")),
        ("phrases",    ("frases", "frase", "qué decir", "que decir")),
        ("responses",  ("respuestas", "respuesta")),
    ],
}

SECTION_DEFAULTS: dict[str, dict[str, list[str]]] = {
    "en": {
        "dos":        ["Remain calm and polite", "Keep your hands visible"],
        "donts":      ["Don't resist or argue", "Don't consent to searches"],
        "key_rights": ["Right to remain silent", "Right to an attorney"],
        "phrases":    ["I am exercising my right to remain silent",
                       "I do not consent to any searches"],
        "responses":  ["I understand", "I prefer to remain silent"],
    },
    "es": {
        "dos":        ["Mantén la calma y sé cortés", "Mantén las manos visibles"],
        "donts":      ["No te resistas ni discutas", "No consientas a registros"],
        "key_rights": ["Derecho a permanecer en silencio", "Derecho a un abogado"],
        "phrases":    ["Estoy ejerciendo mi derecho a permanecer en silencio",
                       "No consiento a ningún registro"],
        "responses":  ["Entiendo", "Prefiero permanecer en silencio"],
    },
}

_BULLET = re.compile(r"^\s*(?P<marker>[-*•–]|\d+[.)])\s+(?P<item>.+?)\s*$")
_MARKUP = re.compile(r"[#*_`]+")
_MAX_HEADER_WORDS = 6

# Words allowed around the keyword in a bulleted header ("- Key Rights:").
_FILLER_WORDS = frozenset({
    "key", "your", "the", "useful", "important", "basic",
    "clave", "tus", "útiles", "importantes", "básicos",
})


def _normalise(text: str) -> str:
    text = text.replace("’", "'").replace("‘", "'")
    text = _MARKUP.sub("", text)
    return text.strip().rstrip(":").strip().lower()


def _clean_item(text: str) -> str:
    return _MARKUP.sub("", text).strip().strip('"').strip()


def match_header(line: str, language: str = DEFAULT_LANGUAGE) -> str | None:
    """
    Return the section name a header line introduces, or None.

    A header is short (at most six words) and contains one of the
    language's section keywords as a whole word.
    """
    norm = _normalise(line)
    if not norm or len(norm.split()) > _MAX_HEADER_WORDS:
        return None
    for section, keywords in _HEADER_KEYWORDS.get(language, _HEADER_KEYWORDS[DEFAULT_LANGUAGE]):
        for keyword in keywords:
            if re.search(rf"(?<![\w']){re.escape(keyword)}(?![\w'])", norm):
                return section
    return None


def _match_bullet_header(item: str, numbered: bool, language: str) -> str | None:
    # "1. Do's:" may use any header wording; "- Do's:" must be keywords only,
    # so that an item like "- You have the right to:" stays an item.
    header = match_header(item, language)
    if header is None or numbered:
        return header
    words = [w for w in _normalise(item).split() if w not in _FILLER_WORDS]
    table = dict(_HEADER_KEYWORDS.get(language, _HEADER_KEYWORDS[DEFAULT_LANGUAGE]))
    return header if " ".join(words) in table[header] else None


def parse_sections(text: str, language: str = DEFAULT_LANGUAGE) -> dict[str, list[str]]:
    """
    Collect bulleted items under recognised headers.

    Returns every section name in CARD_SECTIONS, possibly with an empty
    list.  Bullets before the first header are ignored.
    """
    sections: dict[str, list[str]] = {name: [] for name in CARD_SECTIONS}
    current: str | None = None

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        bullet = _BULLET.match(line)
        if bullet:
            item = bullet.group("item")
            # Headers such as "1. Do's:" or "- **Don'ts:**" look like bullets.
            if item.rstrip("*_ ").endswith(":"):
                numbered = bullet.group("marker")[0].isdigit()
                header = _match_bullet_header(item, numbered, language)
                if header:
                    current = header
                    continue
            if current is not None:
                cleaned = _clean_item(item)
                if cleaned:
                    sections[current].append(cleaned)
            continue

        header = match_header(line, language)
        if header:
            current = header

    return sections


def apply_defaults(
    parsed: dict[str, list[str]],
    language: str = DEFAULT_LANGUAGE,
) -> tuple[dict[str, tuple[str, ...]], dict[str, SectionSource]]:
    """
    Substitute generic defaults for empty sections and tag every section.

    Raises:
        ParseFailure when no section carries any item.
    """
    if not any(parsed.get(name) for name in CARD_SECTIONS):
        raise ParseFailure("No card sections found in generated text")

    defaults = SECTION_DEFAULTS.get(language, SECTION_DEFAULTS[DEFAULT_LANGUAGE])
    items: dict[str, tuple[str, ...]] = {}
    sources: dict[str, SectionSource] = {}
    for name in CARD_SECTIONS:
        values = parsed.get(name) or []
        if values:
            items[name] = tuple(values)
            sources[name] = SectionSource.GENERATED
        else:
            logger.debug("Section %s empty, using defaults", name)
            items[name] = tuple(defaults[name])
            sources[name] = SectionSource.DEFAULTED
    return items, sources
