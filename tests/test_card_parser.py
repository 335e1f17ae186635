"""
tests/test_card_parser.py
Header matching, bullet collection and per-section source tagging.
"""
import pytest

from backend.ai.card_parser import SECTION_DEFAULTS, apply_defaults, match_header, parse_sections
from rights.errors import ParseFailure
from rights.models import SectionSource

FULL_CARD = """
Here is your card.

**Do's:**
- Stay calm
- Keep your hands visible

Don'ts:
* Don't argue
* Don't consent to searches

Key Rights:
1. Right to remain silent
2) Right to refuse searches

Phrases:
- "I do not consent to searches."

Responses:
• I'd like to speak to a lawyer
"""

SPANISH_CARD = """
Qué hacer:
- Mantén la calma
Qué no hacer:
- No corras
Derechos:
- Derecho a guardar silencio
"""


class TestMatchHeader:

    @pytest.mark.parametrize("line,expected", [
        ("Do's:", "dos"),
        ("**DON'TS**", "donts"),
        ("Don’ts:", "donts"),
        ("Key Rights:", "key_rights"),
        ("### Phrases to use", "phrases"),
        ("Responses:", "responses"),
        ("What Not To Do:", "donts"),
        ("Never:", "donts"),
        ("What To Do:", "dos"),
    ])
    def test_english_headers(self, line, expected):
        assert match_header(line, "en") == expected

    @pytest.mark.parametrize("line,expected", [
        ("Qué hacer:", "dos"),
        ("Qué no hacer:", "donts"),
        ("Derechos clave:", "key_rights"),
        ("Frases útiles:", "phrases"),
        ("Respuestas:", "responses"),
    ])
    def test_spanish_headers(self, line, expected):
        assert match_header(line, "es") == expected

    def test_long_line_is_not_a_header(self):
        assert match_header("You have the right to remain silent at all times", "en") is None

    def test_unrelated_line_is_not_a_header(self):
        assert match_header("Here is your card.", "en") is None


class TestParseSections:

    def test_collects_all_sections(self):
        sections = parse_sections(FULL_CARD, "en")
        assert sections["dos"] == ["Stay calm", "Keep your hands visible"]
        assert sections["donts"] == ["Don't argue", "Don't consent to searches"]
        assert sections["key_rights"] == ["Right to remain silent", "Right to refuse searches"]
        assert sections["phrases"] == ["I do not consent to searches."]
        assert sections["responses"] == ["I'd like to speak to a lawyer"]

    def test_bullets_before_any_header_are_ignored(self):
        sections = parse_sections("- stray item\nDo's:\n- Stay calm", "en")
        assert sections["dos"] == ["Stay calm"]
        assert all(not items for name, items in sections.items() if name != "dos")

    def test_numbered_header(self):
        sections = parse_sections("1. Do's:\n- Stay calm\n2. Don'ts:\n- Don't run", "en")
        assert sections["dos"] == ["Stay calm"]
        assert sections["donts"] == ["Don't run"]

    def test_what_not_to_do_goes_to_donts(self):
        sections = parse_sections("What To Do:\n- Stay calm\nWhat Not To Do:\n- Run away", "en")
        assert sections["dos"] == ["Stay calm"]
        assert sections["donts"] == ["Run away"]

    def test_bulleted_keyword_header(self):
        sections = parse_sections("- **Do's:**\n- Stay calm\n- Key Rights:\n- Remain silent", "en")
        assert sections["dos"] == ["Stay calm"]
        assert sections["key_rights"] == ["Remain silent"]

    def test_bullet_ending_in_colon_stays_an_item(self):
        text = "Do's:\n- You have the right to:\n- Stay calm\nDon'ts:\n- Don't run"
        sections = parse_sections(text, "en")
        assert sections["dos"] == ["You have the right to:", "Stay calm"]
        assert sections["key_rights"] == []
        assert sections["donts"] == ["Don't run"]

    def test_spanish_card(self):
        sections = parse_sections(SPANISH_CARD, "es")
        assert sections["dos"] == ["Mantén la calma"]
        assert sections["donts"] == ["No corras"]
        assert sections["key_rights"] == ["Derecho a guardar silencio"]
        assert sections["phrases"] == []


class TestApplyDefaults:

    def test_tags_generated_and_defaulted(self):
        items, sources = apply_defaults(parse_sections(SPANISH_CARD, "es"), "es")
        assert sources["dos"] is SectionSource.GENERATED
        assert sources["phrases"] is SectionSource.DEFAULTED
        assert items["phrases"] == tuple(SECTION_DEFAULTS["es"]["phrases"])
        assert items["dos"] == ("Mantén la calma",)

    def test_full_card_is_all_generated(self):
        _, sources = apply_defaults(parse_sections(FULL_CARD, "en"), "en")
        assert set(sources.values()) == {SectionSource.GENERATED}

    def test_nothing_parsed_raises(self):
        with pytest.raises(ParseFailure):
            apply_defaults(parse_sections("Sorry, I can't help with that.", "en"), "en")
