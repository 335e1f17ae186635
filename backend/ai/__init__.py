"""backend.ai – chat-completion client, prompts and card generation."""
from .card_parser import apply_defaults, parse_sections
from .generator import CardGenerator, fallback_card, fallback_shareable, fallback_summary
from .llm_client import ChatCompletionClient

__all__ = [
    "CardGenerator",
    "ChatCompletionClient",
    "apply_defaults",
    "fallback_card",
    "fallback_shareable",
    "fallback_summary",
    "parse_sections",
]
