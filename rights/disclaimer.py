"""
disclaimer – canonical notice attached to every rights card response.

The text is short, jurisdiction-neutral, and available in each supported
language.
"""
from __future__ import annotations

from .models import DEFAULT_LANGUAGE

_DISCLAIMERS: dict[str, str] = {
    "en": (
        "NOT LEGAL ADVICE: "
        "RightsCard provides general information about your rights during "
        "police interactions. Laws vary by state and change over time. "
        "AI-generated summaries may contain errors. "
        "Consult a qualified attorney about your specific situation."
    ),
    "es": (
        "NO ES ASESORÍA LEGAL: "
        "RightsCard ofrece información general sobre tus derechos durante "
        "encuentros con la policía. Las leyes varían según el estado y "
        "cambian con el tiempo. Los resúmenes generados por IA pueden "
        "contener errores. Consulta a un abogado calificado sobre tu "
        "situación específica."
    ),
}


def get_disclaimer(language: str = DEFAULT_LANGUAGE) -> str:
    """Return the disclaimer for a language (English when unsupported)."""
    return _DISCLAIMERS.get(language, _DISCLAIMERS[DEFAULT_LANGUAGE])
