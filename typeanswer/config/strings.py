"""Localized message templates."""

from typing import Dict, Optional

from .settings import Config

STRINGS: Dict[str, Dict[str, str]] = {
    "EN": {
        "empty_card_warning": "The current card is empty",
        "unknown_type_field_warning": "Type answer: unknown field {field}",
    },
    "DE": {
        "empty_card_warning": "Die aktuelle Karte ist leer",
        "unknown_type_field_warning": "Antwort eintippen: unbekanntes Feld {field}",
    },
}


def get_string(key: str, language: Optional[str] = None, **kwargs: str) -> str:
    """
    Look up a message template and fill in its placeholders.

    Unknown languages fall back to English.

    Args:
        key: Message key, e.g. ``"empty_card_warning"``
        language: Language code (defaults to ``Config.LANGUAGE``)
        **kwargs: Values for the template's ``{name}`` placeholders

    Returns:
        The formatted message
    """
    table = STRINGS.get((language or Config.LANGUAGE).upper(), STRINGS["EN"])
    template = table.get(key, STRINGS["EN"][key])
    return template.format(**kwargs) if kwargs else template
