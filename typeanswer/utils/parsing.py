"""Text parsing utilities for consistent text processing across the application."""

import unicodedata
from typing import Optional


class TextParser:
    """Centralized text normalization for typed and stored answers."""

    @classmethod
    def normalize_unicode(cls, text: str) -> str:
        """
        Normalize text to NFC form for consistent Unicode handling.

        Prevents issues with characters like é being represented as
        either a single codepoint (NFC) or base + combining accent (NFD).

        Args:
            text: Input text

        Returns:
            NFC-normalized text
        """
        if not text:
            return ""
        return unicodedata.normalize('NFC', str(text))

    @classmethod
    def clean_typed_answer(cls, answer: Optional[str]) -> str:
        """
        Clean up the typed answer so it can be compared with the correct answer.

        Args:
            answer: The answer text typed by the user, or None

        Returns:
            Empty string for None/empty input, otherwise the stripped,
            NFC-normalized text
        """
        if not answer:
            return ""
        return cls.normalize_unicode(answer.strip())
