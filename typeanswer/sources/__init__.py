"""Card sources for the type-answer resolver."""

from .base import BaseCardSource, FieldLookupError
from .genanki_card import GenankiCard

__all__ = ['BaseCardSource', 'FieldLookupError', 'GenankiCard']
