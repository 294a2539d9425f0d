"""
Card sources - abstract access to the card being reviewed.

The resolver only needs the rendered question, the card ordinal, the note
type's field descriptors and raw field text; any collection backend can
provide them.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models import FieldDefinition


class FieldLookupError(KeyError):
    """The note has no value for the requested field."""


class BaseCardSource(ABC):
    """Abstract base class for a displayed card and its note."""

    @abstractmethod
    def question(self) -> str:
        """Rendered question-side markup."""
        pass

    @abstractmethod
    def ordinal(self) -> int:
        """Zero-based card ordinal (cloze number minus one for cloze notes)."""
        pass

    @abstractmethod
    def field_definitions(self) -> List[FieldDefinition]:
        """Fields of the note type, in order."""
        pass

    @abstractmethod
    def field_value(self, name: str) -> str:
        """Raw text of field ``name``; raises FieldLookupError if absent."""
        pass
