"""Card source backed by genanki notes and models."""

import re
from typing import List, Optional

import genanki

from ..models import FieldDefinition
from .base import BaseCardSource, FieldLookupError

# {{type:Field}} / {{type:cloze:Field}} in a card template
TYPE_TAG_PATTERN = re.compile(r"\{\{type:(.+?)\}\}")


class GenankiCard(BaseCardSource):
    """
    One card of a ``genanki.Note``.

    If no rendered question is given, the question is taken from the
    card template's ``qfmt`` with its ``{{type:...}}`` tags turned into
    ``[[type:...]]`` placeholders; other template tags are left untouched.
    """

    def __init__(self, note: genanki.Note, ord: int = 0, question: Optional[str] = None):
        """
        Args:
            note: The note; ``note.model`` must be set
            ord: Zero-based card ordinal
            question: Already rendered question markup, if available
        """
        if note.model is None:
            raise ValueError("note has no model")
        self.note = note
        self.ord = ord
        self._question = question

    @property
    def model(self) -> genanki.Model:
        return self.note.model

    def _template(self) -> dict:
        templates = self.model.templates or []
        if not templates:
            return {}
        # Cloze note types have a single template shared by all ordinals
        if self.model.model_type == genanki.Model.CLOZE:
            return templates[0]
        return templates[self.ord] if self.ord < len(templates) else {}

    def question(self) -> str:
        if self._question is None:
            qfmt = self._template().get("qfmt", "")
            self._question = TYPE_TAG_PATTERN.sub(r"[[type:\1]]", qfmt)
        return self._question

    def ordinal(self) -> int:
        return self.ord

    def field_definitions(self) -> List[FieldDefinition]:
        return [FieldDefinition.from_dict(fld) for fld in (self.model.fields or [])]

    def field_value(self, name: str) -> str:
        names = [fld.get("name") for fld in (self.model.fields or [])]
        values = self.note.fields or []
        try:
            return values[names.index(name)]
        except (ValueError, IndexError):
            raise FieldLookupError(name)
