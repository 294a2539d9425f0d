"""Find the field a card's typed answer is compared against."""

from typing import Callable, Dict, Iterable, Optional

from ..config import get_string
from ..models import (
    AnswerWarning,
    ExpectedAnswer,
    FieldDefinition,
    NoAnswer,
    TypeAnswerState,
)
from ..utils.logger import setup_logger
from .cloze import content_for_cloze
from .patterns import CLOZE_PREFIX, TYPE_ANSWER_PATTERN

logger = setup_logger(__name__)

NoteFieldLookup = Callable[[str], Optional[str]]


class FieldResolver:
    """
    Resolve the ``[[type:...]]`` placeholder of a rendered question.

    The placeholder names either a field (``[[type:Back]]``) or a cloze
    field (``[[type:cloze:Text]]``), in which case only the deletions
    belonging to the current card count.
    """

    def __init__(self, language: Optional[str] = None, messages: Optional[Dict[str, str]] = None):
        """
        Args:
            language: Language of the warning messages (defaults to Config.LANGUAGE)
            messages: Explicit templates overriding the built-in strings,
                      keys ``empty_card_warning`` and ``unknown_type_field_warning``
        """
        self.language = language
        self.messages = messages or {}

    def _message(self, key: str, **kwargs: str) -> str:
        if key in self.messages:
            return self.messages[key].format(**kwargs)
        return get_string(key, self.language, **kwargs)

    def resolve(
        self,
        question: str,
        ordinal: int,
        note_field: NoteFieldLookup,
        field_definitions: Iterable[FieldDefinition],
    ) -> TypeAnswerState:
        """
        Extract the expected answer and its font/size for a card.

        Args:
            question: Rendered question-side markup
            ordinal: Zero-based card ordinal
            note_field: Returns the raw text of a note field by name
            field_definitions: Fields of the note type, in order

        Returns:
            A fresh state; ``input`` is always empty
        """
        state = TypeAnswerState()
        match = TYPE_ANSWER_PATTERN.search(question)
        if match is None:
            return state

        tag = match.group(1)
        cloze_index = 0
        if tag.startswith(CLOZE_PREFIX):
            cloze_index = ordinal + 1
            tag = tag.split(":", 1)[1]

        correct: Optional[str] = None
        for fld in field_definitions:
            if fld.name != tag:
                continue
            correct = self._lookup(note_field, fld.name)
            if correct is not None and cloze_index != 0:
                correct = content_for_cloze(correct, cloze_index)
            state.font = fld.font
            state.size = fld.size
            break

        if correct is None:
            if cloze_index != 0:
                state.resolution = AnswerWarning(self._message("empty_card_warning"))
            else:
                state.resolution = AnswerWarning(
                    self._message("unknown_type_field_warning", field=tag)
                )
            logger.debug("Type answer field %r not resolved: %s", tag, state.warning)
        elif correct == "":
            # Nothing to compare against; not worth a warning
            state.resolution = NoAnswer()
        else:
            state.resolution = ExpectedAnswer(correct)
        return state

    @staticmethod
    def _lookup(note_field: NoteFieldLookup, name: str) -> Optional[str]:
        try:
            return note_field(name)
        except KeyError as e:
            logger.debug("Field lookup for %r failed: %s", name, e)
            return None
