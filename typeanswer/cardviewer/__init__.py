"""Card viewer: typed-answer resolution and rendering."""

from .cloze import content_for_cloze
from .patterns import TYPE_ANSWER_PATTERN
from .renderer import AnswerRenderer
from .resolver import FieldResolver
from .type_answer import TypeAnswer

__all__ = [
    'content_for_cloze',
    'TYPE_ANSWER_PATTERN',
    'AnswerRenderer',
    'FieldResolver',
    'TypeAnswer',
]
