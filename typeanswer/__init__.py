"""typeanswer - "Type the answer" support for Anki-style flashcards"""

__version__ = "1.0.0"

from .cardviewer import AnswerRenderer, FieldResolver, TypeAnswer, content_for_cloze
from .config import Config, SettingsManager, TypeAnswerConfig
from .diff import BaseDiffEngine, DiffEngine
from .models import FieldDefinition, TypeAnswerState
from .sources import BaseCardSource, FieldLookupError, GenankiCard
from .utils import TextParser

__all__ = [
    'AnswerRenderer',
    'FieldResolver',
    'TypeAnswer',
    'content_for_cloze',
    'Config',
    'SettingsManager',
    'TypeAnswerConfig',
    'BaseDiffEngine',
    'DiffEngine',
    'FieldDefinition',
    'TypeAnswerState',
    'BaseCardSource',
    'FieldLookupError',
    'GenankiCard',
    'TextParser',
]
