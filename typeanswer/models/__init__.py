"""Data models for typeanswer."""

from .field import FieldDefinition
from .state import (
    AnswerWarning,
    ExpectedAnswer,
    NoAnswer,
    Resolution,
    TypeAnswerState,
)

__all__ = [
    'FieldDefinition',
    'AnswerWarning',
    'ExpectedAnswer',
    'NoAnswer',
    'Resolution',
    'TypeAnswerState',
]
