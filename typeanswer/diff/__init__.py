"""Answer diffing module."""

from .base import BaseDiffEngine
from .engine import DiffEngine

__all__ = ['BaseDiffEngine', 'DiffEngine']
