"""Configuration module for typeanswer."""

from .settings import Config
from .strings import STRINGS, get_string
from .type_answer import TypeAnswerConfig
from .config_manager import SettingsManager

__all__ = [
    'Config',
    'STRINGS',
    'get_string',
    'TypeAnswerConfig',
    'SettingsManager',
]
