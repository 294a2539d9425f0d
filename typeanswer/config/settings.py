"""Global settings and configuration."""

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

# .env of the working directory (or a parent), never the installed package
load_dotenv(find_dotenv(usecwd=True))


@dataclass
class Config:
    """Application-wide configuration."""

    # Language used for warning messages
    LANGUAGE: str = os.environ.get("TYPEANSWER_LANGUAGE", "EN")

    # Preference store location (JSON), relative to the working directory
    SETTINGS_FILE: str = os.environ.get("TYPEANSWER_SETTINGS_FILE", "settings.json")

    LOG_LEVEL: str = os.environ.get("TYPEANSWER_LOG_LEVEL", "WARNING")
