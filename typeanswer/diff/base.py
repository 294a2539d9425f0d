"""Base diff engine class."""

from abc import ABC, abstractmethod
from typing import Tuple


class BaseDiffEngine(ABC):
    """
    Abstract base class for typed-answer comparison.

    Implementations return HTML; every wrap method must escape its input.
    """

    @abstractmethod
    def diffed_html_strings(self, correct: str, typed: str) -> Tuple[str, str]:
        """
        Compare the correct answer with what the learner typed.

        Args:
            correct: The expected answer
            typed: The learner's answer

        Returns:
            (annotated correct text, annotated typed text)
        """
        pass

    @abstractmethod
    def wrap_good(self, text: str) -> str:
        """Mark text as matching."""
        pass

    @abstractmethod
    def wrap_bad(self, text: str) -> str:
        """Mark typed text that is not in the correct answer."""
        pass

    @abstractmethod
    def wrap_missing(self, text: str) -> str:
        """Mark correct text the learner did not type."""
        pass
