"""Resolved type-answer state for the card being reviewed."""

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class NoAnswer:
    """No placeholder on the card, or the compared field is empty."""


@dataclass(frozen=True)
class ExpectedAnswer:
    """The learner is expected to type ``correct``."""

    correct: str


@dataclass(frozen=True)
class AnswerWarning:
    """The placeholder could not be resolved; ``message`` is shown instead."""

    message: str


Resolution = Union[NoAnswer, ExpectedAnswer, AnswerWarning]


@dataclass
class TypeAnswerState:
    """
    State of the "type the answer" field for one displayed card.

    Recomputed each time a card is shown. ``correct`` and ``warning`` are
    derived from ``resolution``, so at most one of them is ever set.
    ``input`` holds what the learner typed so far and is only changed
    through ``set_input``.
    """

    resolution: Resolution = field(default_factory=NoAnswer)
    # Font face and size of the compared field
    font: str = ""
    size: int = 0
    _input: str = field(default="", repr=False)

    @property
    def correct(self) -> Optional[str]:
        """The expected answer, None if no answer is expected."""
        if isinstance(self.resolution, ExpectedAnswer):
            return self.resolution.correct
        return None

    @property
    def warning(self) -> Optional[str]:
        """Why the typed answer can't be displayed, if anything."""
        if isinstance(self.resolution, AnswerWarning):
            return self.resolution.message
        return None

    @property
    def input(self) -> str:
        return self._input

    def set_input(self, text: str) -> None:
        self._input = text or ""
