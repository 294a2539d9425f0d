"""Render the typed-answer comparison on the answer side."""

from typing import Optional

from ..config import TypeAnswerConfig
from ..diff import BaseDiffEngine, DiffEngine
from .patterns import TYPE_ANSWER_PATTERN

CHECKMARK = '<span id="typecheckmark">✔</span>'  # Heavy check mark
ARROW = '<br><span id="typearrow">&darr;</span><br>'


class AnswerRenderer:
    """Replace ``[[type:...]]`` in the answer with the correct/diffed answer."""

    def __init__(self, config: TypeAnswerConfig, diff_engine: Optional[BaseDiffEngine] = None):
        self.config = config
        self.diff_engine = diff_engine or DiffEngine()

    def _open_tag(self) -> str:
        if self.config.suppress_code_formatting:
            return '<div><span id="typeans">'
        return '<div><code id="typeans">'

    def _close_tag(self) -> str:
        if self.config.suppress_code_formatting:
            return '</span></div>'
        return '</code></div>'

    def fragment(self, user_answer: str, correct_answer: str) -> str:
        """HTML shown in place of the placeholder."""
        parts = [self._open_tag()]
        if user_answer:
            if user_answer == correct_answer:
                parts.append(self.diff_engine.wrap_good(correct_answer))
                parts.append(CHECKMARK)
            else:
                # Only diff when the typed text actually differs
                diffed_correct, diffed_typed = self.diff_engine.diffed_html_strings(
                    correct_answer, user_answer
                )
                parts.extend([diffed_correct, ARROW, diffed_typed])
        elif not self.config.use_input_tag:
            parts.append(self.diff_engine.wrap_missing(correct_answer))
        else:
            parts.append(correct_answer)
        parts.append(self._close_tag())
        return "".join(parts)

    def render(self, answer: str, user_answer: str, correct_answer: str) -> str:
        """
        Fill the placeholders of the answer side.

        Args:
            answer: The answer-side markup
            user_answer: Text typed by the user, or empty
            correct_answer: The correct answer, taken from the note

        Returns:
            ``answer`` with every placeholder replaced by the same fragment
        """
        html = self.fragment(user_answer, correct_answer)
        # A callable replacement is inserted as-is: '$' and '\1' stay literal
        return TYPE_ANSWER_PATTERN.sub(lambda _: html, answer)
