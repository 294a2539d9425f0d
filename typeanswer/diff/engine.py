"""Character-level diff of typed vs. correct answers."""

import html
from difflib import SequenceMatcher
from typing import List, Tuple

from .base import BaseDiffEngine


class DiffEngine(BaseDiffEngine):
    """
    Character diff rendered as ``<span class="typeGood|typeBad|typeMissed">``.

    In the correct text, characters the learner left out are ``typeMissed``;
    in the typed text, characters that don't belong are ``typeBad``.
    """

    GOOD_CLASS = "typeGood"
    BAD_CLASS = "typeBad"
    MISSING_CLASS = "typeMissed"

    def diffed_html_strings(self, correct: str, typed: str) -> Tuple[str, str]:
        pretty_correct: List[str] = []
        pretty_typed: List[str] = []

        # autojunk would treat frequent characters (spaces) as junk on long answers
        matcher = SequenceMatcher(None, correct, typed, autojunk=False)
        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == "equal":
                pretty_correct.append(self.wrap_good(correct[i1:i2]))
                pretty_typed.append(self.wrap_good(typed[j1:j2]))
                continue
            if i2 > i1:
                pretty_correct.append(self.wrap_missing(correct[i1:i2]))
            if j2 > j1:
                pretty_typed.append(self.wrap_bad(typed[j1:j2]))

        return "".join(pretty_correct), "".join(pretty_typed)

    def wrap_good(self, text: str) -> str:
        return self._wrap(text, self.GOOD_CLASS)

    def wrap_bad(self, text: str) -> str:
        return self._wrap(text, self.BAD_CLASS)

    def wrap_missing(self, text: str) -> str:
        return self._wrap(text, self.MISSING_CLASS)

    @staticmethod
    def _wrap(text: str, css_class: str) -> str:
        return f'<span class="{css_class}">{html.escape(text, quote=False)}</span>'
