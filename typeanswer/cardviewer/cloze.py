"""Correct answers for ``{{type:cloze:Field}}``."""

import re
from typing import List, Pattern

HINT_SEPARATOR = "::"


def cloze_pattern(index: int) -> Pattern[str]:
    """Pattern for the deletions of cloze ``index``, e.g. ``{{c2::text}}``."""
    return re.compile(r"\{\{c%d::(.+?)\}\}" % index)


def content_for_cloze(text: str, index: int) -> str:
    """
    Return the correct answer for cloze ``index`` of a field.

    Hints (``{{c1::Paris::capital}}``) are cut off.

    Args:
        text: The raw field text containing the clozes
        index: One-based cloze number

    Returns:
        The single answer if all deletions of that number agree, otherwise
        every deletion in order joined with ", " ("" when there are none).
    """
    matches: List[str] = []
    for match in cloze_pattern(index).finditer(text):
        matches.append(match.group(1).split(HINT_SEPARATOR, 1)[0])

    # Same as the desktop client: repeated identical deletions count once
    if len(set(matches)) == 1:
        return matches[0]
    return ", ".join(matches)
