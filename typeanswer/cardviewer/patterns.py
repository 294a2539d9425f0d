"""Patterns shared by the question and answer side."""

import re

# 'type answer' placeholder in card markup after template rendering
TYPE_ANSWER_PATTERN = re.compile(r"\[\[type:(.+?)]]")

CLOZE_PREFIX = "cloze:"
