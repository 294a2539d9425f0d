"""Type-in-the-answer support for the card viewer."""

import html
from typing import Any, Optional

from ..config import TypeAnswerConfig
from ..diff import BaseDiffEngine
from ..models import TypeAnswerState
from ..sources import BaseCardSource
from ..utils.logger import setup_logger
from ..utils.parsing import TextParser
from .patterns import TYPE_ANSWER_PATTERN
from .renderer import AnswerRenderer
from .resolver import FieldResolver

logger = setup_logger(__name__)


class TypeAnswer:
    """
    Typed-answer state and rendering for the card under review.

    ``update_info`` is called when a card's question is shown,
    ``set_input`` whenever the learner types, and ``filter_answer``
    when the answer is revealed.
    """

    def __init__(
        self,
        config: Optional[TypeAnswerConfig] = None,
        resolver: Optional[FieldResolver] = None,
        diff_engine: Optional[BaseDiffEngine] = None,
    ):
        self.config = config or TypeAnswerConfig()
        self.resolver = resolver or FieldResolver()
        self.renderer = AnswerRenderer(self.config, diff_engine)
        self.state = TypeAnswerState()

    @classmethod
    def create_instance(cls, preferences: Any, **kwargs: Any) -> "TypeAnswer":
        """Build from a preference store (``SettingsManager`` or dict)."""
        return cls(TypeAnswerConfig.from_preferences(preferences), **kwargs)

    @property
    def use_input_tag(self) -> bool:
        return self.config.use_input_tag

    @property
    def auto_focus(self) -> bool:
        return self.config.auto_focus

    @property
    def correct(self) -> Optional[str]:
        return self.state.correct

    @property
    def warning(self) -> Optional[str]:
        return self.state.warning

    @property
    def input(self) -> str:
        return self.state.input

    @property
    def font(self) -> str:
        return self.state.font

    @property
    def size(self) -> int:
        return self.state.size

    def set_input(self, text: str) -> None:
        """Record the learner's latest full input."""
        self.state.set_input(text)

    def update_info(self, card: BaseCardSource) -> TypeAnswerState:
        """
        Extract type answer/cloze text and font/size for the next card.

        Args:
            card: The card about to be displayed

        Returns:
            The new state (also kept on ``self.state``)
        """
        self.state = self.resolver.resolve(
            card.question(),
            card.ordinal(),
            card.field_value,
            card.field_definitions(),
        )
        logger.debug("Type answer state: %r", self.state)
        return self.state

    def type_answer_filter(self, answer: str, user_answer: str, correct_answer: str) -> str:
        """
        Fill the placeholder for the type comparison.

        Args:
            answer: The answer text
            user_answer: Text typed by the user, or empty
            correct_answer: The correct answer, taken from the note

        Returns:
            The formatted answer text
        """
        return self.renderer.render(answer, user_answer, correct_answer)

    def filter_answer(self, answer: str) -> str:
        """Render the answer side using the current state and input."""
        if self.state.correct is None:
            return TYPE_ANSWER_PATTERN.sub("", answer)
        user_answer = TextParser.clean_typed_answer(self.state.input)
        return self.type_answer_filter(answer, user_answer, self.state.correct)

    def filter_question(self, question: str) -> str:
        """
        Render the placeholder on the question side.

        A warning replaces the first placeholder. Otherwise every placeholder
        becomes an input box (``use_input_tag``) or a typing prompt; with
        no expected answer they are removed.
        """
        if self.state.warning is not None:
            warning = html.escape(self.state.warning, quote=False)
            return TYPE_ANSWER_PATTERN.sub(lambda _: warning, question, count=1)
        if self.state.correct is None:
            return TYPE_ANSWER_PATTERN.sub("", question)

        if self.config.use_input_tag:
            attrs = ['type="text"', 'name="typed"', 'id="typeans"', 'autocomplete="off"']
            # Font is unknown for previews
            if self.state.font and self.state.size > 0:
                attrs.append(
                    'style="font-family: \'%s\'; font-size: %dpx;"'
                    % (html.escape(self.state.font), self.state.size)
                )
            if self.config.auto_focus:
                attrs.append("autofocus")
            prompt = "<center>\n<input %s>\n</center>\n" % " ".join(attrs)
        else:
            prompt = '<span id="typeans" class="typePrompt">........</span>'
        return TYPE_ANSWER_PATTERN.sub(lambda _: prompt, question)
