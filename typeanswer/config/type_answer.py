"""Immutable configuration for the type-answer renderer."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TypeAnswerConfig:
    """Rendering switches, built once per review session."""

    # Render an <input> on the question side, skip the "missing" decoration
    use_input_tag: bool = False
    # Wrap the comparison in <span> instead of <code>
    suppress_code_formatting: bool = False
    # Focus the input when the card is shown (UI only)
    auto_focus: bool = False

    @classmethod
    def from_preferences(cls, preferences: Any) -> "TypeAnswerConfig":
        """
        Build a config from a preference store.

        Args:
            preferences: Anything with a ``get(key, default)`` method,
                         e.g. ``SettingsManager`` or a plain dict

        Returns:
            TypeAnswerConfig with missing keys defaulting to False
        """
        return cls(
            use_input_tag=bool(preferences.get("useInputTag", False)),
            suppress_code_formatting=bool(preferences.get("noCodeFormatting", False)),
            auto_focus=bool(preferences.get("autoFocusTypeInAnswer", False)),
        )
