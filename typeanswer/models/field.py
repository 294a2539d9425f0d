"""Note field descriptors."""

from dataclasses import dataclass
from typing import Any, Dict

# genanki fills these in when a model is written to a collection
DEFAULT_FONT = "Liberation Sans"
DEFAULT_SIZE = 20


@dataclass(frozen=True)
class FieldDefinition:
    """Name and display font of one field of a note type."""

    name: str
    font: str = DEFAULT_FONT
    size: int = DEFAULT_SIZE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FieldDefinition":
        """Build from a genanki-style field dict (``{'name': ..., 'font': ..., 'size': ...}``)."""
        return cls(
            name=str(data["name"]),
            font=str(data.get("font", DEFAULT_FONT)),
            size=int(data.get("size", DEFAULT_SIZE)),
        )
