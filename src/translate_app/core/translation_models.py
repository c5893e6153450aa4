"""Domain entities for translation requests and results."""

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple


@dataclass(frozen=True)
class TranslationRequest:
    """Parameters of a single translation call.

    Attributes:
        source_language: Code of the source text language. None asks the
            backend to auto-detect it.
        destination_language: Code of the language to translate into.
        text: Text to translate.
    """

    source_language: Optional[str]
    destination_language: str
    text: str

    def to_query_params(self) -> List[Tuple[str, str]]:
        """Query items in wire order: sl (if known), dl, text."""
        params = []
        if self.source_language is not None:
            params.append(("sl", self.source_language))
        params.append(("dl", self.destination_language))
        params.append(("text", self.text))
        return params


@dataclass(frozen=True)
class TranslationResult:
    """A successfully translated text as returned by the backend."""

    source_language: str
    source_text: str
    destination_language: str
    destination_text: str

    WIRE_KEYS = {
        "source_language": "source-language",
        "source_text": "source-text",
        "destination_language": "destination-language",
        "destination_text": "destination-text",
    }

    @classmethod
    def from_json(cls, payload: Any) -> "TranslationResult":
        """
        Build a result from a decoded JSON body.

        Args:
            payload: Object decoded from the response body.

        Returns:
            TranslationResult with all four fields populated.

        Raises:
            ValueError: If the payload is not an object, or a key is missing
                or does not hold a string.
        """
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")

        values = {}
        for field_name, wire_key in cls.WIRE_KEYS.items():
            if wire_key not in payload:
                raise ValueError(f"Missing key '{wire_key}'")
            value = payload[wire_key]
            if not isinstance(value, str):
                raise ValueError(f"Key '{wire_key}' must be a string")
            values[field_name] = value

        return cls(**values)
