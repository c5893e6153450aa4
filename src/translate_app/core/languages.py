"""Language codes and their human-readable names."""

DEFAULT_SOURCE_LANGUAGE = "en"
DEFAULT_TARGET_LANGUAGE = "ru"

LANGUAGE_NAMES = {
    "en": "Английский",
    "ru": "Русский",
}


def language_display_name(code: str) -> str:
    """Return the display name for a language code, or the code uppercased if unknown."""
    return LANGUAGE_NAMES.get(code, code.upper())
