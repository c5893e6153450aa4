"""Domain layer - Translation value objects and language table."""

from .languages import (
    DEFAULT_SOURCE_LANGUAGE,
    DEFAULT_TARGET_LANGUAGE,
    LANGUAGE_NAMES,
    language_display_name,
)
from .translation_models import TranslationRequest, TranslationResult

__all__ = [
    "TranslationRequest",
    "TranslationResult",
    "LANGUAGE_NAMES",
    "DEFAULT_SOURCE_LANGUAGE",
    "DEFAULT_TARGET_LANGUAGE",
    "language_display_name",
]
