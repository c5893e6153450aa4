"""Translation services - abstract interface, errors and HTTP implementation."""

from translate_app.services.translation.errors import (
    BadResponseError,
    BadURLError,
    DecodeError,
    InvalidDataError,
    TranslationError,
    TranslationErrorKind,
)
from translate_app.services.translation.translation_service import TranslationService
from translate_app.services.translation.ftapi_translation_service import FtapiTranslationService

__all__ = [
    "TranslationService",
    "FtapiTranslationService",
    "TranslationError",
    "TranslationErrorKind",
    "BadURLError",
    "BadResponseError",
    "InvalidDataError",
    "DecodeError",
]
