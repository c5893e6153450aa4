"""
Translation service exceptions.

Every failure of a translation backend is reported as one of the
TranslationError subclasses below, each tagged with a TranslationErrorKind.
"""

from enum import Enum
from typing import Optional


class TranslationErrorKind(Enum):
    """Categories of translation failures."""

    BAD_URL = "bad_url"
    BAD_RESPONSE = "bad_response"
    INVALID_DATA = "invalid_data"
    DECODE_ERROR = "decode_error"


DEFAULT_MESSAGES = {
    TranslationErrorKind.BAD_URL: "Could not build the translation request URL.",
    TranslationErrorKind.BAD_RESPONSE: "The translation server could not be reached. Please check your connection.",
    TranslationErrorKind.INVALID_DATA: "The translation server returned no data.",
    TranslationErrorKind.DECODE_ERROR: "The translation server returned an unexpected response.",
}


class TranslationError(Exception):
    """Base class for translation failures."""

    kind: TranslationErrorKind

    def __init__(self, message: Optional[str] = None):
        self.message = message or DEFAULT_MESSAGES[self.kind]
        super().__init__(self.message)


class BadURLError(TranslationError):
    """Raised when the request URL could not be constructed."""

    kind = TranslationErrorKind.BAD_URL


class BadResponseError(TranslationError):
    """Raised on transport-level failures (connection, timeout, HTTP status)."""

    kind = TranslationErrorKind.BAD_RESPONSE


class InvalidDataError(TranslationError):
    """Raised when the response body is empty."""

    kind = TranslationErrorKind.INVALID_DATA


class DecodeError(TranslationError):
    """Raised when the response body does not match the expected result shape."""

    kind = TranslationErrorKind.DECODE_ERROR
