"""Translation Service - Abstract interface for translation backends."""

from abc import ABC, abstractmethod

from translate_app.core import TranslationRequest, TranslationResult


class TranslationService(ABC):
    """
    Abstract service for translating text between two languages.

    Implementations (e.g., FtapiTranslationService) handle network calls.
    Calls are blocking and are run off the UI thread by TranslationWorker.
    """

    @abstractmethod
    def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translate text according to the request.

        Args:
            request: Source/destination languages and the text to translate.

        Returns:
            TranslationResult with the translated text.

        Raises:
            TranslationError: One of BadURLError, BadResponseError,
                InvalidDataError or DecodeError.
        """
        pass
