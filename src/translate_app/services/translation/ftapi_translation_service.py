"""FTAPI Translation Service - Implements translation via the free translate HTTP API."""

from datetime import datetime
from typing import Optional

import httpx

from translate_app.core import TranslationRequest, TranslationResult
from translate_app.services.settings_manager import SettingsManager
from translate_app.services.translation.errors import (
    BadResponseError,
    BadURLError,
    DecodeError,
    InvalidDataError,
)
from translate_app.services.translation.translation_service import TranslationService


class FtapiTranslationService(TranslationService):
    """
    Translation service backed by a GET /translate endpoint.

    The endpoint takes the query parameters sl (optional), dl and text and
    answers with a JSON object holding source-language, source-text,
    destination-language and destination-text.

    A single httpx.Client is kept for connection reuse. Call close() (or use
    the service as a context manager) when done with it.
    """

    DEFAULT_BASE_URL = SettingsManager.DEFAULT_BASE_URL
    DEFAULT_TIMEOUT = SettingsManager.DEFAULT_REQUEST_TIMEOUT
    ENDPOINT = "/translate"

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.Client] = None,
    ):
        """
        Initialize the service.

        Args:
            base_url: Scheme and host of the API, without the endpoint path.
            timeout: Request timeout in seconds.
            client: Preconfigured httpx client (tests pass one with a mock
                transport). Created lazily when omitted.
        """
        self.base_url = base_url
        self.timeout = timeout
        self._client = client

    @classmethod
    def from_settings(cls, settings: SettingsManager) -> "FtapiTranslationService":
        """Create a service configured from .env settings."""
        return cls(
            base_url=settings.get_base_url(),
            timeout=settings.get_request_timeout(),
        )

    def _get_client(self) -> httpx.Client:
        """Get or create the persistent HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=httpx.Timeout(self.timeout))
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "FtapiTranslationService":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def build_url(self) -> httpx.URL:
        """
        Build the endpoint URL from the base URL.

        Raises:
            BadURLError: If the base URL is malformed or not http(s).
        """
        try:
            url = httpx.URL(self.base_url.rstrip("/") + self.ENDPOINT)
        except httpx.InvalidURL as e:
            raise BadURLError() from e

        if url.scheme not in ("http", "https") or not url.host:
            raise BadURLError(f"Unsupported translation API URL: {self.base_url!r}")
        return url

    def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translate text with a single GET request.

        Args:
            request: Source/destination languages and the text to translate.

        Returns:
            TranslationResult decoded from the response body.

        Raises:
            BadURLError: The request URL could not be built.
            BadResponseError: Transport failure or non-2xx status.
            InvalidDataError: The response body is empty.
            DecodeError: The body could not be decompressed or is not the
                expected JSON object.
        """
        url = self.build_url()
        params = request.to_query_params()

        print(
            f"[TRANSLATION REQUEST] {request.source_language or 'auto'} -> "
            f"{request.destination_language}, {len(request.text)} chars "
            f"at {datetime.now().isoformat()}"
        )

        try:
            response = self._get_client().get(url, params=params)
        except httpx.InvalidURL as e:
            raise BadURLError() from e
        except httpx.TransportError as e:
            print(f"[TRANSLATION ERROR] {type(e).__name__}: {e}")
            raise BadResponseError() from e
        except httpx.DecodingError as e:
            print(f"[TRANSLATION ERROR] Could not decode response body: {e}")
            raise DecodeError() from e

        if not response.is_success:
            print(f"[TRANSLATION ERROR] HTTP {response.status_code}")
            raise BadResponseError(
                f"The translation server answered with HTTP {response.status_code}."
            )

        if not response.content:
            raise InvalidDataError()

        try:
            result = TranslationResult.from_json(response.json())
        except ValueError as e:
            print(f"[TRANSLATION ERROR] Could not decode response: {e}")
            raise DecodeError() from e

        print(f"[TRANSLATION SUCCESS] {len(result.destination_text)} chars received")
        return result
