"""Translation Orchestrator - Debounces input and manages the translate request workflow."""

from typing import Dict, Optional

from PySide6.QtCore import QObject, QThreadPool, QTimer, Signal, Slot

from translate_app.core import (
    DEFAULT_SOURCE_LANGUAGE,
    DEFAULT_TARGET_LANGUAGE,
    TranslationRequest,
    language_display_name,
)
from translate_app.services import TranslationService
from translate_app.services.api_workers import TranslationWorker


class _PendingTranslation(QObject):
    """Helper holding the ID of an in-flight translation and handling its results safely."""

    def __init__(self, request_id: int, parent: "TranslationOrchestrator"):
        super().__init__()
        self.request_id = request_id
        self.parent_ref = parent

    @Slot(object)
    def on_translation_result(self, result):
        """Handle translation result safely."""
        orchestrator = self.parent_ref
        if orchestrator:
            try:
                orchestrator._handle_translation_result(result, self.request_id)
            except RuntimeError:
                # Orchestrator might be destroyed, ignore
                pass

    @Slot(str)
    def on_translation_error(self, error: str):
        """Handle translation error safely."""
        orchestrator = self.parent_ref
        if orchestrator:
            try:
                orchestrator._handle_translation_error(error, self.request_id)
            except RuntimeError:
                pass

    @Slot()
    def on_finished(self):
        orchestrator = self.parent_ref
        if orchestrator:
            try:
                orchestrator._release_request(self.request_id)
            except RuntimeError:
                pass


class TranslationOrchestrator(QObject):
    """
    Turns rapid user edits into at most one translation call per quiet period.

    Responsibilities:
    - Hold source/target languages, the input text and the last translation.
    - Debounce input changes (300 ms) before calling the translation service.
    - Run service calls on the thread pool and apply results on the main thread.
    - Drop results of requests that were superseded or cancelled.
    - Notify the UI through Qt signals.

    All public methods must be called from the thread that owns this object.
    """

    DEBOUNCE_INTERVAL_MS = 300

    translation_changed = Signal(str)
    loading_state_changed = Signal(bool)
    error_received = Signal(str)
    source_language_changed = Signal(str)
    target_language_changed = Signal(str)

    def __init__(
        self,
        translation_service: TranslationService,
        thread_pool: Optional[QThreadPool] = None,
        source_language: str = DEFAULT_SOURCE_LANGUAGE,
        target_language: str = DEFAULT_TARGET_LANGUAGE,
    ):
        super().__init__()

        if translation_service is None:
            raise ValueError("TranslationService must not be None")
        if not source_language or not target_language:
            raise ValueError("Language codes must not be empty")

        self.translation_service = translation_service
        self.thread_pool = thread_pool if thread_pool is not None else QThreadPool.globalInstance()

        self._source_language = source_language
        self._target_language = target_language
        self._current_input_text = ""
        self._last_translated_text = ""
        self._is_loading = False

        # Only the request with the active ID may update state; anything
        # else finishing later is stale and gets dropped.
        self._active_request_id: Optional[int] = None
        self._request_counter = 0

        # Keep references to helper objects so they don't get garbage collected
        # while workers are running in background threads
        self._request_helpers: Dict[int, _PendingTranslation] = {}

        self._debounce_timer = QTimer(self)
        self._debounce_timer.setSingleShot(True)
        self._debounce_timer.setInterval(self.DEBOUNCE_INTERVAL_MS)
        self._debounce_timer.timeout.connect(self._on_debounce_timeout)

    # ------------------------------------------------------------------
    # State

    @property
    def source_language(self) -> str:
        return self._source_language

    @property
    def target_language(self) -> str:
        return self._target_language

    @property
    def current_input_text(self) -> str:
        return self._current_input_text

    @property
    def last_translated_text(self) -> str:
        return self._last_translated_text

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def source_language_name(self) -> str:
        return self.language_display_name(self._source_language)

    @property
    def target_language_name(self) -> str:
        return self.language_display_name(self._target_language)

    @staticmethod
    def language_display_name(code: str) -> str:
        """Human-readable name for a language code (uppercased code if unknown)."""
        return language_display_name(code)

    # ------------------------------------------------------------------
    # UI actions

    @Slot(str)
    def update_input_text(self, text: str) -> None:
        """Called when the user edits the source text field."""
        self._current_input_text = text
        self._translate()

    @Slot()
    def swap_languages(self) -> None:
        """
        Swap source and target languages along with their texts.

        The previous translation becomes the new input and is translated
        again; the previous input is shown as the translation meanwhile.
        """
        self._source_language, self._target_language = self._target_language, self._source_language
        self._current_input_text, self._last_translated_text = (
            self._last_translated_text,
            self._current_input_text,
        )

        self.source_language_changed.emit(self.source_language_name)
        self.target_language_changed.emit(self.target_language_name)

        self._translate()
        self.translation_changed.emit(self._last_translated_text)

    @Slot()
    def clear_text(self) -> None:
        """Clear input and translation, dropping any pending request."""
        self._current_input_text = ""
        self._last_translated_text = ""
        self._translate()

    @Slot(str)
    def set_source_language(self, code: str) -> None:
        """Select the source language and re-translate the current input."""
        if not code:
            raise ValueError("Language code must not be empty")
        self._source_language = code
        self.source_language_changed.emit(self.source_language_name)
        self._translate()

    @Slot(str)
    def set_target_language(self, code: str) -> None:
        """Select the target language and re-translate the current input."""
        if not code:
            raise ValueError("Language code must not be empty")
        self._target_language = code
        self.target_language_changed.emit(self.target_language_name)
        self._translate()

    @Slot()
    def cancel(self) -> None:
        """Drop the scheduled translation and any request still in flight."""
        self._invalidate_pending()

    # ------------------------------------------------------------------
    # Debounce and request workflow

    def _translate(self) -> None:
        """Restart the debounce cycle for the current input."""
        self._invalidate_pending()

        if not self._current_input_text:
            self.translation_changed.emit("")
            return

        # start() on an active timer restarts the interval
        self._debounce_timer.start()

    def _invalidate_pending(self) -> None:
        self._debounce_timer.stop()

        if self._active_request_id is not None:
            print(f"DEBUG: Invalidating in-flight translation request {self._active_request_id}")
            self._active_request_id = None

        if self._is_loading:
            self._set_loading(False)

    @Slot()
    def _on_debounce_timeout(self) -> None:
        """Send the current input to the translation service (runs in main thread)."""
        # Generate unique ID for this request to detect stale completions
        self._request_counter += 1
        request_id = self._request_counter
        self._active_request_id = request_id

        request = TranslationRequest(
            source_language=self._source_language,
            destination_language=self._target_language,
            text=self._current_input_text,
        )

        self._set_loading(True)

        worker = TranslationWorker(
            translation_service=self.translation_service,
            request=request,
        )

        # Use helper object to manage signal connections safely
        request_helper = _PendingTranslation(request_id, self)
        self._request_helpers[request_id] = request_helper

        worker.signals.translation_result.connect(request_helper.on_translation_result)
        worker.signals.error.connect(request_helper.on_translation_error)
        worker.signals.finished.connect(request_helper.on_finished)

        self.thread_pool.start(worker)

    def _handle_translation_result(self, result, request_id: int) -> None:
        """
        Handle translation result from worker thread (runs in main thread).

        Args:
            result: TranslationResult from the service
            request_id: ID of the request that produced this result
        """
        if request_id != self._active_request_id:
            print(f"DEBUG: Ignoring stale translation result (request {request_id}, current {self._active_request_id})")
            return

        self._active_request_id = None
        self._set_loading(False)

        self._last_translated_text = result.destination_text
        self.translation_changed.emit(result.destination_text)

    def _handle_translation_error(self, error: str, request_id: int) -> None:
        """
        Handle translation error from worker thread.

        Args:
            error: Error message
            request_id: ID of the request that produced this error
        """
        if request_id != self._active_request_id:
            print(f"DEBUG: Ignoring stale translation error (request {request_id}, current {self._active_request_id})")
            return

        self._active_request_id = None
        self._set_loading(False)

        self.error_received.emit(error or "Unknown error")

    def _release_request(self, request_id: int) -> None:
        self._request_helpers.pop(request_id, None)

    def _set_loading(self, is_loading: bool) -> None:
        self._is_loading = is_loading
        self.loading_state_changed.emit(is_loading)
