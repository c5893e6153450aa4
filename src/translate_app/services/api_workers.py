"""Async workers for non-blocking API calls using Qt threading."""

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from translate_app.core import TranslationRequest
from translate_app.services.translation import TranslationError, TranslationService


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(str)
    translation_result = Signal(object)  # TranslationResult


class TranslationWorker(QRunnable):
    """
    Worker that runs the translation API call in a background thread.

    Uses Qt's thread pool for efficient thread management.
    Emits signals when translation completes or fails.
    """

    def __init__(
        self,
        translation_service: TranslationService,
        request: TranslationRequest,
    ):
        super().__init__()
        self.translation_service = translation_service
        self.request = request
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation API call in background thread."""
        try:
            result = self.translation_service.translate(self.request)
            self.signals.translation_result.emit(result)
        except TranslationError as e:
            self.signals.error.emit(e.message)
        except Exception as e:
            # Catch any unexpected exceptions not handled by service
            self.signals.error.emit(f"Unexpected translation error: {str(e)}")
        finally:
            self.signals.finished.emit()
