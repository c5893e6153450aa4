"""Services layer - configuration and external integrations."""

from translate_app.services.settings_manager import SettingsManager

# Translation services
from translate_app.services.translation import (
	BadResponseError,
	BadURLError,
	DecodeError,
	FtapiTranslationService,
	InvalidDataError,
	TranslationError,
	TranslationErrorKind,
	TranslationService,
)

# Background workers
from translate_app.services.api_workers import TranslationWorker, WorkerSignals

__all__ = [
	"SettingsManager",
	"TranslationService",
	"FtapiTranslationService",
	"TranslationError",
	"TranslationErrorKind",
	"BadURLError",
	"BadResponseError",
	"InvalidDataError",
	"DecodeError",
	"TranslationWorker",
	"WorkerSignals",
]
