"""
Translate App - A debounced text translator.

This package provides the non-visual core of a two-pane translator:
- Debounced, cancellable translation requests
- Language swapping between source and target
- An HTTP client for the free translate API
"""

__version__ = "0.1.0"

# Make key components available at package level
from translate_app.core import TranslationRequest, TranslationResult, language_display_name
from translate_app.coordinators import TranslationOrchestrator

__all__ = [
    "TranslationOrchestrator",
    "TranslationRequest",
    "TranslationResult",
    "language_display_name",
]
