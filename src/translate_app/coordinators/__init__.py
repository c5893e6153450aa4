"""Coordinators - Orchestration layer connecting UI with business logic."""

from .translation_orchestrator import TranslationOrchestrator

__all__ = [
    "TranslationOrchestrator",
]
