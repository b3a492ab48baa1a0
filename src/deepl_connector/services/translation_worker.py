"""Async worker for non-blocking translation calls using Qt threading."""

import logging

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from deepl_connector.core.language import LanguageLike
from deepl_connector.services.translation import TranslationService

logger = logging.getLogger(__name__)


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
    Worker that runs a translation call in a background thread.

    Uses Qt's thread pool for efficient thread management.
    Emits signals when translation completes or fails.
    """

    def __init__(
        self,
        translation_service: TranslationService,
        source_lang: LanguageLike,
        target_lang: LanguageLike,
        text: str,
    ):
        super().__init__()
        self.translation_service = translation_service
        self.source_lang = source_lang
        self.target_lang = target_lang
        self.text = text
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation call in background thread."""
        try:
            result = self.translation_service.translate(
                source_lang=self.source_lang,
                target_lang=self.target_lang,
                text=self.text,
            )
            self.signals.translation_result.emit(result)
        except Exception as e:
            # Services report expected failures in the result; this is anything else
            logger.exception("Unexpected translation error")
            self.signals.error.emit(f"Unexpected translation error: {str(e)}")
        finally:
            self.signals.finished.emit()
