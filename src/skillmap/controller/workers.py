"""
Background Workers (Threading)
==============================
QThread subclasses for work that must not block the GUI.

Classes:
    DocumentLoadWorker: Reads the skill map document once, off the UI thread.
"""
import logging

from PySide6.QtCore import QThread, Signal

from skillmap.model.io import DocumentError, load_items

logger = logging.getLogger(__name__)


class DocumentLoadWorker(QThread):
    # Emitted on the UI thread through Qt's queued connections
    loaded = Signal(object)  # list[RawItem]
    failed = Signal(str)

    def __init__(self, filepath: str) -> None:
        super().__init__()
        self.filepath = filepath

    def run(self) -> None:
        try:
            items = load_items(self.filepath)
        except DocumentError as e:
            logger.error(f"Error in DocumentLoadWorker: {e}")
            self.failed.emit(str(e))
            return
        self.loaded.emit(items)
