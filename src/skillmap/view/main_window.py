"""
Main Application Window
=======================
Hosts the skill map canvas and starts the one-shot document load.
"""
import logging
from typing import List, Optional

from PySide6.QtWidgets import QMainWindow

from skillmap.application import VISIBLE_APP_NAME
from skillmap.controller.workers import DocumentLoadWorker
from skillmap.model.items import RawItem
from skillmap.view.map_widget import SkillMapWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, document_path: str) -> None:
        super().__init__()
        self.document_path = document_path
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1400, 900)

        self.map_widget = SkillMapWidget(self)
        self.setCentralWidget(self.map_widget)
        self.map_widget.node_activated.connect(self.on_node_activated)

        self._load_worker: Optional[DocumentLoadWorker] = None

    def start_loading(self) -> None:
        """Fetch the document once; no retry."""
        if self._load_worker is not None:
            return
        self._load_worker = DocumentLoadWorker(self.document_path)
        self._load_worker.loaded.connect(self.on_document_loaded)
        self._load_worker.failed.connect(self.on_document_failed)
        self._load_worker.start()

    # --- SLOTS ---
    def on_document_loaded(self, items: List[RawItem]) -> None:
        if self.map_widget.mount(items):
            self.statusBar().showMessage(f"{len(items)} items loaded", 5000)

    def on_document_failed(self, message: str) -> None:
        # Silent empty state
        logger.error(f"Skill map not loaded: {message}")

    def on_node_activated(self, uid: str) -> None:
        node = self.map_widget.graph.node(uid)
        self.statusBar().showMessage(f"Current: {node.name}")

    def closeEvent(self, event) -> None:
        if self._load_worker is not None:
            self._load_worker.wait()
        super().closeEvent(event)
