"""
Skill Map Canvas
================
QWidget that hosts the map: paints it in ``paintEvent`` and feeds mouse
events to the InputDispatcher.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from PySide6.QtCore import QPoint, Qt, Signal
from PySide6.QtGui import QMouseEvent, QPainter, QPaintEvent
from PySide6.QtWidgets import QWidget

from skillmap.model.builder import GraphBuilder, UnresolvedParentError
from skillmap.model.graph import SkillGraph
from skillmap.model.items import RawItem
from skillmap.model.progression import ProgressionEngine
from skillmap.view.dispatcher import InputDispatcher, to_surface
from skillmap.view.renderer import Renderer
from skillmap.view.surface import QPainterSurface

logger = logging.getLogger(__name__)


class SkillMapWidget(QWidget):
    node_activated = Signal(str)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setMouseTracking(True)

        self.renderer = Renderer()
        self.graph: Optional[SkillGraph] = None
        self.engine: Optional[ProgressionEngine] = None
        self.dispatcher: Optional[InputDispatcher] = None

        # Surface size is fixed when the map is mounted
        self._surface_size: tuple[int, int] = (0, 0)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def mount(self, items: List[RawItem]) -> bool:
        """
        Build the map from the loaded items and schedule the first paint.

        Returns:
            False if the items violate the document contract (nothing is shown).
        """
        self._surface_size = (max(1, self.width()), max(1, self.height()))
        try:
            graph, active_id = GraphBuilder(self._surface_size[0]).build(items)
        except UnresolvedParentError:
            logger.exception("Cannot build the skill map.")
            return False

        self.graph = graph
        self.engine = ProgressionEngine(graph, active_id)
        self.dispatcher = InputDispatcher(graph, self.engine, self.update)
        self.update()
        return True

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            # The map surface is fixed at mount; the rest of the widget is background
            painter.fillRect(self.rect(), Qt.GlobalColor.white)
            w, h = self._surface_size if self.graph is not None else (self.width(), self.height())
            surface = QPainterSurface(painter, w, h)
            if self.graph is None:
                surface.clear()
                return
            hovered = self.dispatcher.hovered_id if self.dispatcher else None
            self.renderer.render(surface, self.graph, hovered)
        finally:
            painter.end()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        if self.dispatcher is not None:
            self.dispatcher.hover(*self._local(event))
        super().mouseMoveEvent(event)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if self.dispatcher is not None and event.button() == Qt.MouseButton.LeftButton:
            activated = self.dispatcher.click(*self._local(event))
            if activated is not None:
                self.node_activated.emit(activated)
        super().mousePressEvent(event)

    def leaveEvent(self, event) -> None:
        if self.dispatcher is not None:
            self.dispatcher.leave()
        super().leaveEvent(event)

    def _local(self, event: QMouseEvent) -> tuple[float, float]:
        gp = event.globalPosition()
        origin = self.mapToGlobal(QPoint(0, 0))
        return to_surface(gp.x(), gp.y(), origin.x(), origin.y())
