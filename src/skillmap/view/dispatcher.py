"""
Input Dispatcher
================
Maps pointer positions to nodes and routes hover/click to the renderer and
the progression engine. Coordinates are surface-local; use ``to_surface``
to translate client coordinates first.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

import numpy as np

from skillmap.model.geometry import first_hit
from skillmap.model.graph import Node, SkillGraph
from skillmap.model.progression import ProgressionEngine

logger = logging.getLogger(__name__)


def to_surface(client_x: float, client_y: float, origin_x: float, origin_y: float) -> tuple[float, float]:
    """Translate client coordinates into the coordinate space of the surface."""
    return client_x - origin_x, client_y - origin_y


class InputDispatcher:
    def __init__(
        self,
        graph: SkillGraph,
        engine: ProgressionEngine,
        request_repaint: Callable[[], None],
    ) -> None:
        self.graph = graph
        self.engine = engine
        self.request_repaint = request_repaint
        self.hovered_id: Optional[str] = None

    def hit_test(self, x: float, y: float, only_available: bool = False) -> Optional[Node]:
        """First node (in node order) under the point."""
        candidates: List[Node] = [
            node for node in self.graph if node.is_available or not only_available
        ]
        if not candidates:
            return None
        centers = np.array([node.coords for node in candidates], dtype=np.float64)
        radii = np.array([node.radius for node in candidates], dtype=np.float64)
        index = first_hit(centers, radii, (x, y))
        return None if index is None else candidates[index]

    def hover(self, x: float, y: float) -> Optional[str]:
        node = self.hit_test(x, y)
        self.hovered_id = node.uid if node is not None else None
        self.request_repaint()
        return self.hovered_id

    def leave(self) -> None:
        if self.hovered_id is not None:
            self.hovered_id = None
            self.request_repaint()

    def click(self, x: float, y: float) -> Optional[str]:
        """
        Activate the available node under the point.

        Returns:
            The id of the newly active node, or None if nothing changed.
        """
        node = self.hit_test(x, y, only_available=True)
        if node is None or not self.engine.can_activate(node.uid):
            return None

        self.engine.activate(node.uid)
        self.request_repaint()
        return node.uid
