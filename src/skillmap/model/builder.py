"""
Graph Builder
=============
Turns the flat item list of the document into positioned nodes and edges.

Layout:
    Topics form a single row at ``TOPIC_ROW_Y``, evenly spread over the
    container width. Each subsection is stacked below the topic that lists
    it, ``SECTION_SPACING`` apart, in the order of the topic's sections.

Edges:
    1. Hierarchy: topic -> its first subsection only. Later subsections are
       reached through the sibling chain.
    2. Sibling: both directions between adjacent subsections of one topic.
    3. Related: node -> every id of its ``relatedTo`` list.

Availability is not computed here; see ``skillmap.model.progression``.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from skillmap.config import NODE_RADIUS, SECTION_SPACING, TOPIC_ROW_Y
from skillmap.model.graph import Edge, Node, SkillGraph
from skillmap.model.items import ItemType, RawItem

logger = logging.getLogger(__name__)


class UnresolvedParentError(ValueError):
    """A subsection is not listed in the sections of any topic."""


def find_parent_item(items: Sequence[RawItem], uid: str) -> Optional[RawItem]:
    """First topic (in input order) whose sections contain ``uid``."""
    for item in items:
        if item.type == ItemType.TOPIC and uid in item.sections:
            return item
    return None


class GraphBuilder:
    """
    Builds a SkillGraph for a drawing surface of the given width.
    """
    def __init__(
        self,
        container_width: float,
        row_y: float = TOPIC_ROW_Y,
        section_spacing: float = SECTION_SPACING,
        radius: float = NODE_RADIUS,
    ) -> None:
        self.container_width = float(container_width)
        self.row_y = row_y
        self.section_spacing = section_spacing
        self.radius = radius

    def build(self, items: Sequence[RawItem]) -> Tuple[SkillGraph, Optional[str]]:
        """
        Build nodes and edges.

        Args:
            items: The raw items, in document order.

        Returns:
            The graph and the id of the node flagged active in the document
            (the last flagged one wins), or None.

        Raises:
            UnresolvedParentError: If a subsection has no parent topic.
        """
        positions = self.layout(items)

        graph = SkillGraph()
        active_id: Optional[str] = None
        for item in items:
            relations = list(item.related_to)
            if item.type == ItemType.SUBSECTION:
                parent = find_parent_item(items, item.id)
                if parent is not None:
                    relations += [sid for sid in parent.sections if sid != item.id]

            graph.add_node(Node(
                uid=item.id,
                coords=positions[item.id],
                name=item.name,
                item_type=item.type,
                radius=self.radius,
                is_active=False,
                is_available=False,
                relations=relations,
                sections=item.sections if item.type == ItemType.TOPIC else [],
            ))
            if item.is_active:
                active_id = item.id

        if active_id is not None:
            graph.node(active_id).is_active = True

        for item in items:
            self._connect(graph, item)

        logger.info(
            f"Built skill map: {len(graph)} nodes, {len(graph.edges)} edges, "
            f"initial active node: {active_id}"
        )
        return graph, active_id

    def layout(self, items: Sequence[RawItem]) -> Dict[str, Tuple[float, float]]:
        """
        Compute the centre of every item.

        Raises:
            UnresolvedParentError: If a subsection has no parent topic.
        """
        topics = [item for item in items if item.type == ItemType.TOPIC]
        spacing = self.container_width / (len(topics) + 1)

        positions: Dict[str, Tuple[float, float]] = {}
        for k, topic in enumerate(topics, start=1):
            positions[topic.id] = (spacing * k, self.row_y)

        for item in items:
            if item.type != ItemType.SUBSECTION:
                continue
            parent = find_parent_item(items, item.id)
            if parent is None:
                raise UnresolvedParentError(
                    f"Subsection '{item.id}' is not listed in the sections of any topic."
                )
            px, py = positions[parent.id]
            index = parent.sections.index(item.id)
            positions[item.id] = (px, py + (index + 1) * self.section_spacing)

        return positions

    def _connect(self, graph: SkillGraph, item: RawItem) -> None:
        node = graph.node(item.id)
        sections = node.sections

        if sections:
            self._add_edge(graph, node.uid, sections[0])
            for prev_id, cur_id in zip(sections, sections[1:]):
                self._add_edge(graph, prev_id, cur_id)
                self._add_edge(graph, cur_id, prev_id)

        for target_id in item.related_to:
            self._add_edge(graph, node.uid, target_id)

    @staticmethod
    def _add_edge(graph: SkillGraph, start: str, end: str) -> None:
        if start not in graph or end not in graph:
            logger.debug(f"Skipping edge {start} -> {end}: endpoint not in the map.")
            return
        directed = start not in graph.node(end).relations
        graph.add_edge(Edge(start=start, end=end, directed=directed))


def build_graph(items: List[RawItem], container_width: float) -> Tuple[SkillGraph, Optional[str]]:
    """Shortcut for ``GraphBuilder(container_width).build(items)``."""
    return GraphBuilder(container_width).build(items)
