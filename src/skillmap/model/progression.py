"""
Progression Engine
==================
Owns the single active node of the skill map and the availability rules.

Rules, for the active node A:
    - A itself and every id in A.relations are available.
    - A topic additionally unlocks its first subsection.
    - A subsection additionally unlocks its parent topic and its next
      sibling (if it is not the last one).

Every change recomputes availability for the whole map. The rules live in
the pure functions ``available_ids`` and ``transition``; the engine applies
their result onto the graph's nodes in place.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Set

from skillmap.model.graph import Node, SkillGraph, find_parent

logger = logging.getLogger(__name__)


class ProgressionError(ValueError):
    """A node was activated that cannot be activated."""


def available_ids(nodes: Mapping[str, Node], active_id: Optional[str]) -> Set[str]:
    """
    Ids reachable from the active node.

    Args:
        nodes: The id -> Node mapping of the map.
        active_id: The active node, or None.

    Returns:
        The set of available ids (empty when there is no active node).
    """
    if active_id is None:
        return set()

    active = nodes[active_id]
    ids = set(active.relations)
    ids.add(active.uid)

    if active.is_topic and active.sections:
        ids.add(active.sections[0])

    if active.is_subsection:
        parent = find_parent(nodes, active.uid)
        if parent is not None:
            ids.add(parent.uid)
            index = parent.sections.index(active.uid)
            if index < len(parent.sections) - 1:
                ids.add(parent.sections[index + 1])

    return ids


def _apply(nodes: Mapping[str, Node], active_id: str) -> None:
    ids = available_ids(nodes, active_id)
    for node in nodes.values():
        node.is_available = node.uid in ids
        node.is_active = node.uid == active_id


def transition(nodes: Mapping[str, Node], active_id: Optional[str], new_active_id: str) -> Dict[str, Node]:
    """
    Move the progression from ``active_id`` to ``new_active_id``.

    The input is left untouched; the returned mapping holds copies of the
    nodes with the new active/available flags.
    """
    updated = {uid: node.copy() for uid, node in nodes.items()}

    if active_id is not None and active_id in updated:
        # A node that was just left can always be returned to
        previous = updated[active_id]
        previous.is_active = False
        previous.is_available = True

    updated[new_active_id].is_active = True
    _apply(updated, new_active_id)
    return updated


class ProgressionEngine:
    """
    Holds the active node pointer of a SkillGraph.
    """
    def __init__(self, graph: SkillGraph, active_id: Optional[str] = None) -> None:
        self.graph = graph
        self.active_id: Optional[str] = active_id
        self.recompute()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(active={self.active_id!r})"

    @property
    def active_node(self) -> Optional[Node]:
        if self.active_id is None:
            return None
        return self.graph.node(self.active_id)

    def available_nodes(self) -> List[Node]:
        return [node for node in self.graph if node.is_available]

    def can_activate(self, uid: str) -> bool:
        return uid in self.graph and uid != self.active_id and self.graph.node(uid).is_available

    def recompute(self) -> None:
        """Recompute availability for every node. No-op without an active node."""
        if self.active_id is None:
            return
        _apply(self.graph.nodes, self.active_id)

    def activate(self, uid: str) -> None:
        """
        Make ``uid`` the active node.

        Raises:
            ProgressionError: If the node is unknown, not available or already active.
        """
        if uid not in self.graph:
            raise ProgressionError(f"Unknown node '{uid}'.")
        if uid == self.active_id:
            raise ProgressionError(f"Node '{uid}' is already active.")
        if not self.graph.node(uid).is_available:
            raise ProgressionError(f"Node '{uid}' is not available.")

        updated = transition(self.graph.nodes, self.active_id, uid)
        for node_id, state in updated.items():
            node = self.graph.nodes[node_id]
            node.is_active = state.is_active
            node.is_available = state.is_available

        logger.info(f"Activated '{uid}' (previous: {self.active_id}).")
        self.active_id = uid
