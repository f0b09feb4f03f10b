"""
Skill Map Graph
===============
Positioned nodes and the edges between them.

Nodes are stored in an ordered, id-indexed mapping (insertion order is the
input order of the document); edges refer to nodes by id only.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterator, List, Mapping, Optional

import numpy as np

from skillmap.config import NODE_RADIUS
from skillmap.model.items import ItemType

if TYPE_CHECKING:
    import numpy.typing as npt


class Node:
    """
    A circular node of the skill map (a topic or a subsection).
    """
    def __init__(
        self,
        uid: str,
        coords: list[float] | tuple[float, float] | npt.NDArray[np.float64],
        name: str,
        item_type: ItemType,
        radius: float = NODE_RADIUS,
        is_active: bool = False,
        is_available: bool = False,
        relations: Optional[List[str]] = None,
        sections: Optional[List[str]] = None,
    ) -> None:
        """
        Args:
            uid: Unique id of the item the node was built from.
            coords: Centre of the node on the drawing surface [X, Y].
            name: Label drawn inside the circle.
            item_type: Topic or subsection.
            radius: Circle radius.
            is_active: Whether this is the current node of the progression.
            is_available: Whether the node may be activated by the next click.
            relations: Ids this node is related to (explicit relations plus siblings).
            sections: Ordered child ids, empty for subsections.
        """
        self.uid = uid
        self.coords = np.array(coords, dtype=np.float64)
        self.name = name
        self.type = item_type
        self.radius = radius
        self.is_active = is_active
        self.is_available = is_available
        self.relations: List[str] = list(relations or [])
        self.sections: List[str] = list(sections or [])

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(id={self.uid!r}, coords={self.coords}, "
            f"active={self.is_active}, available={self.is_available})"
        )

    @property
    def x(self) -> float:
        """X-coordinate of the node centre."""
        return float(self.coords[0])

    @property
    def y(self) -> float:
        """Y-coordinate of the node centre."""
        return float(self.coords[1])

    @property
    def is_topic(self) -> bool:
        return self.type == ItemType.TOPIC

    @property
    def is_subsection(self) -> bool:
        return self.type == ItemType.SUBSECTION

    def contains(self, x: float, y: float) -> bool:
        """Point-in-circle test, the boundary counts as inside."""
        dx = self.x - x
        dy = self.y - y
        return dx * dx + dy * dy <= self.radius * self.radius

    def copy(self) -> Node:
        return Node(
            uid=self.uid,
            coords=self.coords.copy(),
            name=self.name,
            item_type=self.type,
            radius=self.radius,
            is_active=self.is_active,
            is_available=self.is_available,
            relations=self.relations,
            sections=self.sections,
        )


@dataclass(frozen=True)
class Edge:
    """A line between two nodes, referenced by id."""
    start: str
    end: str
    directed: bool = True


class SkillGraph:
    """
    Ordered id -> Node collection plus the edge list.
    """
    def __init__(self, nodes: Optional[Dict[str, Node]] = None, edges: Optional[List[Edge]] = None) -> None:
        self.nodes: Dict[str, Node] = dict(nodes or {})
        self.edges: List[Edge] = list(edges or [])

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(nodes={len(self.nodes)}, edges={len(self.edges)})"

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes.values())

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, uid: object) -> bool:
        return uid in self.nodes

    def node(self, uid: str) -> Node:
        try:
            return self.nodes[uid]
        except KeyError:
            raise KeyError(f"No node with id '{uid}'") from None

    def add_node(self, node: Node) -> None:
        self.nodes[node.uid] = node

    def add_edge(self, edge: Edge) -> None:
        self.edges.append(edge)

    def parent_of(self, uid: str) -> Optional[Node]:
        """First node (in node order) whose sections list contains ``uid``."""
        return find_parent(self.nodes, uid)

    @property
    def active_node(self) -> Optional[Node]:
        for node in self.nodes.values():
            if node.is_active:
                return node
        return None


def find_parent(nodes: Mapping[str, Node], uid: str) -> Optional[Node]:
    for node in nodes.values():
        if uid in node.sections:
            return node
    return None
