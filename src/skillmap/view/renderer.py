"""
Skill Map Renderer
==================
Paints a SkillGraph onto a DrawingSurface.

Every call repaints the whole map: clear, all edges, then all nodes on top,
then the optional hover highlight. Nothing is remembered between frames.
"""
from __future__ import annotations

from enum import Enum, auto
from typing import Optional

from skillmap import config
from skillmap.model.geometry import arrowhead
from skillmap.model.graph import Edge, Node, SkillGraph
from skillmap.view.surface import DrawingSurface


class EdgeStyle(Enum):
    HIERARCHY = auto()
    MUTUAL = auto()
    ONE_WAY = auto()


def edge_style(start: Node, end: Node) -> EdgeStyle:
    """Classify an edge from its endpoints."""
    if start.is_topic and end.is_subsection:
        return EdgeStyle.HIERARCHY
    if start.uid in end.relations:
        return EdgeStyle.MUTUAL
    return EdgeStyle.ONE_WAY


def node_fill(node: Node) -> str:
    if node.is_active:
        return config.ACTIVE_COLOR
    if node.is_available:
        return config.AVAILABLE_COLOR
    return config.LOCKED_COLOR


class Renderer:
    """Draws nodes and edges; the surface is passed on every call."""

    def render(self, surface: DrawingSurface, graph: SkillGraph, hovered_id: Optional[str] = None) -> None:
        surface.clear()
        for edge in graph.edges:
            self.draw_edge(surface, graph, edge)
        for node in graph:
            self.draw_node(surface, node)
        if hovered_id is not None and hovered_id in graph:
            self.draw_highlight(surface, graph.node(hovered_id))

    def draw_edge(self, surface: DrawingSurface, graph: SkillGraph, edge: Edge) -> None:
        start = graph.node(edge.start)
        end = graph.node(edge.end)
        style = edge_style(start, end)
        segment = [(start.x, start.y), (end.x, end.y)]

        if style is not EdgeStyle.ONE_WAY:
            surface.line(segment, config.SOLID_EDGE_COLOR)
            return

        surface.line(segment, config.ONE_WAY_EDGE_COLOR, dash=config.ONE_WAY_EDGE_DASH)
        tip, left, right = arrowhead((start.x, start.y), (end.x, end.y), end.radius)
        surface.line([left, tip, right], config.ONE_WAY_EDGE_COLOR)

    def draw_node(self, surface: DrawingSurface, node: Node) -> None:
        surface.circle(node.x, node.y, node.radius, node_fill(node), config.BORDER_COLOR, config.BORDER_WIDTH)
        surface.text(node.x, node.y, node.name, config.LABEL_COLOR, config.LABEL_FONT_PX)

    def draw_highlight(self, surface: DrawingSurface, node: Node) -> None:
        """Hover overlay, drawn regardless of the node's availability."""
        surface.circle(node.x, node.y, node.radius, config.HOVER_COLOR, config.BORDER_COLOR, config.BORDER_WIDTH)
        surface.text(node.x, node.y, node.name, config.LABEL_COLOR, config.HOVER_LABEL_FONT_PX)
