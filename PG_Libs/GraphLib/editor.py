"""
Editor facade between a rendering/interaction layer and the Graph.

A UI shell reports discrete gestures (link created, link deleted, node
deleted, parameters edited); NodeEditor turns each into the matching graph
mutation followed by one evaluation pass, and exposes read-only views of
nodes and links for drawing.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple
import logging

from PG_Libs.GraphLib.base_node import BaseNode, KindLike
from PG_Libs.GraphLib.evaluator import EvaluationReport
from PG_Libs.GraphLib.graph import Graph
from PG_Libs.GraphLib.node_registry import NodeRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PinView:
    id: int
    name: str
    connected: bool


@dataclass(frozen=True)
class NodeView:
    id: int
    name: str
    inputs: Tuple[PinView, ...]
    outputs: Tuple[PinView, ...]
    selected: bool = False
    error: Optional[str] = None


@dataclass(frozen=True)
class LinkView:
    link_id: int
    output_pin: int
    input_pin: int


class NodeEditor:
    """
    Translate UI events into graph operations.

    Attributes:
        graph: The edited graph
    """

    def __init__(self, graph: Optional[Graph] = None, registry: Optional[NodeRegistry] = None):
        self.graph = graph if graph is not None else Graph(registry=registry)

    @property
    def last_report(self) -> Optional[EvaluationReport]:
        """Report of the most recent evaluation pass, if any."""
        return self.graph.last_report

    def add_node(self, kind: KindLike, **kwargs: Any) -> Optional[BaseNode]:
        """Add a node; an unknown kind adds nothing and returns None."""
        node = self.graph.add_node(kind, **kwargs)
        if node is None:
            logger.warning(f"Cannot add node of unknown type: {kind}")
        return node

    def on_link_created(self, start_pin: int, end_pin: int) -> bool:
        """Handle a drag-to-connect gesture from output ``start_pin`` to input ``end_pin``."""
        connection = self.graph.connect(start_pin, end_pin)
        if connection is None:
            return False
        self.graph.process_graph()
        return True

    def on_link_deleted(self, link_id: int) -> bool:
        """Handle a delete gesture on a hovered link."""
        return self.graph.disconnect(link_id)

    def on_node_deleted(self, node_id: int) -> bool:
        """Handle a delete gesture on a hovered node."""
        return self.graph.remove_node(node_id)

    def on_node_selected(self, node_id: Optional[int]) -> Optional[BaseNode]:
        return self.graph.select_node(node_id)

    def on_parameters_changed(self, node_id: int, **values: Any) -> bool:
        """Apply a parameter edit to a node and re-evaluate."""
        node = self.graph.find_node_by_id(node_id)
        if node is None:
            return False
        node.set_parameters(**values)
        self.graph.process_graph()
        return True

    def refresh(self) -> EvaluationReport:
        """Run an evaluation pass on demand."""
        return self.graph.process_graph()

    def clear(self) -> None:
        self.graph.clear()

    # =========================================================================
    # Read-only views for rendering
    # =========================================================================

    def node_views(self) -> List[NodeView]:
        selected = self.graph.selected_node
        selected_id = selected.id if selected is not None else None
        return [
            NodeView(
                id=node.id,
                name=node.name,
                inputs=tuple(PinView(p.id, p.name, p.connected) for p in node.inputs),
                outputs=tuple(PinView(p.id, p.name, p.connected) for p in node.outputs),
                selected=node.id == selected_id,
                error=node.last_error,
            )
            for node in self.graph.nodes
        ]

    def link_views(self) -> List[LinkView]:
        return [
            LinkView(link_id=index, output_pin=output_pin, input_pin=input_pin)
            for index, (output_pin, input_pin) in enumerate(self.graph.links())
        ]


def get_graph_summary(graph: Graph) -> str:
    """
    Generate human-readable summary of graph state.

    Example:
        >>> print(get_graph_summary(graph))
        Graph Summary:
          Nodes: 2
          Connections: 1
        ...
        Link 0: 0:1 -> 2:3
    """
    lines = [
        "Graph Summary:",
        f"  Nodes: {len(graph.nodes)}",
        f"  Connections: {len(graph.connections)}",
        "",
    ]

    for node in graph.nodes:
        inputs = ", ".join(f"{p.name}#{p.id}" for p in node.inputs) or "-"
        outputs = ", ".join(f"{p.name}#{p.id}" for p in node.outputs) or "-"
        error = f" [ERROR: {node.last_error}]" if node.last_error else ""
        lines.append(f"  - {node.name} ({node.id}) in[{inputs}] out[{outputs}]{error}")

    lines.append("")

    for index, connection in enumerate(graph.connections):
        lines.append(
            f"Link {index}: {connection.output_node}:{connection.output_pin} -> "
            f"{connection.input_node}:{connection.input_pin}"
        )

    return "\n".join(lines)
