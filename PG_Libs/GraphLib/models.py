"""
Graph data models for Pixel Graph.

Classes:
    Pin: Uniquely identified attachment point on a node holding one buffer
    Connection: Directed edge from an output pin to an input pin
"""

from dataclasses import dataclass
from typing import Any, Optional

from PG_Libs.GraphLib.buffers import is_empty_buffer


@dataclass
class Pin:
    """An input or output attachment point.

    Attributes:
        name: Display name of the pin
        id: Graph-wide unique id (-1 until the owning node joins a graph)
        data: Current buffer, None when empty
        connected: True while a connection uses this pin
    """
    name: str
    id: int = -1
    data: Optional[Any] = None
    connected: bool = False

    def has_data(self) -> bool:
        return not is_empty_buffer(self.data)

    def clear(self) -> None:
        """Drop the buffer and the connected flag."""
        self.data = None
        self.connected = False


@dataclass(frozen=True)
class Connection:
    """Edge from ``output_pin`` on ``output_node`` to ``input_pin`` on ``input_node``.

    Holds ids only; nodes and pins stay owned by the graph.
    """
    input_node: int
    output_node: int
    input_pin: int
    output_pin: int

    def touches(self, node_id: int) -> bool:
        return self.input_node == node_id or self.output_node == node_id
