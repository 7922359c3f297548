"""
Graph - Container for nodes and connections.

The Graph owns its nodes and the ordered list of connections, hands out
graph-wide unique ids for nodes and pins, and is the unit evaluation runs
over. Lookup and bounds failures are silent: operations return None,
False or -1 instead of raising, because the graph is routinely in a
transient, half-edited state while a user wires it up.

Example:
    graph = Graph()
    source = graph.add_node(NodeKind.IMAGE_INPUT)
    blur = graph.add_node(NodeKind.BLUR)
    graph.connect(source.outputs[0].id, blur.inputs[0].id)
    graph.process_graph()
"""

from typing import Iterator, List, Optional, Sequence, Set, Tuple
import logging

from PG_Libs import constants
from PG_Libs.GraphLib.base_node import BaseNode, KindLike
from PG_Libs.GraphLib.evaluator import EvaluationReport, Evaluator
from PG_Libs.GraphLib.models import Connection, Pin
from PG_Libs.GraphLib.node_registry import NodeRegistry, get_default_registry

logger = logging.getLogger(__name__)


class Graph:
    """
    Owns nodes and connections and runs evaluation.

    Attributes:
        nodes: Nodes in insertion order
        connections: Connections in creation order; list index is the link id
        next_id: Next id the counter will hand out
        last_report: Report of the most recent evaluation pass
    """

    def __init__(self, registry: Optional[NodeRegistry] = None):
        """
        Create an empty graph.

        Args:
            registry: Node factory (default: the global registry)
        """
        self._registry = registry
        self.nodes: List[BaseNode] = []
        self.connections: List[Connection] = []
        self.next_id = constants.INITIAL_ID
        self._selected_node_id: Optional[int] = None
        self.last_report: Optional[EvaluationReport] = None

    @property
    def registry(self) -> NodeRegistry:
        if self._registry is None:
            self._registry = get_default_registry()
        return self._registry

    def __iter__(self) -> Iterator[BaseNode]:
        return iter(list(self.nodes))

    def __len__(self) -> int:
        return len(self.nodes)

    # =========================================================================
    # Node Management
    # =========================================================================

    def _allocate_id(self) -> int:
        allocated = self.next_id
        self.next_id += 1
        return allocated

    def add_node(self, kind: KindLike, **kwargs) -> Optional[BaseNode]:
        """
        Create a node of ``kind`` and add it to the graph.

        Ids are drawn from the graph counter in a fixed order: the node,
        then its input pins, then its output pins.

        Args:
            kind: NodeKind member or registered kind name
            **kwargs: Passed to the node constructor

        Returns:
            The new node, or None for an unknown kind (counter untouched)
        """
        node = self.registry.create(kind, **kwargs)
        if node is None:
            return None

        node.id = self._allocate_id()
        for pin in node.inputs:
            pin.id = self._allocate_id()
        for pin in node.outputs:
            pin.id = self._allocate_id()

        self.nodes.append(node)
        logger.debug(f"Added node: {node}")
        return node

    def remove_node(self, node_id: int) -> bool:
        """
        Remove a node and every connection touching it, then evaluate.

        Returns:
            True if the node existed
        """
        node = self.find_node_by_id(node_id)
        if node is None:
            return False

        for connection in [c for c in self.connections if c.touches(node_id)]:
            self.remove_connection(connection)

        self.nodes.remove(node)
        if self._selected_node_id == node_id:
            self._selected_node_id = None

        logger.debug(f"Removed node: {node}")
        self.process_graph()
        return True

    def find_node_by_id(self, node_id: int) -> Optional[BaseNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def find_node_by_pin(self, pin_id: int, is_input: bool) -> Optional[BaseNode]:
        """
        Find the node owning ``pin_id``.

        Args:
            pin_id: Pin to look for
            is_input: Search input pins when True, output pins otherwise
        """
        for node in self.nodes:
            pins = node.inputs if is_input else node.outputs
            if any(pin.id == pin_id for pin in pins):
                return node
        return None

    @staticmethod
    def find_pin_index(pins: Sequence[Pin], pin_id: int) -> int:
        """Index of ``pin_id`` in ``pins``, or -1."""
        for index, pin in enumerate(pins):
            if pin.id == pin_id:
                return index
        return -1

    def _find_pin(self, node_id: int, pin_id: int, is_input: bool) -> Optional[Pin]:
        node = self.find_node_by_id(node_id)
        if node is None:
            return None
        pins = node.inputs if is_input else node.outputs
        index = self.find_pin_index(pins, pin_id)
        return pins[index] if index >= 0 else None

    # =========================================================================
    # Selection
    # =========================================================================

    def select_node(self, node_id: Optional[int]) -> Optional[BaseNode]:
        """Select a node by id; unknown ids and None clear the selection."""
        node = self.find_node_by_id(node_id) if node_id is not None else None
        self._selected_node_id = node.id if node is not None else None
        return node

    @property
    def selected_node(self) -> Optional[BaseNode]:
        if self._selected_node_id is None:
            return None
        return self.find_node_by_id(self._selected_node_id)

    # =========================================================================
    # Connection Management
    # =========================================================================

    def connect(self, output_pin_id: int, input_pin_id: int) -> Optional[Connection]:
        """
        Connect an output pin to an input pin.

        An input pin accepts one inbound connection; an existing one is
        replaced. Connections that would close a dependency cycle are
        rejected.

        Returns:
            The new Connection, or None when a pin does not resolve or the
            link would create a cycle
        """
        output_node = self.find_node_by_pin(output_pin_id, is_input=False)
        input_node = self.find_node_by_pin(input_pin_id, is_input=True)

        if output_node is None or input_node is None:
            logger.debug(f"Cannot connect pins {output_pin_id} -> {input_pin_id}: pin not found")
            return None

        if self.would_create_cycle(output_node.id, input_node.id):
            logger.warning(
                f"Rejected connection {output_node.name} -> {input_node.name}: "
                f"it would create a cycle"
            )
            return None

        for existing in [c for c in self.connections if c.input_pin == input_pin_id]:
            self.remove_connection(existing)

        connection = Connection(
            input_node=input_node.id,
            output_node=output_node.id,
            input_pin=input_pin_id,
            output_pin=output_pin_id,
        )
        self.connections.append(connection)

        self._find_pin(output_node.id, output_pin_id, is_input=False).connected = True
        self._find_pin(input_node.id, input_pin_id, is_input=True).connected = True
        output_node.dirty = True
        input_node.dirty = True

        logger.debug(f"Connection created: {len(self.connections)} total connections")
        return connection

    def disconnect(self, connection_index: int) -> bool:
        """
        Remove the connection at ``connection_index`` and evaluate.

        Returns:
            False for an out-of-range index
        """
        if connection_index < 0 or connection_index >= len(self.connections):
            return False

        self.remove_connection(self.connections[connection_index])
        self.process_graph()
        return True

    def remove_connection(self, connection: Connection) -> bool:
        """
        Remove ``connection`` without evaluating.

        The input pin loses its buffer and connected flag; the output pin
        loses its connected flag unless another connection still uses it.
        """
        try:
            self.connections.remove(connection)
        except ValueError:
            return False

        input_pin = self._find_pin(connection.input_node, connection.input_pin, is_input=True)
        if input_pin is not None:
            input_pin.clear()

        output_pin = self._find_pin(connection.output_node, connection.output_pin, is_input=False)
        if output_pin is not None:
            output_pin.connected = any(
                c.output_pin == connection.output_pin for c in self.connections
            )

        for node_id in (connection.input_node, connection.output_node):
            node = self.find_node_by_id(node_id)
            if node is not None:
                node.dirty = True

        return True

    def is_connection_valid(self, connection: Connection) -> bool:
        """Both nodes exist and each pin belongs to its claimed side and node."""
        input_node = self.find_node_by_id(connection.input_node)
        output_node = self.find_node_by_id(connection.output_node)
        if input_node is None or output_node is None:
            return False
        return (
            self.find_pin_index(input_node.inputs, connection.input_pin) >= 0
            and self.find_pin_index(output_node.outputs, connection.output_pin) >= 0
        )

    def prune_invalid_connections(self) -> int:
        """
        Remove every invalid connection.

        Returns:
            Number of connections removed
        """
        invalid = [c for c in self.connections if not self.is_connection_valid(c)]
        for connection in invalid:
            self.remove_connection(connection)
        if invalid:
            logger.warning(f"Pruned {len(invalid)} invalid connection(s)")
        return len(invalid)

    def would_create_cycle(self, output_node_id: int, input_node_id: int) -> bool:
        """True if a link output_node -> input_node would close a cycle."""
        if output_node_id == input_node_id:
            return True

        # Walk downstream from the input node looking for the output node
        visited: Set[int] = set()
        stack = [input_node_id]
        while stack:
            current = stack.pop()
            if current == output_node_id:
                return True
            if current in visited:
                continue
            visited.add(current)
            stack.extend(c.input_node for c in self.connections if c.output_node == current)
        return False

    def links(self) -> List[Tuple[int, int]]:
        """``(output_pin, input_pin)`` pairs; the list index is the link id."""
        return [(c.output_pin, c.input_pin) for c in self.connections]

    # =========================================================================
    # Evaluation
    # =========================================================================

    def process_graph(self) -> EvaluationReport:
        """Run a full evaluation pass."""
        self.last_report = Evaluator(self).run()
        return self.last_report

    def clear(self) -> None:
        """Reset to the initial empty state, including the id counter."""
        self.nodes.clear()
        self.connections.clear()
        self.next_id = constants.INITIAL_ID
        self._selected_node_id = None
        self.last_report = None
