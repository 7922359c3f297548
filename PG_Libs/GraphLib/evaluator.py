"""
Dependency-ordered graph evaluation.

An evaluation pass recomputes every node exactly once. Before a node runs,
each of its upstream producers is processed first and the producer's
output buffer is deep-copied into the node's input pin. The traversal is
depth-first over an explicit stack and memoized on a per-pass "processed"
set; an additional per-path "in progress" set catches dependency cycles.

Failure policy is best-effort: an exception from a node's ``process()``
clears that node's outputs, is recorded on the node and in the report, and
the pass moves on.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Set
import logging

from PG_Libs.GraphLib.base_node import BaseNode
from PG_Libs.GraphLib.buffers import copy_buffer, is_empty_buffer
from PG_Libs.GraphLib.errors import CycleDetectedError
from PG_Libs.GraphLib.models import Connection

if TYPE_CHECKING:
    from PG_Libs.GraphLib.graph import Graph

logger = logging.getLogger(__name__)


@dataclass
class EvaluationReport:
    """Outcome of one evaluation pass.

    Attributes:
        execution_order: Node ids in the order their process() ran
        failed: node_id -> error message for nodes whose process() raised
        pruned_connections: Invalid connections removed before traversal
        rejected_connections: Connections removed because they closed a cycle
    """
    execution_order: List[int] = field(default_factory=list)
    failed: Dict[int, str] = field(default_factory=dict)
    pruned_connections: int = 0
    rejected_connections: List[Connection] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed and not self.rejected_connections


class _Frame:
    """Traversal state for one node on the explicit evaluation stack."""

    __slots__ = ("node", "inbound", "index")

    def __init__(self, node: BaseNode, inbound: List[Connection]):
        self.node = node
        self.inbound = inbound
        self.index = 0


class Evaluator:
    """
    Runs evaluation passes over a Graph.

    The depth-first traversal runs on an explicit stack, so the length of a
    dependency chain is not limited by the interpreter's recursion limit.

    Args:
        graph: Graph to evaluate
        strict_cycles: Raise CycleDetectedError instead of rejecting the
            connection that closes a cycle
    """

    def __init__(self, graph: "Graph", strict_cycles: bool = False):
        self.graph = graph
        self.strict_cycles = strict_cycles

    def run(self) -> EvaluationReport:
        """Run one full pass over the graph."""
        report = EvaluationReport()
        report.pruned_connections = self.graph.prune_invalid_connections()

        processed: Set[int] = set()
        for node in list(self.graph.nodes):
            self._process_node(node, processed, report)

        logger.debug(
            f"Evaluated {len(report.execution_order)} nodes "
            f"({len(report.failed)} failed, {report.pruned_connections} pruned)"
        )
        return report

    def _inbound(self, node: BaseNode) -> List[Connection]:
        # Fan-in order follows the connection list
        return [c for c in self.graph.connections if c.input_node == node.id]

    def _process_node(
        self,
        node: BaseNode,
        processed: Set[int],
        report: EvaluationReport,
    ) -> None:
        """Process ``node`` after all of its upstream producers."""
        if node.id in processed:
            return

        stack: List[_Frame] = [_Frame(node, self._inbound(node))]
        path: List[int] = [node.id]
        in_progress: Set[int] = {node.id}

        while stack:
            frame = stack[-1]

            if frame.index >= len(frame.inbound):
                self._run_node(frame.node, report)
                processed.add(frame.node.id)
                stack.pop()
                path.pop()
                in_progress.discard(frame.node.id)
                continue

            connection = frame.inbound[frame.index]
            if connection not in self.graph.connections:
                frame.index += 1
                continue

            upstream = self.graph.find_node_by_id(connection.output_node)
            if upstream is None:
                frame.index += 1
                continue

            if upstream.id in in_progress:
                if self.strict_cycles:
                    raise CycleDetectedError(upstream.id, path)
                self._reject(connection, report)
                frame.index += 1
                continue

            if upstream.id not in processed:
                stack.append(_Frame(upstream, self._inbound(upstream)))
                path.append(upstream.id)
                in_progress.add(upstream.id)
                continue

            self._hand_off(upstream, frame.node, connection)
            frame.index += 1

    def _hand_off(self, upstream: BaseNode, node: BaseNode, connection: Connection) -> None:
        output_index = self.graph.find_pin_index(upstream.outputs, connection.output_pin)
        input_index = self.graph.find_pin_index(node.inputs, connection.input_pin)
        if output_index < 0 or input_index < 0:
            return

        source = upstream.outputs[output_index].data
        if not is_empty_buffer(source):
            node.inputs[input_index].data = copy_buffer(source)

    def _run_node(self, node: BaseNode, report: EvaluationReport) -> None:
        try:
            node.process()
        except Exception as e:
            node.clear_outputs()
            node.last_error = str(e)
            report.failed[node.id] = str(e)
            logger.warning(f"Node {node.name} ({node.id}) failed: {e}")
        else:
            node.last_error = None
        node.dirty = False
        report.execution_order.append(node.id)

    def _reject(self, connection: Connection, report: EvaluationReport) -> None:
        logger.warning(
            f"Rejecting connection {connection.output_node}:{connection.output_pin} -> "
            f"{connection.input_node}:{connection.input_pin}: it closes a cycle"
        )
        self.graph.remove_connection(connection)
        report.rejected_connections.append(connection)


def evaluate(graph: "Graph", strict_cycles: bool = False) -> EvaluationReport:
    """Convenience wrapper running a single pass."""
    return Evaluator(graph, strict_cycles=strict_cycles).run()
