"""
Exceptions raised by the Pixel Graph core.

Most graph operations follow a silent no-op policy for lookup and bounds
failures, so these are only raised where a caller explicitly asks for
strict behaviour or where a node reports a processing failure.
"""

from typing import List, Optional


class GraphError(Exception):
    """Base class for graph errors."""


class CycleDetectedError(GraphError):
    """Raised when evaluation reaches a node that is still in progress."""

    def __init__(self, node_id: int, path: Optional[List[int]] = None):
        self.node_id = node_id
        self.path = list(path) if path else []
        chain = " -> ".join(str(n) for n in self.path + [node_id])
        super().__init__(f"Circular dependency detected at node {node_id}: {chain}")


class NodeProcessingError(GraphError, ValueError):
    """Raised by a node whose process() cannot produce valid output."""

    def __init__(self, node_id: int, message: str):
        self.node_id = node_id
        self.message = message
        super().__init__(f"Node {node_id}: {message}")
