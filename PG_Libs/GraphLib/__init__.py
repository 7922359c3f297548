"""
GraphLib - Dataflow graph model and evaluation engine

This module holds the node/pin/connection bookkeeping, the node kind
registry, and the dependency-ordered evaluator.
"""

from PG_Libs.GraphLib.models import Pin, Connection
from PG_Libs.GraphLib.base_node import BaseNode, NodeConfig, NodeKind, kind_name
from PG_Libs.GraphLib.errors import GraphError, CycleDetectedError, NodeProcessingError
from PG_Libs.GraphLib.buffers import copy_buffer, is_empty_buffer
from PG_Libs.GraphLib.node_registry import (
    NodeRegistry,
    get_default_registry,
    register_default_nodes,
    register_node,
)
from PG_Libs.GraphLib.evaluator import EvaluationReport, Evaluator, evaluate
from PG_Libs.GraphLib.graph import Graph
from PG_Libs.GraphLib.editor import NodeEditor, NodeView, LinkView, PinView, get_graph_summary

__all__ = [
    "Pin",
    "Connection",
    "BaseNode",
    "NodeConfig",
    "NodeKind",
    "kind_name",
    "GraphError",
    "CycleDetectedError",
    "NodeProcessingError",
    "copy_buffer",
    "is_empty_buffer",
    "NodeRegistry",
    "get_default_registry",
    "register_default_nodes",
    "register_node",
    "EvaluationReport",
    "Evaluator",
    "evaluate",
    "Graph",
    "NodeEditor",
    "NodeView",
    "LinkView",
    "PinView",
    "get_graph_summary",
]
