"""
Unit Tests for the Evaluator

Tests cover:
- Dependency ordering through depth-first traversal
- Chains longer than the interpreter recursion limit
- Exactly-once processing per pass
- Deep-copy buffer handoff (no aliasing)
- Idempotent re-evaluation
- Best-effort failure handling
- Cycle guard
"""

import sys
import unittest

import numpy as np
from PIL import Image

from PG_Libs.GraphLib.base_node import BaseNode
from PG_Libs.GraphLib.buffers import copy_buffer, is_empty_buffer
from PG_Libs.GraphLib.errors import CycleDetectedError, NodeProcessingError
from PG_Libs.GraphLib.evaluator import Evaluator, evaluate
from PG_Libs.GraphLib.graph import Graph
from PG_Libs.GraphLib.models import Connection
from PG_Libs.GraphLib.node_registry import NodeRegistry


class TracingNode(BaseNode):
    """Test node that records each process() call in a shared log."""

    def __init__(self, name=None, config=None, log=None):
        super().__init__(name=name, config=config)
        self.log = log if log is not None else []
        self.calls = 0
        self.seen = []

    def trace(self):
        self.calls += 1
        self.log.append(self.name)


class ConstantNode(TracingNode):
    kind = "Constant"
    output_names = ("Value",)

    def __init__(self, value=3.0, **kwargs):
        super().__init__(**kwargs)
        self.value = value

    def process(self):
        self.trace()
        self.set_output(0, np.full((2, 2), self.value))


class EmptyNode(TracingNode):
    kind = "Empty"
    output_names = ("Value",)

    def process(self):
        self.trace()
        self.clear_outputs()


class DoubleNode(TracingNode):
    kind = "Double"
    input_names = ("In",)
    output_names = ("Out",)

    def process(self):
        self.trace()
        data = self.require_input(0)
        self.seen.append(data.copy())
        self.set_output(0, data * 2)


class NegateNode(TracingNode):
    kind = "Negate"
    input_names = ("In",)
    output_names = ("Out",)

    def process(self):
        self.trace()
        data = self.require_input(0)
        self.seen.append(data.copy())
        self.set_output(0, -data)


class SumNode(TracingNode):
    kind = "Sum"
    input_names = ("Left", "Right")
    output_names = ("Out",)

    def process(self):
        self.trace()
        self.set_output(0, self.require_input(0) + self.require_input(1))


class PassThroughNode(TracingNode):
    kind = "PassThrough"
    input_names = ("In",)
    output_names = ("Out",)

    def process(self):
        self.trace()
        self.seen.append(self.input_data(0))
        self.set_output(0, self.input_data(0))


class FlakyNode(TracingNode):
    kind = "Flaky"
    output_names = ("Out",)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.fail = False

    def process(self):
        self.trace()
        if self.fail:
            raise ValueError("bad parameter")
        self.set_output(0, np.ones((2, 2)))


class ExplodingNode(TracingNode):
    kind = "Exploding"
    output_names = ("Out",)

    def process(self):
        self.trace()
        raise RuntimeError("boom")


def make_registry():
    registry = NodeRegistry()
    for node_class in (
        ConstantNode, EmptyNode, DoubleNode, NegateNode,
        SumNode, PassThroughNode, FlakyNode, ExplodingNode,
    ):
        registry.register(node_class.kind, node_class)
    return registry


def link(graph, upstream, downstream, output_index=0, input_index=0):
    return graph.connect(upstream.outputs[output_index].id, downstream.inputs[input_index].id)


class TestDependencyOrdering(unittest.TestCase):
    """Every node sees fully up-to-date inputs before it runs."""

    def setUp(self):
        self.log = []
        self.graph = Graph(registry=make_registry())

    def add(self, kind, name, **kwargs):
        return self.graph.add_node(kind, name=name, log=self.log, **kwargs)

    def test_chain_inserted_in_reverse_order(self):
        """A -> B -> C evaluates correctly although C is first in the node list."""
        c = self.add("Negate", "C")
        b = self.add("Double", "B")
        a = self.add("Constant", "A", value=3.0)
        link(self.graph, a, b)
        link(self.graph, b, c)

        self.graph.process_graph()

        self.assertEqual(self.log, ["A", "B", "C"])
        np.testing.assert_array_equal(b.seen[0], np.full((2, 2), 3.0))
        np.testing.assert_array_equal(c.seen[0], np.full((2, 2), 6.0))
        np.testing.assert_array_equal(c.outputs[0].data, np.full((2, 2), -6.0))

    def test_each_node_processed_once_with_fan_out(self):
        a = self.add("Constant", "A")
        b = self.add("Double", "B")
        c = self.add("Negate", "C")
        link(self.graph, a, b)
        link(self.graph, a, c)

        report = self.graph.process_graph()

        self.assertEqual(a.calls, 1)
        self.assertEqual(b.calls, 1)
        self.assertEqual(c.calls, 1)
        self.assertEqual(sorted(report.execution_order), sorted([a.id, b.id, c.id]))

    def test_fan_in_follows_connection_order(self):
        total = self.add("Sum", "Sum")
        left = self.add("Constant", "Left", value=1.0)
        right = self.add("Constant", "Right", value=10.0)
        link(self.graph, right, total, input_index=1)
        link(self.graph, left, total, input_index=0)

        self.graph.process_graph()

        self.assertEqual(self.log, ["Right", "Left", "Sum"])
        np.testing.assert_array_equal(total.outputs[0].data, np.full((2, 2), 11.0))

    def test_diamond(self):
        a = self.add("Constant", "A", value=2.0)
        b = self.add("Double", "B")
        c = self.add("Negate", "C")
        d = self.add("Sum", "D")
        link(self.graph, a, b)
        link(self.graph, a, c)
        link(self.graph, b, d, input_index=0)
        link(self.graph, c, d, input_index=1)

        self.graph.process_graph()

        self.assertEqual(a.calls, 1)
        np.testing.assert_array_equal(d.outputs[0].data, np.full((2, 2), 2.0))

    def test_dirty_cleared_after_pass(self):
        a = self.add("Constant", "A")
        b = self.add("Double", "B")
        link(self.graph, a, b)
        self.assertTrue(b.dirty)

        self.graph.process_graph()

        self.assertFalse(a.dirty)
        self.assertFalse(b.dirty)


class TestBufferHandoff(unittest.TestCase):
    """Buffers are never shared between nodes."""

    def setUp(self):
        self.graph = Graph(registry=make_registry())
        self.a = self.graph.add_node("Constant", name="A")
        self.b = self.graph.add_node("Double", name="B")
        self.c = self.graph.add_node("Negate", name="C")
        link(self.graph, self.a, self.b)
        link(self.graph, self.a, self.c)
        self.graph.process_graph()

    def test_downstream_input_is_independent_copy(self):
        upstream = self.a.outputs[0].data
        downstream = self.b.inputs[0].data

        self.assertIsNot(upstream, downstream)
        downstream += 100

        np.testing.assert_array_equal(self.a.outputs[0].data, np.full((2, 2), 3.0))

    def test_fan_out_consumers_get_separate_copies(self):
        self.assertIsNot(self.b.inputs[0].data, self.c.inputs[0].data)

        self.b.inputs[0].data[0, 0] = -1

        self.assertEqual(self.c.inputs[0].data[0, 0], 3.0)

    def test_empty_upstream_leaves_input_untouched(self):
        graph = Graph(registry=make_registry())
        source = graph.add_node("Empty")
        sink = graph.add_node("PassThrough")
        link(graph, source, sink)
        previous = np.ones((2, 2))
        sink.inputs[0].data = previous

        graph.process_graph()

        self.assertIs(sink.inputs[0].data, previous)

    def test_copy_buffer_images_and_arrays(self):
        image = Image.new("RGB", (4, 4), (1, 2, 3))
        array = np.zeros((3, 3))
        nested = {"rows": [[1, 2], [3, 4]]}

        image_copy = copy_buffer(image)
        array_copy = copy_buffer(array)
        nested_copy = copy_buffer(nested)

        self.assertIsNot(image_copy, image)
        self.assertEqual(image_copy.tobytes(), image.tobytes())
        self.assertIsNot(array_copy, array)
        nested_copy["rows"][0][0] = 99
        self.assertEqual(nested["rows"][0][0], 1)
        self.assertIsNone(copy_buffer(None))

    def test_is_empty_buffer(self):
        self.assertTrue(is_empty_buffer(None))
        self.assertTrue(is_empty_buffer(np.zeros((0, 3))))
        self.assertTrue(is_empty_buffer(Image.new("RGB", (0, 0))))
        self.assertFalse(is_empty_buffer(np.zeros((1, 1))))
        self.assertFalse(is_empty_buffer(Image.new("RGB", (1, 1))))


class TestIdempotence(unittest.TestCase):
    """Running twice without mutation yields identical outputs."""

    def test_two_passes_identical(self):
        graph = Graph(registry=make_registry())
        a = graph.add_node("Constant", value=1.5)
        b = graph.add_node("Double")
        c = graph.add_node("Negate")
        link(graph, a, b)
        link(graph, b, c)

        graph.process_graph()
        first = c.outputs[0].data.copy()
        graph.process_graph()

        np.testing.assert_array_equal(c.outputs[0].data, first)
        self.assertEqual(c.calls, 2)


class TestFailurePolicy(unittest.TestCase):
    """A failing node does not abort the pass."""

    def setUp(self):
        self.graph = Graph(registry=make_registry())
        self.bad = self.graph.add_node("Exploding", name="Bad")
        self.after_bad = self.graph.add_node("Double", name="AfterBad")
        self.a = self.graph.add_node("Constant", name="A")
        self.b = self.graph.add_node("Double", name="B")
        link(self.graph, self.bad, self.after_bad)
        link(self.graph, self.a, self.b)

    def test_independent_subgraph_still_evaluates(self):
        report = self.graph.process_graph()

        np.testing.assert_array_equal(self.b.outputs[0].data, np.full((2, 2), 6.0))
        self.assertIn(self.bad.id, report.failed)
        self.assertIn("boom", report.failed[self.bad.id])
        self.assertFalse(report.ok)

    def test_missing_input_recorded_on_node(self):
        self.graph.process_graph()

        self.assertIn("requires input", self.after_bad.last_error)
        self.assertIsNone(self.after_bad.outputs[0].data)
        self.assertIsNone(self.b.last_error)

    def test_require_input_raises_processing_error(self):
        node = DoubleNode()

        with self.assertRaises(NodeProcessingError):
            node.process()
        with self.assertRaises(ValueError):
            node.process()

    def test_failure_clears_previous_outputs(self):
        flaky = self.graph.add_node("Flaky")
        self.graph.process_graph()
        self.assertIsNotNone(flaky.outputs[0].data)

        flaky.fail = True
        report = self.graph.process_graph()

        self.assertEqual(report.failed[flaky.id], "bad parameter")
        self.assertIsNone(flaky.outputs[0].data)

    def test_last_error_cleared_after_recovery(self):
        self.graph.process_graph()
        self.graph.connect(self.a.outputs[0].id, self.after_bad.inputs[0].id)

        report = self.graph.process_graph()

        self.assertIsNone(self.after_bad.last_error)
        self.assertNotIn(self.after_bad.id, report.failed)


class TestCycleGuard(unittest.TestCase):
    """A cycle slipped into the connection list never overflows the stack."""

    def setUp(self):
        self.graph = Graph(registry=make_registry())
        self.b = self.graph.add_node("Double", name="B")
        self.c = self.graph.add_node("Negate", name="C")
        link(self.graph, self.b, self.c)
        self.back_edge = Connection(
            input_node=self.b.id,
            output_node=self.c.id,
            input_pin=self.b.inputs[0].id,
            output_pin=self.c.outputs[0].id,
        )
        self.graph.connections.append(self.back_edge)

    def test_offending_connection_rejected(self):
        report = evaluate(self.graph)

        self.assertEqual(len(report.rejected_connections), 1)
        self.assertEqual(len(self.graph.connections), 1)
        self.assertEqual(self.b.calls, 1)
        self.assertEqual(self.c.calls, 1)

    def test_graph_acyclic_after_rejection(self):
        evaluate(self.graph)
        remaining = self.graph.connections[0]

        self.assertFalse(
            self.graph.would_create_cycle(remaining.output_node, remaining.input_node)
        )

    def test_strict_mode_raises(self):
        with self.assertRaises(CycleDetectedError):
            Evaluator(self.graph, strict_cycles=True).run()


class TestLongChains(unittest.TestCase):
    """Chain length is not bounded by the interpreter recursion limit."""

    def test_chain_longer_than_recursion_limit(self):
        log = []
        graph = Graph(registry=make_registry())
        length = sys.getrecursionlimit() + 200
        # Downstream nodes first, so every hop has to walk upstream
        chain = [graph.add_node("PassThrough", name=f"n{i}", log=log) for i in range(length)]
        source = graph.add_node("Constant", name="Source", value=7.0, log=log)

        link(graph, source, chain[-1])
        for upstream, downstream in zip(reversed(chain), reversed(chain[:-1])):
            self.assertIsNotNone(link(graph, upstream, downstream))

        report = graph.process_graph()

        self.assertTrue(report.ok)
        self.assertEqual(len(report.execution_order), length + 1)
        self.assertEqual(log[0], "Source")
        self.assertEqual(log[-1], "n0")
        np.testing.assert_array_equal(chain[0].outputs[0].data, np.full((2, 2), 7.0))
        self.assertTrue(all(node.calls == 1 for node in chain))


if __name__ == "__main__":
    unittest.main()
