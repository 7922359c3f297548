"""
Tests for the NodeEditor event facade and graph summary.
"""

import pytest
from PIL import Image

from PG_Libs.GraphLib.base_node import NodeKind
from PG_Libs.GraphLib.editor import LinkView, NodeEditor, get_graph_summary


@pytest.fixture
def editor():
    return NodeEditor()


@pytest.fixture
def pipeline(editor):
    """Image Input -> Brightness/Contrast -> Output, not yet linked."""
    source = editor.add_node(NodeKind.IMAGE_INPUT)
    source.set_image(Image.new("RGB", (4, 4), (100, 100, 100)))
    adjust = editor.add_node(NodeKind.BRIGHTNESS_CONTRAST)
    sink = editor.add_node(NodeKind.OUTPUT)
    return source, adjust, sink


def wire(editor, pipeline):
    source, adjust, sink = pipeline
    assert editor.on_link_created(source.outputs[0].id, adjust.inputs[0].id)
    assert editor.on_link_created(adjust.outputs[0].id, sink.inputs[0].id)


class TestNodeEditorEvents:

    def test_add_unknown_node(self, editor):
        assert editor.add_node("Nope") is None
        assert editor.graph.next_id == 0

    def test_link_created_evaluates(self, editor, pipeline):
        wire(editor, pipeline)
        _, _, sink = pipeline

        assert sink.result.getpixel((0, 0)) == (100, 100, 100)
        assert editor.last_report is not None
        assert editor.last_report.ok

    def test_link_created_with_bad_pins(self, editor, pipeline):
        source, _, _ = pipeline

        assert editor.on_link_created(source.outputs[0].id, 999) is False
        assert editor.graph.connections == []
        assert editor.last_report is None

    def test_link_deleted(self, editor, pipeline):
        wire(editor, pipeline)
        _, adjust, _ = pipeline

        assert editor.on_link_deleted(0) is True
        assert len(editor.graph.connections) == 1
        assert adjust.id in editor.last_report.failed

    def test_link_deleted_out_of_range(self, editor, pipeline):
        wire(editor, pipeline)

        assert editor.on_link_deleted(5) is False
        assert editor.on_link_deleted(-1) is False
        assert len(editor.graph.connections) == 2

    def test_node_deleted(self, editor, pipeline):
        wire(editor, pipeline)
        source, adjust, sink = pipeline

        assert editor.on_node_deleted(adjust.id) is True
        assert editor.graph.connections == []
        assert editor.graph.find_node_by_id(adjust.id) is None
        assert not source.outputs[0].connected
        assert not sink.inputs[0].connected
        assert editor.on_node_deleted(adjust.id) is False

    def test_parameters_changed(self, editor, pipeline):
        wire(editor, pipeline)
        _, adjust, sink = pipeline

        assert editor.on_parameters_changed(adjust.id, brightness=20, contrast=2)
        assert adjust.get_parameters() == {"brightness": 20, "contrast": 2}
        assert sink.result.getpixel((0, 0)) == (220, 220, 220)

    def test_parameters_changed_unknown_node(self, editor):
        assert editor.on_parameters_changed(42, brightness=1) is False

    def test_unknown_parameters_ignored(self, editor, pipeline):
        _, adjust, _ = pipeline

        editor.on_parameters_changed(adjust.id, sparkle=True)

        assert "sparkle" not in adjust.get_parameters()

    def test_refresh_and_clear(self, editor, pipeline):
        wire(editor, pipeline)

        report = editor.refresh()
        assert report is editor.last_report
        assert len(report.execution_order) == 3

        editor.clear()
        assert len(editor.graph) == 0
        assert editor.last_report is None


class TestNodeEditorViews:

    def test_node_views(self, editor, pipeline):
        wire(editor, pipeline)
        source, adjust, _ = pipeline
        editor.on_node_selected(adjust.id)

        views = {view.id: view for view in editor.node_views()}

        assert views[adjust.id].selected
        assert not views[source.id].selected
        assert views[adjust.id].inputs[0].name == "Image"
        assert views[adjust.id].inputs[0].connected
        assert views[source.id].inputs == ()

    def test_node_view_reports_error(self, editor):
        blur = editor.add_node(NodeKind.BLUR)
        editor.refresh()

        view = editor.node_views()[0]

        assert view.id == blur.id
        assert "requires input" in view.error

    def test_deselect(self, editor, pipeline):
        _, adjust, _ = pipeline
        editor.on_node_selected(adjust.id)

        assert editor.on_node_selected(None) is None
        assert not any(view.selected for view in editor.node_views())

    def test_link_views(self, editor, pipeline):
        wire(editor, pipeline)
        source, adjust, sink = pipeline

        assert editor.link_views() == [
            LinkView(0, source.outputs[0].id, adjust.inputs[0].id),
            LinkView(1, adjust.outputs[0].id, sink.inputs[0].id),
        ]


class TestGraphSummary:

    def test_summary(self, editor, pipeline):
        wire(editor, pipeline)
        source, adjust, _ = pipeline

        summary = get_graph_summary(editor.graph)

        assert summary.startswith("Graph Summary:")
        assert "  Nodes: 3" in summary
        assert "  Connections: 2" in summary
        assert f"  - Brightness/Contrast ({adjust.id})" in summary
        assert (
            f"Link 0: {source.id}:{source.outputs[0].id} -> "
            f"{adjust.id}:{adjust.inputs[0].id}"
        ) in summary

    def test_summary_shows_errors(self, editor):
        editor.add_node(NodeKind.THRESHOLD)
        editor.refresh()

        assert "[ERROR: Threshold requires input 'Image']" in get_graph_summary(editor.graph)

    def test_empty_summary(self):
        summary = get_graph_summary(NodeEditor().graph)

        assert "  Nodes: 0" in summary
        assert "Link" not in summary
