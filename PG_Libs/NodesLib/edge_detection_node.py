"""Edge Detection Node: Sobel, Laplacian or Pillow FIND_EDGES on luminance."""

from dataclasses import dataclass

from PG_Libs.constants import DEFAULT_EDGE_METHOD, PIN_IMAGE
from PG_Libs.GraphLib.base_node import BaseNode, NodeConfig, NodeKind
from PG_Libs.ImageEditingLib.kernel_filter import detect_edges


@dataclass
class EdgeDetectionConfig(NodeConfig):
    method: str = DEFAULT_EDGE_METHOD


class EdgeDetectionNode(BaseNode):
    kind = NodeKind.EDGE_DETECTION
    input_names = (PIN_IMAGE,)
    output_names = (PIN_IMAGE,)
    config_class = EdgeDetectionConfig

    def process(self) -> None:
        image = self.require_input(0)
        self.set_output(0, detect_edges(image, self.config.method))
