"""
Blur Node for Pixel Graph.

Wraps the blur filter operations for use in the node graph.
Supports Gaussian, Box and Median blur.

Example:
    >>> blur = graph.add_node(NodeKind.BLUR)
    >>> blur.set_parameters(blur_type="box", radius=3)
"""

from dataclasses import dataclass

from PG_Libs.constants import DEFAULT_BLUR_RADIUS, DEFAULT_BLUR_TYPE, PIN_IMAGE
from PG_Libs.GraphLib.base_node import BaseNode, NodeConfig, NodeKind
from PG_Libs.ImageEditingLib.blur_filter import apply_blur


@dataclass
class BlurNodeConfig(NodeConfig):
    """Configuration for blur node.

    Attributes:
        blur_type: 'gaussian', 'box' or 'median'
        radius: Blur radius in pixels. Box and median use a
            ``2 * radius + 1`` window.
    """
    blur_type: str = DEFAULT_BLUR_TYPE
    radius: float = DEFAULT_BLUR_RADIUS


class BlurNode(BaseNode):
    kind = NodeKind.BLUR
    input_names = (PIN_IMAGE,)
    output_names = (PIN_IMAGE,)
    config_class = BlurNodeConfig

    def process(self) -> None:
        image = self.require_input(0)
        self.set_output(0, apply_blur(image, self.config.blur_type, float(self.config.radius)))
