"""
Convolution Node for Pixel Graph.

Filters the input with a square, odd-sized kernel. A custom ``kernel``
takes precedence over the named ``preset``.

Example:
    >>> conv = graph.add_node(NodeKind.CONVOLUTION)
    >>> conv.set_parameters(kernel=[[0, 0, 0], [0, 2, 0], [0, 0, 0]])
"""

from dataclasses import dataclass
from typing import List, Optional

from PG_Libs.constants import DEFAULT_CONVOLUTION_PRESET, PIN_IMAGE
from PG_Libs.GraphLib.base_node import BaseNode, NodeConfig, NodeKind
from PG_Libs.ImageEditingLib.kernel_filter import apply_kernel, get_kernel_preset


@dataclass
class ConvolutionConfig(NodeConfig):
    """Configuration for convolution node.

    Attributes:
        preset: 'identity', 'sharpen', 'box', 'emboss' or 'outline'
        kernel: Custom kernel rows; None to use the preset
    """
    preset: str = DEFAULT_CONVOLUTION_PRESET
    kernel: Optional[List[List[float]]] = None

    def get_kernel(self) -> List[List[float]]:
        if self.kernel is not None:
            return self.kernel
        return get_kernel_preset(self.preset)


class ConvolutionNode(BaseNode):
    kind = NodeKind.CONVOLUTION
    input_names = (PIN_IMAGE,)
    output_names = (PIN_IMAGE,)
    config_class = ConvolutionConfig

    def process(self) -> None:
        image = self.require_input(0)
        self.set_output(0, apply_kernel(image, self.config.get_kernel()))
