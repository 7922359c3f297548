"""
Blend Node for Pixel Graph.

Mixes two images. ``Image B`` is resized to the size of ``Image A`` when
they differ. Both inputs are required.
"""

from dataclasses import dataclass

from PG_Libs.constants import (
    DEFAULT_BLEND_ALPHA,
    DEFAULT_BLEND_MODE,
    PIN_IMAGE,
    PIN_IMAGE_A,
    PIN_IMAGE_B,
)
from PG_Libs.GraphLib.base_node import BaseNode, NodeConfig, NodeKind
from PG_Libs.ImageEditingLib.compose_ops import blend_images


@dataclass
class BlendConfig(NodeConfig):
    """Configuration for blend node.

    Attributes:
        alpha: Weight of the blended result (0 = Image A only, 1 = full blend)
        mode: 'normal', 'add', 'multiply', 'screen' or 'difference'
    """
    alpha: float = DEFAULT_BLEND_ALPHA
    mode: str = DEFAULT_BLEND_MODE


class BlendNode(BaseNode):
    kind = NodeKind.BLEND
    input_names = (PIN_IMAGE_A, PIN_IMAGE_B)
    output_names = (PIN_IMAGE,)
    config_class = BlendConfig

    def process(self) -> None:
        base = self.require_input(0)
        overlay = self.require_input(1)
        self.set_output(
            0,
            blend_images(base, overlay, alpha=float(self.config.alpha), mode=self.config.mode),
        )
