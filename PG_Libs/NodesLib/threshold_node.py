"""
Threshold Node for Pixel Graph.

Thresholds the luminance of its input. Output is always grayscale.
"""

from dataclasses import dataclass

from PG_Libs.constants import (
    DEFAULT_THRESHOLD,
    DEFAULT_THRESHOLD_MAX_VALUE,
    DEFAULT_THRESHOLD_TYPE,
    PIN_IMAGE,
)
from PG_Libs.GraphLib.base_node import BaseNode, NodeConfig, NodeKind
from PG_Libs.ImageEditingLib.tone_ops import apply_threshold


@dataclass
class ThresholdConfig(NodeConfig):
    """Configuration for threshold node.

    Attributes:
        threshold: Cut-off level (0-255)
        max_value: Value written for pixels passing a binary threshold
        threshold_type: 'binary', 'binary_inv', 'trunc', 'tozero', 'tozero_inv'
    """
    threshold: float = DEFAULT_THRESHOLD
    max_value: float = DEFAULT_THRESHOLD_MAX_VALUE
    threshold_type: str = DEFAULT_THRESHOLD_TYPE


class ThresholdNode(BaseNode):
    kind = NodeKind.THRESHOLD
    input_names = (PIN_IMAGE,)
    output_names = (PIN_IMAGE,)
    config_class = ThresholdConfig

    def process(self) -> None:
        image = self.require_input(0)
        self.set_output(
            0,
            apply_threshold(
                image,
                threshold=float(self.config.threshold),
                max_value=float(self.config.max_value),
                threshold_type=self.config.threshold_type,
            ),
        )
