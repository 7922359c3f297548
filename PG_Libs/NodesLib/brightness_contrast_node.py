"""
Brightness/Contrast Node for Pixel Graph.

Applies ``contrast * pixel + brightness`` to every color channel.
"""

from dataclasses import dataclass

from PG_Libs.constants import DEFAULT_BRIGHTNESS, DEFAULT_CONTRAST, PIN_IMAGE
from PG_Libs.GraphLib.base_node import BaseNode, NodeConfig, NodeKind
from PG_Libs.ImageEditingLib.tone_ops import apply_brightness_contrast


@dataclass
class BrightnessContrastConfig(NodeConfig):
    """Configuration for brightness/contrast.

    Attributes:
        brightness: Offset added after scaling (-255 to 255)
        contrast: Gain (0 to 3, 1 = unchanged)
    """
    brightness: float = DEFAULT_BRIGHTNESS
    contrast: float = DEFAULT_CONTRAST


class BrightnessContrastNode(BaseNode):
    kind = NodeKind.BRIGHTNESS_CONTRAST
    input_names = (PIN_IMAGE,)
    output_names = (PIN_IMAGE,)
    config_class = BrightnessContrastConfig

    def process(self) -> None:
        image = self.require_input(0)
        self.set_output(
            0,
            apply_brightness_contrast(
                image,
                brightness=float(self.config.brightness),
                contrast=float(self.config.contrast),
            ),
        )
