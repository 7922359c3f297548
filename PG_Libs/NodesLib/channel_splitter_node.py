"""Color Channel Splitter Node: one grayscale output per RGB channel."""

from PG_Libs.constants import PIN_BLUE, PIN_GREEN, PIN_IMAGE, PIN_RED
from PG_Libs.GraphLib.base_node import BaseNode, NodeKind
from PG_Libs.ImageEditingLib.tone_ops import split_channels


class ColorChannelSplitterNode(BaseNode):
    kind = NodeKind.COLOR_CHANNEL_SPLITTER
    input_names = (PIN_IMAGE,)
    output_names = (PIN_RED, PIN_GREEN, PIN_BLUE)

    def process(self) -> None:
        image = self.require_input(0)
        for index, plane in enumerate(split_channels(image)):
            self.set_output(index, plane)
