"""
Output Node for Pixel Graph.

Sink node holding the final image of a pipeline for display. An unconnected
output node simply holds nothing.
"""

from pathlib import Path
from typing import Any, Optional

from PG_Libs.constants import PIN_IMAGE
from PG_Libs.GraphLib.base_node import BaseNode, NodeKind


class OutputNode(BaseNode):
    kind = NodeKind.OUTPUT
    input_names = (PIN_IMAGE,)

    def __init__(self, name: Optional[str] = None, config=None):
        super().__init__(name=name, config=config)
        self.result: Optional[Any] = None

    def process(self) -> None:
        image = self.input_data(0)
        self.result = image.copy() if image is not None else None

    def save(self, file_path: Path, save_format: Optional[str] = None) -> Path:
        """
        Save the current result with Pillow.

        Raises:
            ValueError: If there is no result yet
        """
        if self.result is None:
            raise ValueError(f"{self.name} has no image to save")

        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.result.save(path, format=save_format)
        return path
