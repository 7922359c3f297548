"""
Image Input Node for Pixel Graph.

Source node that provides an image to downstream nodes. The image is either
handed over directly with ``set_image`` or loaded from disk when the
``file_path`` parameter changes.

Example:
    >>> graph = Graph()
    >>> source = graph.add_node(NodeKind.IMAGE_INPUT)
    >>> source.set_parameters(file_path="photo.png")
    >>> graph.process_graph()
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

from PIL import Image

from PG_Libs.constants import PIN_IMAGE, SUPPORTED_STANDARD_IMAGES
from PG_Libs.GraphLib.base_node import BaseNode, NodeConfig, NodeKind


def get_supported_image_formats() -> List[str]:
    """
    Get list of supported image formats.

    Returns:
        List of file extensions (e.g., ['.bmp', '.gif', ...])
    """
    return sorted(list(SUPPORTED_STANDARD_IMAGES))


def is_supported_format(file_path: Path) -> bool:
    return Path(file_path).suffix.lower() in SUPPORTED_STANDARD_IMAGES


@dataclass
class ImageInputConfig(NodeConfig):
    """Configuration for the image input node.

    Attributes:
        file_path: Image file to load; None when the image is set directly
    """
    file_path: Optional[str] = None


class ImageInputNode(BaseNode):
    """Source node with a single image output."""
    kind = NodeKind.IMAGE_INPUT
    output_names = (PIN_IMAGE,)
    config_class = ImageInputConfig

    def __init__(self, name: Optional[str] = None, config: Optional[ImageInputConfig] = None):
        super().__init__(name=name, config=config)
        self._image: Optional[Any] = None
        self._loaded_path: Optional[str] = None

    @property
    def image(self) -> Optional[Any]:
        return self._image

    def set_image(self, image: Any) -> None:
        """
        Use ``image`` as the source; a private copy is kept.

        Raises:
            TypeError: If image not PIL Image
        """
        if not isinstance(image, Image.Image):
            raise TypeError(f"Expected PIL Image, got {type(image)}")
        self._image = image.copy()
        self._loaded_path = None
        self.config.file_path = None
        self.dirty = True

    def load(self, file_path: Path) -> None:
        """
        Load an image file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the extension is not a supported image format
        """
        path = Path(file_path)

        if not path.is_file():
            raise FileNotFoundError(f"Image file not found: {path}")

        if not is_supported_format(path):
            raise ValueError(
                f"Unsupported image format: {path.suffix}. "
                f"Supported: {', '.join(get_supported_image_formats())}"
            )

        with Image.open(path) as opened:
            opened.load()
            self._image = opened.copy()
        self._loaded_path = str(path)
        self.dirty = True

    def process(self) -> None:
        file_path = self.config.file_path
        if file_path and file_path != self._loaded_path:
            self.clear_outputs()
            self.load(Path(file_path))

        if self._image is None:
            self.clear_outputs()
            return

        self.set_output(0, self._image.copy())
