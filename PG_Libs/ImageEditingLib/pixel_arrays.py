"""
Conversions between Pillow images and numpy pixel arrays.

Operations work on float32 arrays in the 0-255 range. Alpha, when present,
is split off so color math never touches it.
"""

from typing import Any, Optional, Tuple

import numpy as np
from PIL import Image


def normalize_mode(image: Any) -> Any:
    """
    Convert an image to L, RGB or RGBA.

    Raises:
        TypeError: If image not PIL Image
    """
    if not isinstance(image, Image.Image):
        raise TypeError(f"Expected PIL Image, got {type(image)}")

    if image.mode in ("L", "RGB", "RGBA"):
        return image
    if "A" in image.mode or "transparency" in image.info:
        return image.convert("RGBA")
    return image.convert("RGB")


def split_alpha(image: Any) -> Tuple[np.ndarray, Optional[np.ndarray]]:
    """
    Return ``(color, alpha)`` float32 arrays; alpha is None without an alpha band.
    """
    image = normalize_mode(image)
    pixels = np.asarray(image, dtype=np.float32)

    if image.mode == "RGBA":
        return pixels[..., :3], pixels[..., 3]
    return pixels, None


def merge_alpha(color: np.ndarray, alpha: Optional[np.ndarray] = None) -> Any:
    """Clip, round and rebuild a Pillow image from color (and alpha) arrays."""
    pixels = color if alpha is None else np.dstack([color, alpha])
    pixels = np.clip(np.rint(pixels), 0, 255).astype(np.uint8)
    return Image.fromarray(pixels)


def to_grayscale_array(image: Any) -> np.ndarray:
    """Luminance as a float32 2D array."""
    image = normalize_mode(image)
    return np.asarray(image.convert("L"), dtype=np.float32)
