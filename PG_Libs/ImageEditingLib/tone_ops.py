"""
Tone and channel operations.

Functions:
    apply_brightness_contrast: Linear ``contrast * x + brightness`` adjustment
    apply_threshold: Grayscale thresholding with five threshold types
    split_channels: Split an image into red, green and blue planes
"""

from typing import Any, Tuple

import numpy as np

from PG_Libs.constants import (
    MAX_BRIGHTNESS,
    MAX_CONTRAST,
    MIN_BRIGHTNESS,
    MIN_CONTRAST,
    THRESHOLD_TYPES,
)
from PG_Libs.ImageEditingLib.pixel_arrays import (
    merge_alpha,
    normalize_mode,
    split_alpha,
    to_grayscale_array,
)


def apply_brightness_contrast(
    image: Any,
    brightness: float = 0.0,
    contrast: float = 1.0,
) -> Any:
    """
    Scale and offset every color channel; alpha is preserved.

    Args:
        image: PIL Image
        brightness: Offset added after scaling (-255 to 255)
        contrast: Gain applied to each channel (0 to 3)

    Returns:
        Adjusted PIL Image, same mode family as the input

    Raises:
        ValueError: If brightness or contrast out of range
        TypeError: If image not PIL Image
    """
    if not (MIN_BRIGHTNESS <= brightness <= MAX_BRIGHTNESS):
        raise ValueError(f"brightness must be {MIN_BRIGHTNESS}-{MAX_BRIGHTNESS}, got {brightness}")
    if not (MIN_CONTRAST <= contrast <= MAX_CONTRAST):
        raise ValueError(f"contrast must be {MIN_CONTRAST}-{MAX_CONTRAST}, got {contrast}")

    color, alpha = split_alpha(image)
    return merge_alpha(color * float(contrast) + float(brightness), alpha)


def apply_threshold(
    image: Any,
    threshold: float = 128,
    max_value: float = 255,
    threshold_type: str = "binary",
) -> Any:
    """
    Threshold the luminance of an image.

    Threshold types (``v`` = pixel, ``t`` = threshold):
        - binary: ``max_value`` if v > t else 0
        - binary_inv: 0 if v > t else ``max_value``
        - trunc: t if v > t else v
        - tozero: v if v > t else 0
        - tozero_inv: 0 if v > t else v

    Returns:
        Grayscale (L) PIL Image

    Raises:
        ValueError: Unknown threshold_type or values outside 0-255
    """
    if not (0 <= threshold <= 255):
        raise ValueError(f"threshold must be 0-255, got {threshold}")
    if not (0 <= max_value <= 255):
        raise ValueError(f"max_value must be 0-255, got {max_value}")

    gray = to_grayscale_array(image)
    above = gray > threshold
    threshold_type = str(threshold_type).lower()

    if threshold_type == "binary":
        result = np.where(above, max_value, 0)
    elif threshold_type == "binary_inv":
        result = np.where(above, 0, max_value)
    elif threshold_type == "trunc":
        result = np.where(above, threshold, gray)
    elif threshold_type == "tozero":
        result = np.where(above, gray, 0)
    elif threshold_type == "tozero_inv":
        result = np.where(above, 0, gray)
    else:
        raise ValueError(
            f"Unknown threshold_type: {threshold_type}. "
            f"Valid types: {', '.join(THRESHOLD_TYPES)}"
        )

    return merge_alpha(result.astype(np.float32))


def split_channels(image: Any) -> Tuple[Any, Any, Any]:
    """
    Split an image into its red, green and blue planes.

    Grayscale input yields three identical planes.

    Returns:
        Tuple of three L-mode PIL Images (red, green, blue)
    """
    image = normalize_mode(image).convert("RGB")
    red, green, blue = image.split()
    return red, green, blue
