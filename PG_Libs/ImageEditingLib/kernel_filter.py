"""
Kernel filtering and edge detection.

Kernels are applied as correlation (the kernel is not flipped), the usual
convention for image filters. Borders are handled by edge replication.

Example:
    >>> sharpened = apply_kernel(img, get_kernel_preset("sharpen"))
    >>> edges = detect_edges(img, method="sobel")
"""

from typing import Any, List, Sequence

import numpy as np
from PIL import ImageFilter

from PG_Libs.constants import CONVOLUTION_PRESETS, EDGE_METHODS, MAX_KERNEL_SIZE
from PG_Libs.ImageEditingLib.pixel_arrays import (
    merge_alpha,
    normalize_mode,
    split_alpha,
    to_grayscale_array,
)

SOBEL_X = np.array([[-1, 0, 1], [-2, 0, 2], [-1, 0, 1]], dtype=np.float32)
SOBEL_Y = SOBEL_X.T
LAPLACIAN = np.array([[0, 1, 0], [1, -4, 1], [0, 1, 0]], dtype=np.float32)


def validate_kernel(kernel: Sequence[Sequence[float]]) -> np.ndarray:
    """
    Convert a kernel to a float32 array and check its shape.

    Raises:
        ValueError: If the kernel is not square, not odd-sized, empty,
            larger than MAX_KERNEL_SIZE or contains non-finite values
    """
    try:
        array = np.asarray(kernel, dtype=np.float32)
    except (TypeError, ValueError) as e:
        raise ValueError(f"kernel must be a numeric matrix: {e}")

    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        raise ValueError(f"kernel must be square, got shape {array.shape}")

    size = array.shape[0]
    if size == 0 or size % 2 == 0 or size > MAX_KERNEL_SIZE:
        raise ValueError(f"kernel size must be odd and 1-{MAX_KERNEL_SIZE}, got {size}")

    if not np.all(np.isfinite(array)):
        raise ValueError("kernel contains non-finite values")

    return array


def get_kernel_preset(name: str) -> List[List[float]]:
    """
    Look up a named kernel.

    Raises:
        ValueError: Unknown preset name
    """
    key = str(name).lower()
    if key not in CONVOLUTION_PRESETS:
        raise ValueError(
            f"Unknown kernel preset: {name}. "
            f"Valid presets: {', '.join(sorted(CONVOLUTION_PRESETS))}"
        )
    return [list(row) for row in CONVOLUTION_PRESETS[key]]


def correlate2d(plane: np.ndarray, kernel: np.ndarray) -> np.ndarray:
    """Correlate a 2D float array with a square kernel, replicating edges."""
    pad = kernel.shape[0] // 2
    padded = np.pad(plane, pad, mode="edge")
    height, width = plane.shape
    result = np.zeros_like(plane, dtype=np.float32)

    for dy in range(kernel.shape[0]):
        for dx in range(kernel.shape[1]):
            weight = kernel[dy, dx]
            if weight:
                result += weight * padded[dy:dy + height, dx:dx + width]

    return result


def apply_kernel(image: Any, kernel: Sequence[Sequence[float]]) -> Any:
    """
    Filter every color channel with ``kernel``; alpha is preserved.

    Raises:
        ValueError: Invalid kernel
        TypeError: If image not PIL Image
    """
    kernel_array = validate_kernel(kernel)
    color, alpha = split_alpha(image)

    if color.ndim == 2:
        filtered = correlate2d(color, kernel_array)
    else:
        filtered = np.dstack([
            correlate2d(color[..., channel], kernel_array)
            for channel in range(color.shape[2])
        ])

    return merge_alpha(filtered, alpha)


def detect_edges(image: Any, method: str = "sobel") -> Any:
    """
    Detect edges on the luminance of an image.

    Methods:
        - sobel: Gradient magnitude from horizontal and vertical Sobel kernels
        - laplacian: Absolute 4-neighbour Laplacian
        - find_edges: Pillow's FIND_EDGES filter

    Returns:
        Grayscale (L) PIL Image

    Raises:
        ValueError: Unknown method
        TypeError: If image not PIL Image
    """
    method = str(method).lower()

    if method == "sobel":
        gray = to_grayscale_array(image)
        magnitude = np.hypot(correlate2d(gray, SOBEL_X), correlate2d(gray, SOBEL_Y))
        return merge_alpha(magnitude)
    elif method == "laplacian":
        gray = to_grayscale_array(image)
        return merge_alpha(np.abs(correlate2d(gray, LAPLACIAN)))
    elif method == "find_edges":
        return normalize_mode(image).convert("L").filter(ImageFilter.FIND_EDGES)

    raise ValueError(
        f"Unknown edge method: {method}. "
        f"Valid methods: {', '.join(EDGE_METHODS)}"
    )
