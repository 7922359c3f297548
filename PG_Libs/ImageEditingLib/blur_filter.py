"""
Blur Filter Operations.

Provides blur algorithms used by the Blur node:
- Gaussian blur: Natural smooth blur with circular falloff
- Box blur: Simple averaging blur
- Median blur: Noise-removing rank filter that keeps edges

Example:
    >>> from PIL import Image
    >>> img = Image.open("photo.jpg")
    >>>
    >>> blurred = apply_gaussian_blur(img, radius=10)
    >>> boxed = apply_blur(img, "box", radius=3)
"""

from typing import Any

from PIL import ImageFilter

from PG_Libs.constants import BLUR_TYPES


def _ensure_image(image: Any) -> Any:
    if not hasattr(image, "filter"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")
    if image.mode == "P":
        return image.convert("RGB")
    return image


# ============================================================================
# Gaussian Blur
# ============================================================================

def apply_gaussian_blur(
    image: Any,
    radius: float = 5.0,
) -> Any:
    """
    Apply Gaussian blur to image.

    Args:
        image: PIL Image
        radius: Blur radius in pixels (0 < radius <= 100)

    Returns:
        Blurred PIL Image

    Raises:
        ValueError: If radius <= 0 or > 100
        TypeError: If image not PIL Image
    """
    image = _ensure_image(image)

    if not (0 < radius <= 100):
        raise ValueError(f"radius must be 0 < r <= 100, got {radius}")

    return image.filter(ImageFilter.GaussianBlur(radius=radius))


# ============================================================================
# Box Blur
# ============================================================================

def apply_box_blur(
    image: Any,
    kernel_size: int = 3,
) -> Any:
    """
    Apply box blur (averaging) to image.

    Args:
        image: PIL Image
        kernel_size: Size of blur kernel (odd, 1-101); even sizes are bumped up

    Returns:
        Blurred PIL Image

    Raises:
        ValueError: If kernel_size < 1 or > 101
        TypeError: If image not PIL Image
    """
    image = _ensure_image(image)

    if kernel_size % 2 == 0:
        kernel_size += 1

    if kernel_size < 1 or kernel_size > 101:
        raise ValueError(f"kernel_size must be 1-101 and odd, got {kernel_size}")

    return image.filter(ImageFilter.BoxBlur(kernel_size // 2))  # PIL uses radius


# ============================================================================
# Median Blur
# ============================================================================

def apply_median_blur(
    image: Any,
    size: int = 3,
) -> Any:
    """
    Apply a median filter.

    Args:
        image: PIL Image
        size: Window size (odd, 1-15); even sizes are bumped up

    Raises:
        ValueError: If size < 1 or > 15
        TypeError: If image not PIL Image
    """
    image = _ensure_image(image)

    if size % 2 == 0:
        size += 1

    if size < 1 or size > 15:
        raise ValueError(f"size must be 1-15 and odd, got {size}")

    return image.filter(ImageFilter.MedianFilter(size))


def apply_blur(image: Any, blur_type: str = "gaussian", radius: float = 2.0) -> Any:
    """
    Apply the named blur with a single radius parameter.

    The radius maps to a kernel of ``2 * radius + 1`` for box and median.

    Raises:
        ValueError: Unknown blur_type or invalid radius
    """
    blur_type = str(blur_type).lower()

    if blur_type == "gaussian":
        return apply_gaussian_blur(image, float(radius))
    elif blur_type == "box":
        return apply_box_blur(image, 2 * int(round(radius)) + 1)
    elif blur_type == "median":
        return apply_median_blur(image, 2 * int(round(radius)) + 1)

    raise ValueError(
        f"Unknown blur_type: {blur_type}. "
        f"Valid types: {', '.join(BLUR_TYPES)}"
    )
