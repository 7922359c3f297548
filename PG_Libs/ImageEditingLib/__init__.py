"""
ImageEditingLib - Image operations behind the node kinds

Pure functions taking and returning Pillow images. Pixel math runs on
numpy arrays.
"""

from PG_Libs.ImageEditingLib.blur_filter import (
    apply_blur,
    apply_box_blur,
    apply_gaussian_blur,
    apply_median_blur,
)
from PG_Libs.ImageEditingLib.tone_ops import (
    apply_brightness_contrast,
    apply_threshold,
    split_channels,
)
from PG_Libs.ImageEditingLib.kernel_filter import (
    apply_kernel,
    detect_edges,
    get_kernel_preset,
    validate_kernel,
)
from PG_Libs.ImageEditingLib.compose_ops import add_noise, blend_images

__all__ = [
    "apply_blur",
    "apply_box_blur",
    "apply_gaussian_blur",
    "apply_median_blur",
    "apply_brightness_contrast",
    "apply_threshold",
    "split_channels",
    "apply_kernel",
    "detect_edges",
    "get_kernel_preset",
    "validate_kernel",
    "add_noise",
    "blend_images",
]
