"""
Buffer handoff helpers.

Data crossing a connection is always duplicated so that no two nodes
ever hold a reference to the same buffer.
"""

import copy
from typing import Any

import numpy as np
from PIL import Image


def is_empty_buffer(buffer: Any) -> bool:
    """
    Check whether a pin buffer holds no usable data.

    Args:
        buffer: Pillow image, numpy array, any other value, or None

    Returns:
        True for None, zero-area images and zero-size arrays
    """
    if buffer is None:
        return True
    if isinstance(buffer, Image.Image):
        width, height = buffer.size
        return width == 0 or height == 0
    if isinstance(buffer, np.ndarray):
        return buffer.size == 0
    return False


def copy_buffer(buffer: Any) -> Any:
    """
    Return a deep, independent duplicate of a buffer.

    Pillow images and numpy arrays are copied with their own ``copy()``,
    everything else goes through ``copy.deepcopy``.
    """
    if buffer is None:
        return None
    if isinstance(buffer, (Image.Image, np.ndarray)):
        return buffer.copy()
    return copy.deepcopy(buffer)
