"""
Compositing and noise operations.

Functions:
    blend_images: Mix two images with a blend mode and alpha
    add_noise: Add seeded Gaussian, uniform or salt-and-pepper noise
"""

from typing import Any, Optional

import numpy as np
from PIL import Image

from PG_Libs.constants import BLEND_MODES, NOISE_TYPES
from PG_Libs.ImageEditingLib.pixel_arrays import merge_alpha, normalize_mode, split_alpha


def _match_images(base: Any, overlay: Any):
    base = normalize_mode(base)
    overlay = normalize_mode(overlay)

    mode = "RGBA" if "RGBA" in (base.mode, overlay.mode) else "RGB"
    if base.mode == "L" and overlay.mode == "L":
        mode = "L"

    base = base.convert(mode)
    overlay = overlay.convert(mode)
    if overlay.size != base.size:
        overlay = overlay.resize(base.size, Image.Resampling.LANCZOS)
    return base, overlay


def blend_images(
    base: Any,
    overlay: Any,
    alpha: float = 0.5,
    mode: str = "normal",
) -> Any:
    """
    Blend ``overlay`` onto ``base``.

    The overlay is resized to the base size when they differ. The result is
    ``base * (1 - alpha) + mode(base, overlay) * alpha`` computed in 0-1 space.

    Modes:
        - normal: overlay
        - add: min(base + overlay, 1)
        - multiply: base * overlay
        - screen: 1 - (1 - base) * (1 - overlay)
        - difference: abs(base - overlay)

    Raises:
        ValueError: If alpha outside 0-1 or unknown mode
        TypeError: If inputs not PIL Images
    """
    if not (0.0 <= alpha <= 1.0):
        raise ValueError(f"alpha must be 0-1, got {alpha}")

    base, overlay = _match_images(base, overlay)
    a = np.asarray(base, dtype=np.float32) / 255.0
    b = np.asarray(overlay, dtype=np.float32) / 255.0
    mode = str(mode).lower()

    if mode == "normal":
        mixed = b
    elif mode == "add":
        mixed = np.minimum(a + b, 1.0)
    elif mode == "multiply":
        mixed = a * b
    elif mode == "screen":
        mixed = 1.0 - (1.0 - a) * (1.0 - b)
    elif mode == "difference":
        mixed = np.abs(a - b)
    else:
        raise ValueError(
            f"Unknown blend mode: {mode}. "
            f"Valid modes: {', '.join(BLEND_MODES)}"
        )

    result = a * (1.0 - alpha) + mixed * alpha
    return merge_alpha(result * 255.0)


def add_noise(
    image: Any,
    noise_type: str = "gaussian",
    amount: float = 25.0,
    seed: Optional[int] = 0,
) -> Any:
    """
    Add noise to the color channels of an image; alpha is preserved.

    Args:
        image: PIL Image
        noise_type: 'gaussian' (amount = std dev), 'uniform' (amount = max
            offset) or 'salt_pepper' (amount = percent of pixels, 0-100)
        amount: Noise strength, >= 0
        seed: RNG seed; the same seed always yields the same noise

    Raises:
        ValueError: Unknown noise_type or invalid amount
        TypeError: If image not PIL Image
    """
    if amount < 0:
        raise ValueError(f"amount must be >= 0, got {amount}")

    color, alpha = split_alpha(image)
    rng = np.random.default_rng(seed)
    noise_type = str(noise_type).lower()

    if noise_type == "gaussian":
        noisy = color + rng.normal(0.0, amount, color.shape)
    elif noise_type == "uniform":
        noisy = color + rng.uniform(-amount, amount, color.shape)
    elif noise_type == "salt_pepper":
        if amount > 100:
            raise ValueError(f"salt_pepper amount must be 0-100 percent, got {amount}")
        plane_shape = color.shape[:2]
        draw = rng.random(plane_shape)
        fraction = amount / 100.0
        noisy = color.copy()
        noisy[draw < fraction / 2] = 0
        noisy[(draw >= fraction / 2) & (draw < fraction)] = 255
    else:
        raise ValueError(
            f"Unknown noise_type: {noise_type}. "
            f"Valid types: {', '.join(NOISE_TYPES)}"
        )

    return merge_alpha(noisy, alpha)
