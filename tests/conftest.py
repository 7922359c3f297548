"""
Pytest configuration and shared fixtures for Pixel Graph tests.

This module provides shared test fixtures used across multiple test
modules.
"""

import pytest
from PIL import Image


@pytest.fixture
def rgb_image():
    """A 16x16 mid-gray RGB image."""
    return Image.new("RGB", (16, 16), (100, 100, 100))


@pytest.fixture
def rgba_image():
    """A 16x16 RGBA image with partial transparency."""
    return Image.new("RGBA", (16, 16), (100, 150, 200, 128))


@pytest.fixture
def gray_image():
    """A 16x16 grayscale image."""
    return Image.new("L", (16, 16), 200)


@pytest.fixture
def checker_image():
    """
    A 16x16 black/white checkerboard with 4-pixel squares.

    Useful where a filter must visibly change the image.
    """
    image = Image.new("RGB", (16, 16), (0, 0, 0))
    for y in range(16):
        for x in range(16):
            if (x // 4 + y // 4) % 2 == 0:
                image.putpixel((x, y), (255, 255, 255))
    return image
