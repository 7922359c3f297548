"""
Constants and configuration values for Pixel Graph.

This module centralizes node type names, pin names and default
parameter values used throughout the library.
"""

# Node type names (registry keys)
NODE_TYPE_IMAGE_INPUT = "Image Input"
NODE_TYPE_OUTPUT = "Output"
NODE_TYPE_BRIGHTNESS_CONTRAST = "Brightness/Contrast"
NODE_TYPE_CHANNEL_SPLITTER = "Color Channel Splitter"
NODE_TYPE_BLUR = "Blur"
NODE_TYPE_THRESHOLD = "Threshold"
NODE_TYPE_EDGE_DETECTION = "Edge Detection"
NODE_TYPE_BLEND = "Blend"
NODE_TYPE_NOISE = "Noise"
NODE_TYPE_CONVOLUTION = "Convolution"

# Pin names
PIN_IMAGE = "Image"
PIN_IMAGE_A = "Image A"
PIN_IMAGE_B = "Image B"
PIN_RED = "Red"
PIN_GREEN = "Green"
PIN_BLUE = "Blue"

# First id handed out by a fresh graph
INITIAL_ID = 0

# Brightness / contrast
DEFAULT_BRIGHTNESS = 0.0
DEFAULT_CONTRAST = 1.0
MIN_BRIGHTNESS = -255.0
MAX_BRIGHTNESS = 255.0
MIN_CONTRAST = 0.0
MAX_CONTRAST = 3.0

# Blur
DEFAULT_BLUR_TYPE = "gaussian"
DEFAULT_BLUR_RADIUS = 2.0
BLUR_TYPES = ("gaussian", "box", "median")

# Threshold
DEFAULT_THRESHOLD = 128
DEFAULT_THRESHOLD_MAX_VALUE = 255
DEFAULT_THRESHOLD_TYPE = "binary"
THRESHOLD_TYPES = ("binary", "binary_inv", "trunc", "tozero", "tozero_inv")

# Edge detection
DEFAULT_EDGE_METHOD = "sobel"
EDGE_METHODS = ("sobel", "laplacian", "find_edges")

# Blend
DEFAULT_BLEND_ALPHA = 0.5
DEFAULT_BLEND_MODE = "normal"
BLEND_MODES = ("normal", "add", "multiply", "screen", "difference")

# Noise
DEFAULT_NOISE_TYPE = "gaussian"
DEFAULT_NOISE_AMOUNT = 25.0
DEFAULT_NOISE_SEED = 0
NOISE_TYPES = ("gaussian", "salt_pepper", "uniform")

# Convolution
DEFAULT_CONVOLUTION_PRESET = "sharpen"
CONVOLUTION_PRESETS = {
    "identity": [[0, 0, 0], [0, 1, 0], [0, 0, 0]],
    "sharpen": [[0, -1, 0], [-1, 5, -1], [0, -1, 0]],
    "box": [[1 / 9, 1 / 9, 1 / 9], [1 / 9, 1 / 9, 1 / 9], [1 / 9, 1 / 9, 1 / 9]],
    "emboss": [[-2, -1, 0], [-1, 1, 1], [0, 1, 2]],
    "outline": [[-1, -1, -1], [-1, 8, -1], [-1, -1, -1]],
}
MAX_KERNEL_SIZE = 31

# Supported image file formats for the Image Input node
SUPPORTED_STANDARD_IMAGES = {".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tiff", ".webp"}
