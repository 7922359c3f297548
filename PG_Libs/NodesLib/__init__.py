"""
Pixel Graph Nodes Library.

This module contains all node kinds for the Pixel Graph dataflow system.
Each node declares its pins, holds a parameter config, and implements
``process()`` on top of ImageEditingLib.

Modules:
    image_input_node: Source node providing an image
    output_node: Sink node holding the final image
    brightness_contrast_node: Linear brightness/contrast adjustment
    channel_splitter_node: Red/green/blue plane splitter
    blur_node: Gaussian, box and median blur
    threshold_node: Luminance thresholding
    edge_detection_node: Sobel, Laplacian and FIND_EDGES
    blend_node: Two-input blending
    noise_node: Seeded noise generation
    convolution_node: Custom and preset kernels
"""

from PG_Libs.NodesLib.image_input_node import (
    ImageInputConfig,
    ImageInputNode,
    get_supported_image_formats,
    is_supported_format,
)
from PG_Libs.NodesLib.output_node import OutputNode
from PG_Libs.NodesLib.brightness_contrast_node import (
    BrightnessContrastConfig,
    BrightnessContrastNode,
)
from PG_Libs.NodesLib.channel_splitter_node import ColorChannelSplitterNode
from PG_Libs.NodesLib.blur_node import BlurNodeConfig, BlurNode
from PG_Libs.NodesLib.threshold_node import ThresholdConfig, ThresholdNode
from PG_Libs.NodesLib.edge_detection_node import EdgeDetectionConfig, EdgeDetectionNode
from PG_Libs.NodesLib.blend_node import BlendConfig, BlendNode
from PG_Libs.NodesLib.noise_node import NoiseConfig, NoiseNode
from PG_Libs.NodesLib.convolution_node import ConvolutionConfig, ConvolutionNode

__all__ = [
    "ImageInputConfig",
    "ImageInputNode",
    "get_supported_image_formats",
    "is_supported_format",
    "OutputNode",
    "BrightnessContrastConfig",
    "BrightnessContrastNode",
    "ColorChannelSplitterNode",
    "BlurNodeConfig",
    "BlurNode",
    "ThresholdConfig",
    "ThresholdNode",
    "EdgeDetectionConfig",
    "EdgeDetectionNode",
    "BlendConfig",
    "BlendNode",
    "NoiseConfig",
    "NoiseNode",
    "ConvolutionConfig",
    "ConvolutionNode",
]
