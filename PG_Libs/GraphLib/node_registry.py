"""
Node Registry and Factory.

This module provides a centralized registry for node kinds. It enables
registration, lookup and construction of nodes by kind name, and is the
factory used by ``Graph.add_node``.

Classes:
    NodeRegistry: Registry mapping kind names to node classes

Functions:
    get_default_registry: Get the global default registry (singleton)
    register_default_nodes: Register all built-in node kinds
    register_node: Class decorator registering a node kind
"""

from typing import Any, Callable, Dict, List, Optional, Type
import logging

from PG_Libs.GraphLib.base_node import BaseNode, KindLike, NodeKind, kind_name

logger = logging.getLogger(__name__)


class NodeRegistry:
    """
    Registry for node kinds.

    Example:
        >>> registry = NodeRegistry()
        >>> registry.register("Blur", BlurNode, tags=["filter"])
        >>> node = registry.create("Blur")
        >>> registry.create("Nope") is None
        True
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._node_classes: Dict[str, Type[BaseNode]] = {}
        self._node_metadata: Dict[str, Dict[str, Any]] = {}

    def register(
        self,
        node_type: KindLike,
        node_class: Type[BaseNode],
        description: str = "",
        tags: Optional[List[str]] = None,
    ) -> None:
        """
        Register a node class under a kind name.

        Args:
            node_type: NodeKind member or unique kind name
            node_class: BaseNode subclass constructed by ``create``
            description: Human-readable description of the node
            tags: Optional list of tags for categorization (e.g., ["input", "image"])

        Raises:
            ValueError: If node_type is empty or node_class is not a BaseNode subclass
            RuntimeError: If node_type is already registered
        """
        node_type = kind_name(node_type)

        if not node_type:
            raise ValueError("node_type cannot be empty")

        if not (isinstance(node_class, type) and issubclass(node_class, BaseNode)):
            raise ValueError(f"node_class must be a BaseNode subclass, got {node_class!r}")

        if node_type in self._node_classes:
            raise RuntimeError(
                f"Node type '{node_type}' is already registered. "
                f"Use unregister() first to replace it."
            )

        self._node_classes[node_type] = node_class
        self._node_metadata[node_type] = {
            "description": str(description),
            "input_count": len(node_class.input_names),
            "output_count": len(node_class.output_names),
            "tags": list(tags) if tags else [],
        }

        logger.debug(f"Registered node type: {node_type}")

    def unregister(self, node_type: KindLike) -> bool:
        """
        Unregister a node kind.

        Returns:
            True if unregistered, False if node_type was not registered
        """
        node_type = kind_name(node_type)

        if node_type in self._node_classes:
            del self._node_classes[node_type]
            del self._node_metadata[node_type]
            logger.debug(f"Unregistered node type: {node_type}")
            return True

        return False

    def has_node_type(self, node_type: KindLike) -> bool:
        return kind_name(node_type) in self._node_classes

    def get_node_class(self, node_type: KindLike) -> Type[BaseNode]:
        """
        Get the class registered for a node kind.

        Raises:
            KeyError: If node_type is not registered
        """
        node_type = kind_name(node_type)

        if node_type not in self._node_classes:
            available = ", ".join(self.list_node_types())
            raise KeyError(
                f"No node registered for node type '{node_type}'. "
                f"Available types: {available}"
            )

        return self._node_classes[node_type]

    def create(self, node_type: KindLike, **kwargs: Any) -> Optional[BaseNode]:
        """
        Construct a fresh node of the given kind.

        Unknown kinds yield None rather than raising, so callers must check
        for absence.

        Args:
            node_type: Kind to construct
            **kwargs: Passed through to the node constructor

        Returns:
            New node with unassigned ids, or None
        """
        name = kind_name(node_type)
        node_class = self._node_classes.get(name)
        if node_class is None:
            logger.debug(f"Unknown node type requested: {name}")
            return None
        return node_class(**kwargs)

    def list_node_types(self) -> List[str]:
        """Sorted list of registered kind names."""
        return sorted(list(self._node_classes.keys()))

    def get_metadata(self, node_type: KindLike) -> Dict[str, Any]:
        """
        Get metadata for a node kind.

        Returns:
            Dictionary with description, input_count, output_count, tags

        Raises:
            KeyError: If node_type is not registered
        """
        node_type = kind_name(node_type)

        if node_type not in self._node_metadata:
            raise KeyError(f"No metadata for node type: {node_type}")

        return dict(self._node_metadata[node_type])

    def get_all_metadata(self) -> Dict[str, Dict[str, Any]]:
        return {
            node_type: dict(meta)
            for node_type, meta in self._node_metadata.items()
        }

    def filter_by_tag(self, tag: str) -> List[str]:
        """Sorted list of kind names carrying ``tag`` (case-insensitive)."""
        tag = str(tag).strip().lower()
        return sorted([
            node_type
            for node_type, meta in self._node_metadata.items()
            if tag in [t.lower() for t in meta.get("tags", [])]
        ])

    def clear(self) -> None:
        """Clear all registered node kinds. Use with caution."""
        self._node_classes.clear()
        self._node_metadata.clear()
        logger.warning("Node registry cleared")


# Global singleton registry
_default_registry: Optional[NodeRegistry] = None


def get_default_registry() -> NodeRegistry:
    """
    Get the global default registry (singleton).

    Creates the registry on first call and registers the built-in kinds.
    """
    global _default_registry

    if _default_registry is None:
        _default_registry = NodeRegistry()
        register_default_nodes(_default_registry)

    return _default_registry


def register_default_nodes(registry: NodeRegistry) -> None:
    """
    Register every built-in node kind.

    Raises:
        RuntimeError: If a NodeKind member was left without a node class
    """
    from PG_Libs.NodesLib.image_input_node import ImageInputNode
    from PG_Libs.NodesLib.output_node import OutputNode
    from PG_Libs.NodesLib.brightness_contrast_node import BrightnessContrastNode
    from PG_Libs.NodesLib.channel_splitter_node import ColorChannelSplitterNode
    from PG_Libs.NodesLib.blur_node import BlurNode
    from PG_Libs.NodesLib.threshold_node import ThresholdNode
    from PG_Libs.NodesLib.edge_detection_node import EdgeDetectionNode
    from PG_Libs.NodesLib.blend_node import BlendNode
    from PG_Libs.NodesLib.noise_node import NoiseNode
    from PG_Libs.NodesLib.convolution_node import ConvolutionNode

    registry.register(
        NodeKind.IMAGE_INPUT,
        ImageInputNode,
        description="Provide a loaded image to downstream nodes",
        tags=["input", "image", "source"],
    )
    registry.register(
        NodeKind.OUTPUT,
        OutputNode,
        description="Hold the final image of the pipeline",
        tags=["output", "image", "sink"],
    )
    registry.register(
        NodeKind.BRIGHTNESS_CONTRAST,
        BrightnessContrastNode,
        description="Scale contrast and offset brightness",
        tags=["processing", "color", "filter"],
    )
    registry.register(
        NodeKind.COLOR_CHANNEL_SPLITTER,
        ColorChannelSplitterNode,
        description="Split an image into red, green and blue planes",
        tags=["processing", "color", "channel"],
    )
    registry.register(
        NodeKind.BLUR,
        BlurNode,
        description="Apply blur effects (Gaussian, Box, Median)",
        tags=["processing", "blur", "filter"],
    )
    registry.register(
        NodeKind.THRESHOLD,
        ThresholdNode,
        description="Threshold the grayscale intensity of an image",
        tags=["processing", "filter"],
    )
    registry.register(
        NodeKind.EDGE_DETECTION,
        EdgeDetectionNode,
        description="Detect edges (Sobel, Laplacian, Find Edges)",
        tags=["processing", "filter", "edges"],
    )
    registry.register(
        NodeKind.BLEND,
        BlendNode,
        description="Blend two images with a blend mode and alpha",
        tags=["processing", "composition"],
    )
    registry.register(
        NodeKind.NOISE,
        NoiseNode,
        description="Add seeded Gaussian, uniform or salt-and-pepper noise",
        tags=["processing", "noise", "filter"],
    )
    registry.register(
        NodeKind.CONVOLUTION,
        ConvolutionNode,
        description="Convolve with a custom or preset kernel",
        tags=["processing", "filter", "kernel"],
    )

    missing = [kind.value for kind in NodeKind if not registry.has_node_type(kind)]
    if missing:
        raise RuntimeError(f"No node class registered for kinds: {', '.join(missing)}")

    logger.info("Registered default node types")


def register_node(
    node_type: KindLike,
    description: str = "",
    tags: Optional[List[str]] = None,
    registry: Optional[NodeRegistry] = None,
) -> Callable[[Type[BaseNode]], Type[BaseNode]]:
    """
    Class decorator registering a node kind.

    Usage:
        >>> @register_node("Invert", description="Invert colors", tags=["custom"])
        ... class InvertNode(BaseNode):
        ...     ...

    Args:
        node_type: Kind name
        description: Human-readable description
        tags: Optional categorization tags
        registry: Target registry (default: the global registry)
    """
    def decorator(node_class: Type[BaseNode]) -> Type[BaseNode]:
        target = registry if registry is not None else get_default_registry()

        try:
            target.register(node_type, node_class, description=description, tags=tags or [])
        except RuntimeError:
            logger.debug(f"Node type '{kind_name(node_type)}' already registered, skipping")

        return node_class

    return decorator
