"""
Base node for the Pixel Graph dataflow model.

Every node kind declares a fixed set of input and output pin names and a
parameter config dataclass, and implements ``process()`` which reads its
input pins and writes its output pins.

Example:
    class InvertNode(BaseNode):
        kind = "Invert"
        input_names = ("Image",)
        output_names = ("Image",)

        def process(self):
            image = self.require_input(0)
            self.set_output(0, ImageOps.invert(image))
"""

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Type, Union

from PG_Libs import constants
from PG_Libs.GraphLib.errors import NodeProcessingError
from PG_Libs.GraphLib.models import Pin


class NodeKind(str, Enum):
    """Closed set of built-in node kinds."""
    IMAGE_INPUT = constants.NODE_TYPE_IMAGE_INPUT
    OUTPUT = constants.NODE_TYPE_OUTPUT
    BRIGHTNESS_CONTRAST = constants.NODE_TYPE_BRIGHTNESS_CONTRAST
    COLOR_CHANNEL_SPLITTER = constants.NODE_TYPE_CHANNEL_SPLITTER
    BLUR = constants.NODE_TYPE_BLUR
    THRESHOLD = constants.NODE_TYPE_THRESHOLD
    EDGE_DETECTION = constants.NODE_TYPE_EDGE_DETECTION
    BLEND = constants.NODE_TYPE_BLEND
    NOISE = constants.NODE_TYPE_NOISE
    CONVOLUTION = constants.NODE_TYPE_CONVOLUTION


KindLike = Union[NodeKind, str]


def kind_name(kind: KindLike) -> str:
    """Normalize a NodeKind member or plain string to its registry key."""
    if isinstance(kind, NodeKind):
        return kind.value
    return str(kind).strip()


@dataclass
class NodeConfig:
    """Base class for node parameter configs."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NodeConfig":
        """Create from dictionary, ignoring unknown keys."""
        normalized = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**normalized)


class BaseNode(ABC):
    """
    Abstract base class for all nodes.

    Subclasses set ``kind``, ``input_names``, ``output_names`` and
    optionally ``config_class``, and implement ``process()``.

    Attributes:
        id: Graph-wide unique id (-1 until added to a graph)
        name: Display name
        inputs: Ordered input pins
        outputs: Ordered output pins
        dirty: Set on topology or parameter changes, cleared after processing
        last_error: Message from the most recent failed process(), else None
        config: Parameter dataclass instance (None for parameterless kinds)
    """
    kind: KindLike = "Base"
    input_names: Tuple[str, ...] = ()
    output_names: Tuple[str, ...] = ()
    config_class: Optional[Type[NodeConfig]] = None

    def __init__(self, name: Optional[str] = None, config: Optional[NodeConfig] = None):
        self.id = -1
        self.name = name or kind_name(self.kind)
        self.inputs: List[Pin] = [Pin(pin_name) for pin_name in self.input_names]
        self.outputs: List[Pin] = [Pin(pin_name) for pin_name in self.output_names]
        self.dirty = True
        self.last_error: Optional[str] = None
        if config is None and self.config_class is not None:
            config = self.config_class()
        self.config = config

    @abstractmethod
    def process(self) -> None:
        """Read input pins and parameters, write output pins.

        Must be idempotent. Raise ValueError when required input is missing.
        """

    # =========================================================================
    # Pin access
    # =========================================================================

    def input_data(self, index: int) -> Any:
        """Buffer on input pin ``index``, or None."""
        pin = self.inputs[index]
        return pin.data if pin.has_data() else None

    def require_input(self, index: int) -> Any:
        """
        Buffer on input pin ``index``.

        Raises:
            NodeProcessingError: If the pin is empty. Outputs are cleared
                first, as they are for any failing process(). Downstream
                input pins keep their last buffer until new data arrives.
        """
        data = self.input_data(index)
        if data is None:
            self.clear_outputs()
            raise NodeProcessingError(
                self.id, f"{self.name} requires input '{self.inputs[index].name}'"
            )
        return data

    def set_output(self, index: int, buffer: Any) -> None:
        self.outputs[index].data = buffer

    def clear_outputs(self) -> None:
        for pin in self.outputs:
            pin.data = None

    def pin_ids(self) -> List[int]:
        return [pin.id for pin in self.inputs] + [pin.id for pin in self.outputs]

    # =========================================================================
    # Parameter editing hook
    # =========================================================================

    def get_parameters(self) -> Dict[str, Any]:
        """Current parameter values as a dictionary."""
        if self.config is None:
            return {}
        return self.config.to_dict()

    def set_parameters(self, **values: Any) -> None:
        """
        Update parameters and mark the node dirty.

        Unknown names are ignored. Does not trigger evaluation; the caller
        runs a pass when it wants the change reflected downstream.
        """
        if self.config is None:
            return
        merged = self.config.to_dict()
        merged.update(values)
        self.config = self.config.from_dict(merged)
        self.dirty = True

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id} name={self.name!r}>"
