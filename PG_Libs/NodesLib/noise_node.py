"""
Noise Node for Pixel Graph.

Adds seeded noise so repeated passes over unchanged input give identical
output. Change ``seed`` for a different noise pattern.
"""

from dataclasses import dataclass

from PG_Libs.constants import (
    DEFAULT_NOISE_AMOUNT,
    DEFAULT_NOISE_SEED,
    DEFAULT_NOISE_TYPE,
    PIN_IMAGE,
)
from PG_Libs.GraphLib.base_node import BaseNode, NodeConfig, NodeKind
from PG_Libs.ImageEditingLib.compose_ops import add_noise


@dataclass
class NoiseConfig(NodeConfig):
    """Configuration for noise node.

    Attributes:
        noise_type: 'gaussian', 'uniform' or 'salt_pepper'
        amount: Std dev, max offset, or percent of pixels for salt_pepper
        seed: RNG seed
    """
    noise_type: str = DEFAULT_NOISE_TYPE
    amount: float = DEFAULT_NOISE_AMOUNT
    seed: int = DEFAULT_NOISE_SEED


class NoiseNode(BaseNode):
    kind = NodeKind.NOISE
    input_names = (PIN_IMAGE,)
    output_names = (PIN_IMAGE,)
    config_class = NoiseConfig

    def process(self) -> None:
        image = self.require_input(0)
        self.set_output(
            0,
            add_noise(
                image,
                noise_type=self.config.noise_type,
                amount=float(self.config.amount),
                seed=int(self.config.seed),
            ),
        )
