"""Network parameters and their random initialization.

The demo network is never trained. Every session starts from fresh
Xavier/Glorot weights, drawn from an explicit numpy Generator so a seed
reproduces the whole session.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from mnist_visualizer.model.dense import DimensionMismatchError, check_layer_shapes


# Input pixels -> hidden 1 -> hidden 2 -> digit classes.
LAYER_SIZES = (784, 64, 32, 10)
INPUT_SIZE = LAYER_SIZES[0]
NUM_CLASSES = LAYER_SIZES[-1]

BIAS_LIMIT = 0.05


def xavier_limit(input_size: int, output_size: int) -> float:
    """Half-width of the Xavier/Glorot uniform range for one layer."""
    return math.sqrt(6.0 / (input_size + output_size))


def generate_weights(input_size: int, output_size: int, rng: np.random.Generator) -> np.ndarray:
    """Return an (output_size, input_size) matrix drawn from [-limit, limit]."""
    limit = xavier_limit(input_size, output_size)
    return rng.uniform(-limit, limit, size=(output_size, input_size))


def generate_biases(size: int, rng: np.random.Generator) -> np.ndarray:
    """Return small random biases drawn from [-0.05, 0.05]."""
    return rng.uniform(-BIAS_LIMIT, BIAS_LIMIT, size=size)


def _frozen_copy(values: np.ndarray) -> np.ndarray:
    out = np.array(values, dtype=np.float64, copy=True)
    out.setflags(write=False)
    return out


@dataclass(frozen=True)
class LayerParameters:
    """Weights (outputs x inputs) and biases of one dense layer."""

    weights: np.ndarray
    biases: np.ndarray

    def __post_init__(self) -> None:
        # Copy so later edits to the caller's arrays cannot leak in.
        weights = _frozen_copy(self.weights)
        biases = _frozen_copy(self.biases)
        check_layer_shapes(weights, biases)
        object.__setattr__(self, "weights", weights)
        object.__setattr__(self, "biases", biases)

    @property
    def input_size(self) -> int:
        return int(self.weights.shape[1])

    @property
    def output_size(self) -> int:
        return int(self.weights.shape[0])

    @property
    def parameter_count(self) -> int:
        return int(self.weights.size + self.biases.size)


@dataclass(frozen=True)
class NetworkParameters:
    """Parameters of the fixed 784 -> 64 -> 32 -> 10 network.

    Created once per session and shared read-only by every forward pass.
    """

    layer1: LayerParameters
    layer2: LayerParameters
    output: LayerParameters

    def __post_init__(self) -> None:
        actual = (self.layer1.input_size, *(layer.output_size for layer in self.layers))
        if actual != LAYER_SIZES:
            raise DimensionMismatchError(
                f"network layer sizes {actual} do not match expected {LAYER_SIZES}"
            )
        for prev, nxt in zip(self.layers, self.layers[1:]):
            if prev.output_size != nxt.input_size:
                raise DimensionMismatchError(
                    f"layer with {prev.output_size} outputs cannot feed layer with "
                    f"{nxt.input_size} inputs"
                )

    @property
    def layers(self) -> tuple[LayerParameters, LayerParameters, LayerParameters]:
        return self.layer1, self.layer2, self.output

    @property
    def parameter_count(self) -> int:
        return sum(layer.parameter_count for layer in self.layers)


def initialize_network(rng: np.random.Generator) -> NetworkParameters:
    """Draw a fresh set of random network parameters."""
    layers = []
    for input_size, output_size in zip(LAYER_SIZES, LAYER_SIZES[1:]):
        layers.append(
            LayerParameters(
                weights=generate_weights(input_size, output_size, rng),
                biases=generate_biases(output_size, rng),
            )
        )
    return NetworkParameters(*layers)


def format_network_summary(params: NetworkParameters) -> str:
    """Human-readable table of layer shapes, parameter counts and init ranges."""
    names = ("Hidden 1 (ReLU)", "Hidden 2 (ReLU)", "Output (softmax)")
    lines = [f"{'Layer':<18}{'Shape':>12}{'Params':>10}{'Xavier limit':>15}"]
    for name, layer in zip(names, params.layers):
        shape = f"{layer.input_size}->{layer.output_size}"
        limit = xavier_limit(layer.input_size, layer.output_size)
        lines.append(f"{name:<18}{shape:>12}{layer.parameter_count:>10}{limit:>15.5f}")
    lines.append(f"Total parameters: {params.parameter_count}")
    return "\n".join(lines)
