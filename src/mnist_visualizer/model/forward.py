"""Forward propagation from a drawn 28x28 grid to class probabilities."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from mnist_visualizer.model.activations import relu, softmax
from mnist_visualizer.model.dense import DimensionMismatchError, dense_layer
from mnist_visualizer.model.network import INPUT_SIZE, NetworkParameters


# Square drawing grid whose flattened size is the network input.
GRID_SIZE = math.isqrt(INPUT_SIZE)
PIXEL_MAX = 255.0


@dataclass(frozen=True)
class ForwardPassResult:
    """Every intermediate vector of one forward pass.

    A new instance is built per pass; arrays are read-only.
    """

    inputs: np.ndarray
    layer1: np.ndarray
    layer2: np.ndarray
    logits: np.ndarray
    probabilities: np.ndarray
    prediction: int

    @property
    def confidence(self) -> float:
        return float(self.probabilities[self.prediction])

    def layer_activations(self) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """Per-layer values shown in the network diagram (output uses probabilities)."""
        return self.inputs, self.layer1, self.layer2, self.probabilities


def normalize_input(input_grid: np.ndarray) -> np.ndarray:
    """Flatten a 28x28 [0,255] grid row-major and scale it into [0,1]."""
    grid = np.asarray(input_grid, dtype=np.float64)
    if grid.shape != (GRID_SIZE, GRID_SIZE):
        raise DimensionMismatchError(
            f"input grid must be {GRID_SIZE}x{GRID_SIZE}, got shape {grid.shape}"
        )
    return grid.reshape(-1) / PIXEL_MAX


def forward_pass(input_grid: np.ndarray, params: NetworkParameters) -> ForwardPassResult:
    """Run the 784 -> 64 -> 32 -> 10 network on one drawn grid."""
    x = normalize_input(input_grid)

    hidden1 = dense_layer(x, params.layer1.weights, params.layer1.biases, relu)
    hidden2 = dense_layer(hidden1.activation, params.layer2.weights, params.layer2.biases, relu)
    # No nonlinearity before softmax.
    logits = dense_layer(hidden2.activation, params.output.weights, params.output.biases)

    probabilities = softmax(logits.activation)
    probabilities.setflags(write=False)
    x.setflags(write=False)

    return ForwardPassResult(
        inputs=x,
        layer1=hidden1.activation,
        layer2=hidden2.activation,
        logits=logits.activation,
        probabilities=probabilities,
        # np.argmax returns the first (lowest) index on ties.
        prediction=int(np.argmax(probabilities)),
    )
