"""Single dense (fully connected) layer evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np


class DimensionMismatchError(ValueError):
    """Raised when matrix/vector shapes do not line up.

    This is a programming error on the caller's side, so nothing here tries
    to recover from it by padding or truncating.
    """


ActivationFn = Callable[[np.ndarray], np.ndarray]


@dataclass(frozen=True)
class DenseOutput:
    """Both sides of the activation function for one layer."""

    pre_activation: np.ndarray
    activation: np.ndarray


def _read_only(values: np.ndarray) -> np.ndarray:
    values.setflags(write=False)
    return values


def check_layer_shapes(weights: np.ndarray, biases: np.ndarray, input_size: int | None = None) -> None:
    """Validate a weight matrix / bias vector pair.

    weights must be 2-D (outputs x inputs), biases 1-D with one entry per
    output row. When input_size is given the column count must match it.
    """
    if weights.ndim != 2:
        raise DimensionMismatchError(f"weights must be 2-D, got shape {weights.shape}")
    if biases.shape != (weights.shape[0],):
        raise DimensionMismatchError(
            f"biases shape {biases.shape} does not match {weights.shape[0]} weight rows"
        )
    if input_size is not None and weights.shape[1] != input_size:
        raise DimensionMismatchError(
            f"weight rows have length {weights.shape[1]}, expected input size {input_size}"
        )


def dense_layer(
    inputs: np.ndarray,
    weights: np.ndarray,
    biases: np.ndarray,
    activation_fn: ActivationFn | None = None,
) -> DenseOutput:
    """Compute biases + weights @ inputs, then the optional activation.

    Without an activation function the activation equals the pre-activation
    (used for the logits layer, which feeds softmax directly).
    """
    x = np.asarray(inputs, dtype=np.float64)
    w = np.asarray(weights, dtype=np.float64)
    b = np.asarray(biases, dtype=np.float64)

    check_layer_shapes(w, b)
    if x.shape != (w.shape[1],):
        raise DimensionMismatchError(
            f"input shape {x.shape} does not match weight matrix shape {w.shape}"
        )

    pre_activation = b + w @ x
    if activation_fn is None:
        activation = pre_activation.copy()
    else:
        activation = np.asarray(activation_fn(pre_activation), dtype=np.float64)

    return DenseOutput(
        pre_activation=_read_only(pre_activation),
        activation=_read_only(activation),
    )
