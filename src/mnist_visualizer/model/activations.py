"""Activation functions used by the dense layers."""

from __future__ import annotations

import numpy as np


def relu(x: np.ndarray | float) -> np.ndarray:
    """Return max(0, x), elementwise for arrays."""
    return np.maximum(x, 0.0)


def softmax(logits: np.ndarray) -> np.ndarray:
    """Convert logits into a probability distribution.

    The maximum logit is subtracted before exponentiating. Large logits would
    otherwise overflow to inf, and very negative ones would all underflow to
    zero and leave a 0/0 division.
    """
    values = np.asarray(logits, dtype=np.float64)
    if values.ndim != 1 or values.size == 0:
        raise ValueError("softmax needs a non-empty 1-D sequence of logits")

    exps = np.exp(values - np.max(values))
    return exps / np.sum(exps)
