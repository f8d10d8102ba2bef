"""Pick which weighted connections the network diagram should draw.

Drawing all 784*64 + 64*32 + 32*10 edges would be unreadable, so each target
neuron only shows its strongest incoming weights.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from mnist_visualizer.model.dense import DimensionMismatchError
from mnist_visualizer.model.forward import ForwardPassResult
from mnist_visualizer.model.network import NetworkParameters


@dataclass(frozen=True)
class Connection:
    source: int
    target: int
    weight: float
    magnitude: float
    source_activation: float
    target_activation: float


def top_connections(
    weights: np.ndarray,
    source_activations: np.ndarray,
    target_activations: np.ndarray,
    top_k: int,
) -> list[Connection]:
    """Return the top_k largest-|weight| incoming connections per target.

    Targets are visited in index order. Within a target, equal magnitudes
    keep ascending source order, so the output is deterministic. When top_k
    exceeds the number of sources every source is returned.
    """
    if top_k < 1:
        raise ValueError(f"top_k must be at least 1, got {top_k}")

    w = np.asarray(weights, dtype=np.float64)
    src = np.asarray(source_activations, dtype=np.float64)
    dst = np.asarray(target_activations, dtype=np.float64)
    if w.ndim != 2:
        raise DimensionMismatchError(f"weights must be 2-D, got shape {w.shape}")
    n_targets, n_sources = w.shape
    if src.shape != (n_sources,) or dst.shape != (n_targets,):
        raise DimensionMismatchError(
            f"activations {src.shape} -> {dst.shape} do not match weight matrix shape {w.shape}"
        )

    magnitudes = np.abs(w)
    keep = min(top_k, n_sources)
    # Stable sort on the negated magnitude: descending, ties by lower index.
    order = np.argsort(-magnitudes, axis=1, kind="stable")[:, :keep]

    connections: list[Connection] = []
    for target in range(n_targets):
        for source in order[target]:
            connections.append(
                Connection(
                    source=int(source),
                    target=target,
                    weight=float(w[target, source]),
                    magnitude=float(magnitudes[target, source]),
                    source_activation=float(src[source]),
                    target_activation=float(dst[target]),
                )
            )
    return connections


def filter_weak_connections(connections: list[Connection], threshold: float) -> list[Connection]:
    """Drop connections whose |weight| is below threshold."""
    return [conn for conn in connections if conn.magnitude >= threshold]


def network_connections(
    result: ForwardPassResult | None,
    params: NetworkParameters,
    max_connections: int,
    weak_threshold: float,
) -> tuple[list[Connection], list[Connection], list[Connection]]:
    """Connections to draw between each pair of adjacent layers.

    Nothing is drawn until the user has put some ink on the canvas.
    """
    if result is None or not np.any(result.inputs > 0):
        return [], [], []

    activations = result.layer_activations()
    per_layer = []
    for i, layer in enumerate(params.layers):
        ranked = top_connections(layer.weights, activations[i], activations[i + 1], max_connections)
        per_layer.append(filter_weak_connections(ranked, weak_threshold))
    return per_layer[0], per_layer[1], per_layer[2]
