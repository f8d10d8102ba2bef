"""Perspective view of the network: neurons colored by activation, strongest edges."""

from __future__ import annotations

import tkinter as tk

import numpy as np

from mnist_visualizer.model.forward import ForwardPassResult
from mnist_visualizer.model.network import NetworkParameters
from mnist_visualizer.ui.connections import network_connections
from mnist_visualizer.ui.constants import (
    CAMERA_DISTANCE,
    CAMERA_FOV_DEG,
    COLOR_INK,
    COLOR_SCENE_BG,
    COLOR_SUB,
    LAYER_LAYOUT,
    NEURON_RADIUS,
    NEURON_SPACING,
)
from mnist_visualizer.ui.render import (
    activation_color,
    connection_width,
    dim_color,
    grid_positions,
    normalize_activations,
    project_points,
    rotate_y,
    weight_color,
)
from mnist_visualizer.ui.settings import VisualizationSettings


# Distance below a layer's origin where its label is placed.
LABEL_DROP = 3.0


def layer_world_positions() -> list[np.ndarray]:
    """World-space neuron positions for every layer, in layer order."""
    return [grid_positions(count, origin, NEURON_SPACING) for _label, count, origin in LAYER_LAYOUT]


def layer_intensities(result: ForwardPassResult | None) -> list[tuple[np.ndarray, bool]]:
    """Normalized neuron intensities per layer and whether the layer is active.

    A layer is active when at least one of its raw values is positive.
    """
    out: list[tuple[np.ndarray, bool]] = []
    for i, (_label, count, _origin) in enumerate(LAYER_LAYOUT):
        if result is None:
            out.append((np.zeros(count), False))
            continue
        values = result.layer_activations()[i]
        out.append((normalize_activations(values), bool(np.any(values > 0))))
    return out


def render_network(
    canvas: tk.Canvas,
    result: ForwardPassResult | None,
    params: NetworkParameters,
    settings: VisualizationSettings,
    angle: float,
    world_positions: list[np.ndarray] | None = None,
) -> None:
    """Redraw the whole scene rotated by angle radians around the y axis."""
    canvas.delete("all")
    width = max(canvas.winfo_width(), 800)
    height = max(canvas.winfo_height(), 360)
    canvas.create_rectangle(0, 0, width, height, fill=COLOR_SCENE_BG, outline="")

    if world_positions is None:
        world_positions = layer_world_positions()

    screen: list[np.ndarray] = []
    scales: list[np.ndarray] = []
    depths: list[np.ndarray] = []
    for positions in world_positions:
        rotated = rotate_y(positions, angle)
        xy, scale = project_points(rotated, CAMERA_DISTANCE, CAMERA_FOV_DEG, width, height)
        screen.append(xy)
        scales.append(scale)
        depths.append(rotated[:, 2])

    # Edges go first so neurons are drawn on top of them.
    per_layer = network_connections(result, params, settings.max_connections, settings.weak_threshold)
    for li, connections in enumerate(per_layer):
        src_xy = screen[li]
        dst_xy = screen[li + 1]
        for conn in connections:
            color = dim_color(weight_color(conn.weight), 0.25 + 0.75 * min(conn.magnitude, 1.0))
            canvas.create_line(
                float(src_xy[conn.source, 0]),
                float(src_xy[conn.source, 1]),
                float(dst_xy[conn.target, 0]),
                float(dst_xy[conn.target, 1]),
                fill=color,
                width=max(connection_width(conn.weight, settings.line_thickness), 0.5),
            )

    # Paint neurons far-to-near so closer spheres overlap farther ones.
    neurons = []
    for li, (intensity, active) in enumerate(layer_intensities(result)):
        for ni in range(len(intensity)):
            neurons.append((float(depths[li][ni]), li, ni, float(intensity[ni]), active))
    neurons.sort(key=lambda item: item[0])

    for _depth, li, ni, intensity, active in neurons:
        color = activation_color(intensity)
        if active:
            size = 1.0 + intensity * 0.3
        else:
            size = 0.8
            color = dim_color(color, 0.35)
        r = NEURON_RADIUS * float(scales[li][ni]) * size
        x = float(screen[li][ni, 0])
        y = float(screen[li][ni, 1])
        canvas.create_oval(x - r, y - r, x + r, y + r, fill=color, outline="")

    for (label, _count, origin) in LAYER_LAYOUT:
        anchor = rotate_y(np.array([[origin[0], origin[1] - LABEL_DROP, origin[2]]]), angle)
        xy, _scale = project_points(anchor, CAMERA_DISTANCE, CAMERA_FOV_DEG, width, height)
        canvas.create_text(
            float(xy[0, 0]),
            float(xy[0, 1]),
            text=label,
            font=("Helvetica", 10, "bold"),
            fill=COLOR_INK,
        )

    status = "Neural network is processing your drawing" if result is not None else "Waiting for input..."
    canvas.create_text(width / 2.0, 14, text=status, font=("Helvetica", 10), fill=COLOR_SUB)
    canvas.create_text(
        12,
        height - 12,
        anchor="sw",
        text="Neurons: blue = low, red = high activation   Edges: warm = positive, cool = negative weight",
        font=("Helvetica", 9),
        fill=COLOR_SUB,
    )
