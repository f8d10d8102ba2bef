"""Reusable math/color helpers for visualization rendering.

These helpers are pure functions (no UI state), which makes them easy
to test and easy to reuse in other visualization modules.
"""

from __future__ import annotations

import math

import numpy as np

from mnist_visualizer.ui.constants import (
    COLOR_BAR_HIGH,
    COLOR_BAR_LOW,
    COLOR_BAR_MEDIUM,
    COLOR_BAR_PREDICTED,
    COLOR_SCENE_BG,
)


def normalize_activations(values: np.ndarray) -> np.ndarray:
    """Linearly rescale values into [0,1] for color mapping.

    A constant vector (including the all-zero output of an empty canvas)
    carries no information, so every entry maps to the neutral 0.5.
    """
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        raise ValueError("cannot normalize an empty activation vector")

    lo = float(np.min(arr))
    hi = float(np.max(arr))
    if hi == lo:
        return np.full(arr.shape, 0.5)
    return (arr - lo) / (hi - lo)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Format float channels in [0,1] as a Tk color string."""
    channels = [int(round(float(np.clip(c, 0.0, 1.0)) * 255)) for c in (r, g, b)]
    return "#{:02x}{:02x}{:02x}".format(*channels)


def activation_color(t: float) -> str:
    """Map a normalized activation onto a dark blue -> red gradient.

    Stops: dark blue (0), cyan (0.25), yellow (0.5), orange (0.75), red (1).
    """
    t = float(np.clip(t, 0.0, 1.0))
    if t < 0.25:
        u = t / 0.25
        return rgb_to_hex(0.1 + u * 0.1, 0.2 + u * 0.5, 0.5 + u * 0.5)
    if t < 0.5:
        u = (t - 0.25) / 0.25
        return rgb_to_hex(0.2 + u * 0.6, 0.7 + u * 0.2, 1.0 - u * 0.5)
    if t < 0.75:
        u = (t - 0.5) / 0.25
        return rgb_to_hex(0.8 + u * 0.2, 0.9 - u * 0.4, 0.5 - u * 0.4)
    u = (t - 0.75) / 0.25
    return rgb_to_hex(1.0, 0.5 - u * 0.2, 0.1 - u * 0.05)


def weight_color(weight: float) -> str:
    """Positive weights run yellow -> red, negative ones cyan -> blue."""
    strength = min(abs(weight), 1.0)
    if weight > 0:
        return rgb_to_hex(1.0, 1.0 - strength * 0.5, 0.1)
    return rgb_to_hex(0.1, 0.5 + strength * 0.5, 1.0)


def connection_width(weight: float, line_thickness: float) -> float:
    """Stroke width for an edge; grows with |weight| up to 2x the thickness."""
    return min(abs(weight) * 3.0 * line_thickness, 2.0 * line_thickness)


def dim_color(hex_color: str, intensity: float, background: str = COLOR_SCENE_BG) -> str:
    """Blend a color toward the background based on intensity in [0,1].

    intensity=0 -> background
    intensity=1 -> original color
    """
    intensity = float(np.clip(intensity, 0.0, 1.0))
    fg = hex_color.lstrip("#")
    bg = background.lstrip("#")
    mixed = []
    for i in (0, 2, 4):
        f = int(fg[i : i + 2], 16)
        b = int(bg[i : i + 2], 16)
        mixed.append(int((b * (1.0 - intensity)) + (f * intensity)))
    return "#{:02x}{:02x}{:02x}".format(*mixed)


def probability_bar_color(probability: float, index: int, prediction: int | None) -> str:
    if index == prediction:
        return COLOR_BAR_PREDICTED
    if probability > 0.5:
        return COLOR_BAR_HIGH
    if probability > 0.1:
        return COLOR_BAR_MEDIUM
    return COLOR_BAR_LOW


def grid_positions(count: int, origin: tuple[float, float, float], spacing: float) -> np.ndarray:
    """Lay out a layer's neurons on a square-ish grid in the y/z plane.

    Returns a (count, 3) array. Rows grow along y, columns along z, and the
    grid is roughly centered on origin.
    """
    cols = math.ceil(math.sqrt(count))
    rows = math.ceil(count / cols)
    idx = np.arange(count)
    col = idx % cols
    row = idx // cols

    positions = np.empty((count, 3), dtype=np.float64)
    positions[:, 0] = origin[0]
    positions[:, 1] = origin[1] + (row - rows / 2.0) * spacing
    positions[:, 2] = origin[2] + (col - cols / 2.0) * spacing
    return positions


def rotate_y(points: np.ndarray, angle: float) -> np.ndarray:
    """Rotate (N, 3) points around the vertical axis by angle radians."""
    c = math.cos(angle)
    s = math.sin(angle)
    rotation = np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])
    return points @ rotation.T


def project_points(
    points: np.ndarray,
    camera_distance: float,
    fov_deg: float,
    width: float,
    height: float,
) -> tuple[np.ndarray, np.ndarray]:
    """Perspective-project (N, 3) world points onto a width x height canvas.

    The camera sits at (0, 0, camera_distance) looking toward the origin.
    Returns (screen_xy, scale) where scale is the per-point pixels-per-unit
    factor, handy for sizing spheres and sorting by depth.
    """
    focal = (height / 2.0) / math.tan(math.radians(fov_deg) / 2.0)
    depth = np.maximum(camera_distance - points[:, 2], 1e-3)
    scale = focal / depth

    screen = np.empty((points.shape[0], 2), dtype=np.float64)
    screen[:, 0] = width / 2.0 + points[:, 0] * scale
    # Canvas y grows downward.
    screen[:, 1] = height / 2.0 - points[:, 1] * scale
    return screen, scale
