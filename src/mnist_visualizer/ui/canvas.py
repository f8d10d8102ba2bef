"""Canvas and drawing-buffer helpers for the drawing panel."""

from __future__ import annotations

import math
import tkinter as tk

import numpy as np

from mnist_visualizer.ui.constants import COLOR_GRID_LINE, COLOR_PAPER


PIXEL_MAX = 255.0
# Fraction of the radial falloff added per stamp.
BRUSH_OPACITY = 0.8


def build_brush(brush_size: int) -> list[tuple[int, int, float]]:
    """Build a soft round brush kernel.

    Each tuple is (row_offset, col_offset, paint_strength). Strength falls
    off linearly with distance from the center and reaches zero one cell
    past brush_size; zero-strength cells are left out.
    """
    brush: list[tuple[int, int, float]] = []
    for dr in range(-brush_size, brush_size + 1):
        for dc in range(-brush_size, brush_size + 1):
            distance = math.sqrt(dr * dr + dc * dc)
            strength = max(0.0, PIXEL_MAX * (1.0 - distance / (brush_size + 1))) * BRUSH_OPACITY
            if strength > 0.0:
                brush.append((dr, dc, strength))
    return brush


def paint_brush_stamp(
    draw_buffer: np.ndarray,
    row: int,
    col: int,
    brush: list[tuple[int, int, float]],
) -> None:
    """Paint a soft brush stamp into draw_buffer centered at (row, col)."""
    rows, cols = draw_buffer.shape
    if row < 0 or row >= rows or col < 0 or col >= cols:
        return

    for dr, dc, strength in brush:
        rr = row + dr
        cc = col + dc
        if 0 <= rr < rows and 0 <= cc < cols:
            draw_buffer[rr, cc] = min(PIXEL_MAX, draw_buffer[rr, cc] + strength)


def has_ink(draw_buffer: np.ndarray) -> bool:
    """True once any pixel has been painted."""
    return bool(np.any(draw_buffer > 0))


def draw_pixel_grid(
    canvas: tk.Canvas,
    image_2d: np.ndarray,
    margin: int,
    size: int,
) -> None:
    """Draw a [0,255] intensity grid as dark ink on white paper.

    Rectangle items are cached on the canvas and only cells whose value
    changed since the last draw are reconfigured, so redraws during fast
    mouse motion stay cheap.
    """
    image_h, image_w = image_2d.shape
    key = (image_h, image_w, margin, size)
    cache = getattr(canvas, "_pixel_grid_cache", None)

    if cache is None or cache.get("key") != key:
        canvas.delete("all")
        cell_h = size / image_h
        cell_w = size / image_w

        ids: list[list[int]] = []
        for r in range(image_h):
            row_ids: list[int] = []
            for c in range(image_w):
                x0 = margin + c * cell_w
                y0 = margin + r * cell_h
                item_id = canvas.create_rectangle(
                    x0,
                    y0,
                    x0 + cell_w,
                    y0 + cell_h,
                    fill=COLOR_PAPER,
                    outline=COLOR_GRID_LINE,
                )
                row_ids.append(item_id)
            ids.append(row_ids)

        cache = {
            "key": key,
            "ids": ids,
            "last_value": np.zeros((image_h, image_w), dtype=np.int16),
        }
        setattr(canvas, "_pixel_grid_cache", cache)

    values = np.floor(np.clip(image_2d, 0.0, PIXEL_MAX)).astype(np.int16)
    changed = np.where(values != cache["last_value"])
    ids = cache["ids"]

    for r, c in zip(changed[0], changed[1]):
        g = 255 - int(values[r, c])
        canvas.itemconfigure(ids[r][c], fill=f"#{g:02x}{g:02x}{g:02x}")

    cache["last_value"][changed] = values[changed]
