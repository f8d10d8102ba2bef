"""Bar chart of the ten class probabilities."""

from __future__ import annotations

import tkinter as tk

import numpy as np

from mnist_visualizer.model.network import NUM_CLASSES
from mnist_visualizer.ui.constants import (
    COLOR_BAR_PREDICTED,
    COLOR_BAR_TRACK,
    COLOR_CARD,
    COLOR_EDGE,
    COLOR_INK,
    COLOR_SUB,
)
from mnist_visualizer.ui.render import probability_bar_color


def format_percentage(probability: float) -> str:
    return f"{probability * 100:.1f}%"


def render_probability_chart(
    canvas: tk.Canvas,
    probabilities: np.ndarray | None,
    prediction: int | None,
) -> None:
    """Draw one horizontal bar per digit plus a predicted-digit box."""
    canvas.delete("all")
    width = max(canvas.winfo_width(), 420)
    height = max(canvas.winfo_height(), 360)
    canvas.create_rectangle(0, 0, width, height, fill=COLOR_CARD, outline="")

    if probabilities is None:
        canvas.create_text(
            width / 2.0,
            height / 2.0 - 12,
            text="Draw a digit to see predictions",
            font=("Helvetica", 14),
            fill=COLOR_SUB,
        )
        canvas.create_text(
            width / 2.0,
            height / 2.0 + 14,
            text="The network will analyze your drawing in real time",
            font=("Helvetica", 10),
            fill="#555555",
        )
        return

    canvas.create_text(
        width / 2.0,
        16,
        text="Prediction Probabilities",
        font=("Helvetica", 13, "bold"),
        fill=COLOR_INK,
    )

    label_x = 20
    bar_x0 = 48
    bar_x1 = width - 150
    top = 36
    row_h = (height - top - 16) / float(NUM_CLASSES)

    for digit in range(NUM_CLASSES):
        p = float(probabilities[digit])
        is_prediction = digit == prediction
        y0 = top + digit * row_h + 2
        y1 = y0 + row_h - 6

        canvas.create_text(
            label_x,
            (y0 + y1) / 2.0,
            text=str(digit),
            font=("Helvetica", 14 if is_prediction else 11, "bold" if is_prediction else "normal"),
            fill=COLOR_BAR_PREDICTED if is_prediction else "#cccccc",
        )
        canvas.create_rectangle(
            bar_x0,
            y0,
            bar_x1,
            y1,
            fill=COLOR_BAR_TRACK,
            outline=COLOR_BAR_PREDICTED if is_prediction else COLOR_EDGE,
            width=2 if is_prediction else 1,
        )
        color = probability_bar_color(p, digit, prediction)
        if p > 0.0:
            canvas.create_rectangle(
                bar_x0,
                y0,
                bar_x0 + (bar_x1 - bar_x0) * p,
                y1,
                fill=color,
                outline=color,
            )
        canvas.create_text(
            bar_x1 - 6,
            (y0 + y1) / 2.0,
            text=format_percentage(p),
            anchor="e",
            font=("Helvetica", 9, "bold"),
            fill=COLOR_INK if p > 0.05 else "#888888",
        )

    if prediction is None:
        return

    # Predicted digit box on the right.
    box_x0 = bar_x1 + 16
    box_x1 = width - 12
    box_y0 = top + 10
    box_y1 = box_y0 + 120
    canvas.create_rectangle(box_x0, box_y0, box_x1, box_y1, fill="#10302a", outline=COLOR_BAR_PREDICTED, width=2)
    center_x = (box_x0 + box_x1) / 2.0
    canvas.create_text(center_x, box_y0 + 16, text="Predicted Digit", font=("Helvetica", 10), fill=COLOR_SUB)
    canvas.create_text(
        center_x,
        box_y0 + 56,
        text=str(prediction),
        font=("Helvetica", 36, "bold"),
        fill=COLOR_BAR_PREDICTED,
    )
    canvas.create_text(
        center_x,
        box_y0 + 100,
        text=f"Confidence: {format_percentage(float(probabilities[prediction]))}",
        font=("Helvetica", 9),
        fill="#888888",
    )
