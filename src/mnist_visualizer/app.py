"""Interactive drawing UI for the random-weight MNIST network.

Draw a digit, and after a short quiet period the network runs a forward pass.
The probability chart and the rotating network view then show the result.
"""

from __future__ import annotations

import logging
import sys
import tkinter as tk
from pathlib import Path

import numpy as np

# Allow running this file directly (e.g. `python src/mnist_visualizer/app.py`)
# by ensuring `src/` is on sys.path for absolute package imports.
if __package__ in (None, ""):
    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from mnist_visualizer.model.forward import ForwardPassResult, forward_pass
from mnist_visualizer.model.network import NetworkParameters, initialize_network
from mnist_visualizer.services.debounce import Debouncer
from mnist_visualizer.ui.canvas import build_brush, draw_pixel_grid, has_ink, paint_brush_stamp
from mnist_visualizer.ui.constants import (
    COLOR_BG,
    DRAW_CANVAS_SIZE,
    DRAW_GRID_SIZE,
    INFERENCE_DEBOUNCE_MS,
    ROTATION_INTERVAL_MS,
    ROTATION_STEP_RAD,
    WINDOW_MIN_SIZE,
    WINDOW_SIZE,
)
from mnist_visualizer.ui.layout import bind_shortcuts, build_layout, configure_styles
from mnist_visualizer.ui.network_view import layer_world_positions, render_network
from mnist_visualizer.ui.probability_chart import render_probability_chart
from mnist_visualizer.ui.settings import VisualizationSettings


logger = logging.getLogger(__name__)

INT_SETTINGS = ("max_connections", "brush_size")


class VisualizerUI:
    """Main application class: owns the drawing buffer and the latest result.

    The network parameters are fixed for the whole session. Everything the
    user does either edits the drawing buffer (which schedules a forward
    pass) or changes how results are drawn.
    """

    def __init__(
        self,
        root: tk.Tk,
        params: NetworkParameters,
        settings: VisualizationSettings | None = None,
    ) -> None:
        self.root = root
        self.root.title("MNIST Neural Network Visualizer")
        self.root.geometry(WINDOW_SIZE)
        self.root.minsize(*WINDOW_MIN_SIZE)
        self.root.configure(bg=COLOR_BG)

        self.params = params
        self.settings = settings or VisualizationSettings()

        self.status_var = tk.StringVar(value="Draw a digit to run the network.")
        self.prediction_var = tk.StringVar(value="Prediction: -")

        # Mutable 28x28 drawing buffer, intensities 0..255.
        self.draw_buffer = np.zeros((DRAW_GRID_SIZE, DRAW_GRID_SIZE), dtype=np.float64)
        self.result: ForwardPassResult | None = None

        self._brush = build_brush(self.settings.brush_size)
        self._last_draw_cell: tuple[int, int] | None = None
        self._world_positions = layer_world_positions()
        self._angle = 0.0
        self._rotating = True
        self._rotation_job: str | None = None
        self._debouncer = Debouncer(self.root, INFERENCE_DEBOUNCE_MS, self._run_forward_pass)

        configure_styles(self.root)
        build_layout(self)
        bind_shortcuts(self)

        self.root.protocol("WM_DELETE_WINDOW", self._on_close)
        self._draw_digit_canvas()
        self._render_results()
        self._schedule_rotation()
        logger.info("Visualizer ready (%d network parameters)", self.params.parameter_count)

    def _set_status(self, message: str) -> None:
        self.status_var.set(message)

    # ------------------------------
    # Input interactions
    # ------------------------------
    def _on_draw(self, event: tk.Event) -> None:
        """Handle mouse draw events and paint into the 28x28 buffer."""
        cell_size = DRAW_CANVAS_SIZE / DRAW_GRID_SIZE
        col = int(event.x // cell_size)
        row = int(event.y // cell_size)
        if self._last_draw_cell == (row, col):
            return
        self._last_draw_cell = (row, col)
        paint_brush_stamp(self.draw_buffer, row=row, col=col, brush=self._brush)
        self._draw_digit_canvas()
        self._debouncer.trigger()

    def _on_draw_end(self, _event: tk.Event | None = None) -> None:
        self._last_draw_cell = None

    def _draw_digit_canvas(self) -> None:
        draw_pixel_grid(canvas=self.draw_canvas, image_2d=self.draw_buffer, margin=0, size=DRAW_CANVAS_SIZE)

    def clear_drawing(self) -> None:
        """Clear drawing buffer and reset prediction state."""
        self._debouncer.cancel()
        self._last_draw_cell = None
        self.draw_buffer.fill(0.0)
        self.result = None
        self._draw_digit_canvas()
        self.prediction_var.set("Prediction: -")
        self._render_results()
        self._set_status("Canvas cleared.")

    # ------------------------------
    # Inference + render
    # ------------------------------
    def _run_forward_pass(self) -> None:
        """Run the network on the current drawing and refresh both views."""
        if not has_ink(self.draw_buffer):
            self.result = None
            self.prediction_var.set("Prediction: -")
            self._render_results()
            return

        # Snapshot so later strokes cannot alias the result's input.
        self.result = forward_pass(self.draw_buffer.copy(), self.params)
        prediction = self.result.prediction
        confidence = self.result.confidence
        logger.debug("Forward pass: prediction=%d confidence=%.4f", prediction, confidence)

        self.prediction_var.set(f"Prediction: {prediction}  (confidence {confidence * 100:.1f}%)")
        self._set_status(f"Network output updated. Predicted digit: {prediction}.")
        self._render_results()

    def _render_results(self) -> None:
        if self.result is None:
            render_probability_chart(self.chart_canvas, None, None)
        else:
            render_probability_chart(self.chart_canvas, self.result.probabilities, self.result.prediction)
        self._render_network()

    def _render_network(self) -> None:
        render_network(
            self.network_canvas,
            self.result,
            self.params,
            self.settings,
            self._angle,
            world_positions=self._world_positions,
        )

    # ------------------------------
    # Settings + animation
    # ------------------------------
    def on_setting_changed(self, field: str, value: float) -> None:
        """Apply one slider change; only rendering is affected."""
        if field in INT_SETTINGS:
            value = int(round(value))
        if getattr(self.settings, field) == value:
            return
        try:
            self.settings = self.settings.with_updates(**{field: value})
        except ValueError as exc:
            logger.warning("Rejected setting %s=%r: %s", field, value, exc)
            self._set_status(str(exc))
            return

        logger.info("Setting %s changed to %r", field, value)
        if field == "brush_size":
            self._brush = build_brush(self.settings.brush_size)
        else:
            self._render_network()

    def toggle_rotation(self) -> None:
        self._rotating = not self._rotating
        if self._rotating:
            self._schedule_rotation()
            self._set_status("Rotation resumed.")
        else:
            if self._rotation_job is not None:
                self.root.after_cancel(self._rotation_job)
                self._rotation_job = None
            self._set_status("Rotation paused.")

    def _schedule_rotation(self) -> None:
        if self._rotating and self._rotation_job is None:
            self._rotation_job = self.root.after(ROTATION_INTERVAL_MS, self._rotate_step)

    def _rotate_step(self) -> None:
        self._rotation_job = None
        if not self._rotating:
            return
        self._angle = (self._angle + ROTATION_STEP_RAD) % (2.0 * np.pi)
        self._render_network()
        self._schedule_rotation()

    def _on_close(self) -> None:
        """Cancel pending timers and close the Tk window cleanly."""
        self._debouncer.cancel()
        self._rotating = False
        if self._rotation_job is not None:
            self.root.after_cancel(self._rotation_job)
            self._rotation_job = None
        self.root.destroy()


def main(
    params: NetworkParameters | None = None,
    settings: VisualizationSettings | None = None,
) -> None:
    if params is None:
        params = initialize_network(np.random.default_rng())
    root = tk.Tk()
    VisualizerUI(root, params, settings)
    root.mainloop()


if __name__ == "__main__":
    main()
