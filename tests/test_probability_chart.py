"""Tests for the probability bar chart renderer."""

from __future__ import annotations

import numpy as np

from mnist_visualizer.ui.probability_chart import format_percentage, render_probability_chart


class _RecordingCanvas:
    """Stand-in for tk.Canvas that records what gets drawn."""

    def __init__(self) -> None:
        self.rectangles: list[tuple[tuple, dict]] = []
        self.texts: list[str] = []
        self.deleted = 0

    def delete(self, _what: str) -> None:
        self.deleted += 1
        self.rectangles.clear()
        self.texts.clear()

    def winfo_width(self) -> int:
        return 600

    def winfo_height(self) -> int:
        return 400

    def create_rectangle(self, *args, **kwargs) -> int:
        self.rectangles.append((args, kwargs))
        return len(self.rectangles)

    def create_text(self, *_args, **kwargs) -> int:
        self.texts.append(kwargs.get("text", ""))
        return len(self.texts)


def test_format_percentage_uses_one_decimal() -> None:
    assert format_percentage(0.1234) == "12.3%"
    assert format_percentage(1.0) == "100.0%"


def test_placeholder_when_no_probabilities() -> None:
    canvas = _RecordingCanvas()
    render_probability_chart(canvas, None, None)

    assert "Draw a digit to see predictions" in canvas.texts
    assert canvas.deleted == 1


def test_chart_labels_every_digit_and_highlights_prediction() -> None:
    canvas = _RecordingCanvas()
    probs = np.array([0.02, 0.03, 0.6, 0.05, 0.05, 0.05, 0.05, 0.05, 0.05, 0.05])

    render_probability_chart(canvas, probs, prediction=2)

    for digit in range(10):
        assert str(digit) in canvas.texts
    assert "60.0%" in canvas.texts
    assert "Predicted Digit" in canvas.texts
    assert "Confidence: 60.0%" in canvas.texts
    fills = [kwargs.get("fill") for _args, kwargs in canvas.rectangles]
    assert "#10b981" in fills


def test_chart_redraw_replaces_previous_items() -> None:
    canvas = _RecordingCanvas()
    probs = np.full(10, 0.1)

    render_probability_chart(canvas, probs, prediction=0)
    first = len(canvas.rectangles)
    render_probability_chart(canvas, probs, prediction=0)

    assert len(canvas.rectangles) == first
