"""Tests for visualization settings validation."""

from __future__ import annotations

import pytest

from mnist_visualizer.ui.layout import snap_to_step
from mnist_visualizer.ui.settings import VisualizationSettings


def test_defaults() -> None:
    settings = VisualizationSettings()
    assert settings.max_connections == 8
    assert settings.weak_threshold == 0.0
    assert settings.line_thickness == 1.0
    assert settings.brush_size == 2


@pytest.mark.parametrize(
    "changes",
    [
        {"max_connections": 0},
        {"max_connections": 21},
        {"weak_threshold": -0.1},
        {"weak_threshold": 1.5},
        {"line_thickness": 0.25},
        {"brush_size": 6},
    ],
)
def test_out_of_range_values_are_rejected(changes: dict) -> None:
    with pytest.raises(ValueError):
        VisualizationSettings(**changes)


def test_with_updates_returns_new_validated_copy() -> None:
    base = VisualizationSettings()
    updated = base.with_updates(max_connections=12)

    assert updated.max_connections == 12
    assert base.max_connections == 8
    with pytest.raises(ValueError):
        base.with_updates(brush_size=0)


def test_snap_to_step() -> None:
    assert snap_to_step(0.37, 0.0, 0.05) == pytest.approx(0.35)
    assert snap_to_step(2.7, 0.5, 0.5) == pytest.approx(2.5)
    assert snap_to_step(7.6, 1, 1) == 8


@pytest.mark.parametrize(
    "changes",
    [
        {"max_connections": 2.5},
        {"max_connections": 8.0},
        {"brush_size": 3.0},
        {"brush_size": True},
    ],
)
def test_integer_fields_reject_non_integers(changes: dict) -> None:
    # A float slice bound would later break connection ranking.
    with pytest.raises(ValueError, match="must be an integer"):
        VisualizationSettings(**changes)
