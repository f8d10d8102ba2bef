"""End-to-end tests for the forward pass pipeline."""

from __future__ import annotations

import numpy as np
import pytest

from mnist_visualizer.model.activations import relu, softmax
from mnist_visualizer.model.dense import DimensionMismatchError
from mnist_visualizer.model.forward import GRID_SIZE, forward_pass, normalize_input
from mnist_visualizer.model.network import INPUT_SIZE, LayerParameters, NetworkParameters


def _random_grid(seed: int) -> np.ndarray:
    return np.random.default_rng(seed).uniform(0.0, 255.0, size=(28, 28))


def test_normalize_input_flattens_row_major_and_scales() -> None:
    grid = np.zeros((28, 28))
    grid[0, 1] = 255.0
    grid[1, 0] = 51.0

    x = normalize_input(grid)

    assert x.shape == (784,)
    assert x[1] == 1.0
    assert x[28] == pytest.approx(0.2)
    assert float(np.sum(x)) == pytest.approx(1.2)


def test_normalize_input_accepts_nested_lists() -> None:
    grid = [[255.0] * 28 for _ in range(28)]
    assert np.allclose(normalize_input(grid), 1.0)


def test_normalize_input_rejects_wrong_grid_shape() -> None:
    with pytest.raises(DimensionMismatchError):
        normalize_input(np.zeros((28, 27)))


def test_forward_pass_on_empty_grid(params: NetworkParameters) -> None:
    result = forward_pass(np.zeros((28, 28)), params)

    assert result.inputs.shape == (784,)
    assert np.all(result.inputs == 0.0)
    # Zero input leaves only the (ReLU-ed) biases in hidden layer 1.
    assert np.allclose(result.layer1, relu(params.layer1.biases))
    assert result.layer1.shape == (64,)
    assert result.layer2.shape == (32,)
    assert np.all(result.layer1 >= 0.0)
    assert np.all(result.layer2 >= 0.0)
    assert abs(float(np.sum(result.probabilities)) - 1.0) < 1e-9
    assert 0 <= result.prediction <= 9
    assert result.prediction == int(np.argmax(result.probabilities))


def test_forward_pass_result_is_well_formed_for_drawn_grid(params: NetworkParameters) -> None:
    result = forward_pass(_random_grid(3), params)

    assert result.logits.shape == (10,)
    assert result.probabilities.shape == (10,)
    assert np.all((result.probabilities >= 0.0) & (result.probabilities <= 1.0))
    assert abs(float(np.sum(result.probabilities)) - 1.0) < 1e-9
    assert np.allclose(result.probabilities, softmax(result.logits))
    assert result.confidence == float(np.max(result.probabilities))


def test_forward_pass_matches_manual_computation(params: NetworkParameters) -> None:
    grid = _random_grid(5)
    x = grid.reshape(-1) / 255.0
    h1 = np.maximum(params.layer1.weights @ x + params.layer1.biases, 0.0)
    h2 = np.maximum(params.layer2.weights @ h1 + params.layer2.biases, 0.0)
    logits = params.output.weights @ h2 + params.output.biases

    result = forward_pass(grid, params)

    assert np.allclose(result.layer1, h1)
    assert np.allclose(result.layer2, h2)
    assert np.allclose(result.logits, logits)


def test_forward_pass_is_deterministic(params: NetworkParameters) -> None:
    grid = _random_grid(11)
    first = forward_pass(grid, params)
    second = forward_pass(grid, params)

    assert np.array_equal(first.probabilities, second.probabilities)
    assert np.array_equal(first.layer1, second.layer1)
    assert first.prediction == second.prediction


def test_forward_pass_does_not_modify_input_grid(params: NetworkParameters) -> None:
    grid = _random_grid(2)
    before = grid.copy()
    forward_pass(grid, params)
    assert np.array_equal(grid, before)


def test_prediction_ties_resolve_to_lowest_index() -> None:
    # All-zero weights and biases give equal logits, so every class ties.
    zeros = NetworkParameters(
        LayerParameters(np.zeros((64, 784)), np.zeros(64)),
        LayerParameters(np.zeros((32, 64)), np.zeros(32)),
        LayerParameters(np.zeros((10, 32)), np.zeros(10)),
    )
    result = forward_pass(_random_grid(1), zeros)

    assert np.allclose(result.probabilities, 0.1)
    assert result.prediction == 0


def test_layer_activations_order(params: NetworkParameters) -> None:
    result = forward_pass(_random_grid(4), params)
    inputs, layer1, layer2, probs = result.layer_activations()

    assert inputs is result.inputs
    assert layer1 is result.layer1
    assert layer2 is result.layer2
    assert probs is result.probabilities


def test_grid_size_matches_network_input() -> None:
    assert GRID_SIZE == 28
    assert GRID_SIZE * GRID_SIZE == INPUT_SIZE
