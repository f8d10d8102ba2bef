"""Unit tests for ReLU and softmax."""

from __future__ import annotations

import numpy as np
import pytest

from mnist_visualizer.model.activations import relu, softmax


@pytest.mark.parametrize("x, expected", [(-3.5, 0.0), (0.0, 0.0), (2.25, 2.25), (-1e-12, 0.0)])
def test_relu_matches_max_with_zero(x: float, expected: float) -> None:
    assert float(relu(x)) == expected


def test_relu_is_elementwise_on_arrays() -> None:
    out = relu(np.array([-2.0, 0.0, 3.0]))
    assert np.array_equal(out, np.array([0.0, 0.0, 3.0]))


def test_softmax_sums_to_one_and_stays_in_unit_interval() -> None:
    probs = softmax(np.array([1.0, 2.0, 3.0, -4.0]))

    assert abs(float(np.sum(probs)) - 1.0) < 1e-9
    assert np.all(probs >= 0.0)
    assert np.all(probs <= 1.0)
    # Larger logits get larger probabilities.
    assert int(np.argmax(probs)) == 2


def test_softmax_is_shift_invariant() -> None:
    logits = np.array([0.3, -1.2, 2.7, 0.0])
    assert np.allclose(softmax(logits), softmax(logits + 123.456))
    assert np.allclose(softmax(logits), softmax(logits - 50.0))


def test_softmax_handles_extreme_logits_without_overflow() -> None:
    # Naive exp(1000) overflows and exp(-1000) underflows for every entry.
    big = softmax(np.array([1000.0, 999.0]))
    tiny = softmax(np.array([-1000.0, -1001.0]))

    assert np.all(np.isfinite(big))
    assert np.all(np.isfinite(tiny))
    assert np.allclose(big, tiny)


def test_softmax_of_equal_logits_is_uniform() -> None:
    assert np.allclose(softmax(np.zeros(10)), np.full(10, 0.1))


def test_softmax_rejects_empty_input() -> None:
    with pytest.raises(ValueError):
        softmax(np.array([]))
