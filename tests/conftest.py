"""Test configuration shared across this project's pytest suite."""

from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pytest


# Ensure tests can import modules from src/ without requiring editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from mnist_visualizer.model.network import NetworkParameters, initialize_network  # noqa: E402


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def params(rng: np.random.Generator) -> NetworkParameters:
    return initialize_network(rng)
