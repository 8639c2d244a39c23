"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


def pytest_addoption(parser):
    parser.addoption(
        "--runslow", action="store_true", default=False,
        help="run slow benchmark tests",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--runslow"):
        return
    skip_slow = pytest.mark.skip(reason="needs --runslow")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def well_conditioned(rng):
    """Diagonally dominant 5x5 matrix: every pivot is usable without swaps."""
    n = 5
    return rng.standard_normal((n, n)) + n * np.eye(n)


@pytest.fixture
def example_7x7():
    """7x7 integer-valued matrix with a known inverse."""
    return [
        [1, 2, 3, 4, 0, -1, 0],
        [0, 1, 1, 0, 1, 0, 0],
        [1, 0, 0, 0, 0, 1, 0],
        [0, 2, 2, 2, -2, 1, 3],
        [1, 3, 5, 7, 0, -1, 1],
        [0, 0, 1, 0, 1, 0, 0],
        [9, -2, 0, 0, 0, 2, 0],
    ]
