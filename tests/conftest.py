"""Pytest configuration and shared fixtures for sigmat tests.

This module provides:
- A deterministic numpy RNG fixture
- Automatic reset of global seeds and strict mode between tests
"""

import os

import numpy as np
import pytest

from sigmat.diagnostics import is_strict_enabled, set_strict_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def isolate_global_state():
    """Seed numpy's legacy RNG and run each test with strict mode off."""
    np.random.seed(int(os.environ.get("TEST_RNG_SEED", "0")))
    previous = is_strict_enabled()
    set_strict_enabled(False)
    yield
    set_strict_enabled(previous)
