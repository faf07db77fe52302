"""Pytest configuration and shared fixtures for graphkit tests.

This module provides:
- A deterministic numpy RNG fixture
- A random graph builder for property tests
"""

import os
from typing import Callable, List, Tuple

import numpy as np
import pytest

from graphkit.diagnostics import set_debug_enabled, is_debug_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This keeps tests reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function")
def random_edges(rng: np.random.Generator) -> Callable[..., List[Tuple[int, int, int]]]:
    """Return a builder for random weighted edge triples.

    The builder takes ``(n, m, low=0, high=10)`` and returns ``m`` triples
    ``(u, v, w)`` with ``u != v`` and integer ``w`` in ``[low, high)``.
    It raises ValueError when m > 0 and n < 2.
    """

    def build(n: int, m: int, low: int = 0, high: int = 10) -> List[Tuple[int, int, int]]:
        if m > 0 and n < 2:
            raise ValueError(f"Need at least 2 vertices for edges with u != v, got n={n}")
        triples = []
        while len(triples) < m:
            u, v = (int(x) for x in rng.integers(0, n, size=2))
            if u == v:
                continue
            triples.append((u, v, int(rng.integers(low, high))))
        return triples

    return build


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Auto-use fixture restoring the global debug flag after every test."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)
