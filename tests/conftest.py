"""
conftest.py — Shared pytest fixtures for the sernalign test suite

Provides seeded random number generators and factories for well-formed
and arbitrary structural sequences.
"""

import pytest
import numpy as np

from sernalign.sequence import StructuralSequence
from sernalign.validation import random_structural_sequence


# ---------------------------------------------------------------------------
# Random number generator fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def rng():
    """Seeded random generator for reproducible tests."""
    return np.random.default_rng(888)


@pytest.fixture
def rng_alt():
    """Alternative seed for diversity in randomized tests."""
    return np.random.default_rng(123)


# ---------------------------------------------------------------------------
# Sequence generation helpers
# ---------------------------------------------------------------------------

@pytest.fixture
def structural_factory():
    """Factory returning well-formed structural sequences (code_k <= 2k-1)."""
    def _random(length: int, rng: np.random.Generator) -> StructuralSequence:
        return random_structural_sequence(length, rng)
    return _random


@pytest.fixture
def codes_factory():
    """Factory returning arbitrary positive codes in 1..max_code."""
    def _random(length: int, rng: np.random.Generator, max_code: int = 6) -> StructuralSequence:
        return StructuralSequence(int(c) for c in rng.integers(1, max_code + 1, size=length))
    return _random
