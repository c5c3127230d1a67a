"""Shared fixtures for the radix sort tests."""

import random

import pytest


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def tagged(rng):
    """(key, original_index) pairs with many duplicate keys, for stability checks."""
    return [(rng.randint(0, 50), i) for i in range(300)]
