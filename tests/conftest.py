"""
Shared pytest fixtures for ordered map tests.
"""

import random

import pytest

from bstmap import OrderedMap


@pytest.fixture
def ordered_map():
    """Provide a fresh empty OrderedMap."""
    return OrderedMap()


@pytest.fixture
def sample_keys():
    """Keys whose insertion order gives a full three-level tree rooted at 5."""
    return [5, 3, 8, 2, 4, 7, 9]


@pytest.fixture
def sample_map(sample_keys):
    """Provide a map populated with sample_keys, each mapped to itself."""
    tree = OrderedMap()
    for key in sample_keys:
        tree.insert(key, key)
    return tree


@pytest.fixture
def shuffled_keys():
    """Provide a reproducible shuffled key sample for stress testing."""
    rng = random.Random(1234)
    keys = [f"key{i:04d}" for i in range(1000)]
    rng.shuffle(keys)
    return keys
