"""Pytest configuration and shared fixtures."""

import random

import pytest

from subnetdrill.core import Block, parse_address
from subnetdrill.exercise import pack


@pytest.fixture
def rng():
    """Seeded random generator so exercises are reproducible."""
    return random.Random(1234)


@pytest.fixture
def example_base():
    """The 192.168.1.0/24 block used in the worked example."""
    return Block(parse_address("192.168.1.0"), 24)


@pytest.fixture
def example_allocations(example_base):
    """Solution for 50 and 20 hosts inside 192.168.1.0/24."""
    return pack(example_base, [50, 20])
