"""Pytest configuration and fixtures for protozoa core tests."""

import pytest

from protozoa.entropy import SeededEntropySource
from protozoa.genetics import TraitGenesisEngine
from protozoa.models import BlockData

SCENARIO_HASH = "00000000000000000aaa" + "0" * 44


@pytest.fixture
def block_data():
    """A fixed block used as the entropy source for deterministic tests."""
    return BlockData(hash=SCENARIO_HASH, height=840000, nonce=123456, difficulty=1.0)


@pytest.fixture
def entropy_source(block_data):
    return SeededEntropySource.from_block(block_data)


@pytest.fixture
def stream(entropy_source):
    """A fresh stream for the ``test`` consumer key."""
    return entropy_source.derive_stream("test")


@pytest.fixture
def genesis_engine():
    return TraitGenesisEngine()


@pytest.fixture
def founders(entropy_source, genesis_engine):
    """Two founder records drawn from independent streams."""
    parent_a = genesis_engine.generate("parent-a", entropy_source.derive_stream("parent-a"), generated_at=100.0)
    parent_b = genesis_engine.generate("parent-b", entropy_source.derive_stream("parent-b"), generated_at=250.0)
    return parent_a, parent_b
