"""
Shared pytest fixtures for all pos_spec tests.

Provides deterministic random and time sources so that every chain built
in a test is reproducible.
"""

from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from pos_spec.subspecs.chain import TimeSource
from pos_spec.subspecs.containers import Block
from pos_spec.subspecs.network import PoSNetwork
from tests.pos_spec.helpers import ticking_clock

GENESIS_TIME = 1_700_000_000_000_000_000
"""Genesis timestamp used across tests, in nanoseconds."""


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def clock() -> TimeSource:
    """Clock that advances one second per call, starting after genesis."""
    return ticking_clock(GENESIS_TIME + 1_000_000_000, 1_000_000_000)


@pytest.fixture
def network_factory(rng: random.Random, clock: TimeSource) -> Callable[..., PoSNetwork]:
    """Factory for networks with configurable validator stakes."""

    def _create(stakes: tuple[int, ...] = (60, 40)) -> PoSNetwork:
        network = PoSNetwork.initialize(GENESIS_TIME, rng=rng, clock=clock)
        network.add_validators(stakes)
        return network

    return _create


@pytest.fixture
def network(network_factory: Callable[..., PoSNetwork]) -> PoSNetwork:
    """Network with validators A (stake 60) and B (stake 40)."""
    return network_factory()


@pytest.fixture
def grown_network(network: PoSNetwork) -> PoSNetwork:
    """The default network after four blocks produced by alternating validators."""
    for round_number in range(4):
        network.generate_new_block(network.validators[round_number % 2])
    return network


@pytest.fixture
def valid_blocks(grown_network: PoSNetwork) -> list[Block]:
    """A copy of a valid five-block chain."""
    return list(grown_network.blocks)
