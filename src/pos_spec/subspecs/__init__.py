"""Subspecifications for the proof-of-stake Python specification."""

from .genesis import GenesisConfig
from .network import PoSNetwork, initialize_network

__all__ = [
    "GenesisConfig",
    "PoSNetwork",
    "initialize_network",
]
