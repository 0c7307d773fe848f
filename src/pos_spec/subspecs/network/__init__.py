"""
The proof-of-stake network and its block admission rules.

Flow of a round:

1. Select a leader from the validator registry
2. Validate the stored chain
3. Build a candidate on top of the head and check it against the head
4. Append the candidate and advance the head
"""

from .admission import build_candidate, validate_candidate
from .network import PoSNetwork, initialize_network

__all__ = [
    "PoSNetwork",
    "build_candidate",
    "initialize_network",
    "validate_candidate",
]
