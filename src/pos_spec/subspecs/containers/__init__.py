"""
The container types for the proof-of-stake specification.

Blocks are immutable once built. Validators only ever change their stake.
"""

from .block import Block, compute_next_hash
from .validator import Validator

__all__ = [
    "Block",
    "Validator",
    "compute_next_hash",
]
