"""
Validator module: the stake registry and leader selection.

Validators are the block producers of the chain. Each one carries a stake
that sets its chance of being picked to produce the next block.
"""

from .registry import ValidatorRegistry
from .selection import select_leader

__all__ = [
    "ValidatorRegistry",
    "select_leader",
]
