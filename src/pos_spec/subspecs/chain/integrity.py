"""
Chain integrity checks.

A chain is valid when every block links to its predecessor's hash, is
strictly newer than its predecessor, and carries the hash derived from its
predecessor. The checks never modify the chain.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pos_spec.subspecs.containers import Block, compute_next_hash
from pos_spec.subspecs.metrics import chain_validation_time
from pos_spec.types import (
    HashRecomputationError,
    LinkageMismatchError,
    TimestampOrderError,
)

logger = logging.getLogger(__name__)


def check_link(previous: Block, current: Block, index: int) -> None:
    """
    Check that `current` correctly extends `previous`.

    The rules run in a fixed order: linkage, then timestamp, then hash.

    Args:
        previous: The predecessor block.
        current: The block under test.
        index: Position of `current` in the chain, reported in errors.

    Raises:
        LinkageMismatchError: If `current.previous_hash` is not `previous.hash`.
        TimestampOrderError: If `current` is not strictly newer than `previous`.
        HashRecomputationError: If `current.hash` is not derived from `previous`.
    """
    if current.previous_hash != previous.hash:
        raise LinkageMismatchError(index, expected=previous.hash, actual=current.previous_hash)

    if current.timestamp <= previous.timestamp:
        raise TimestampOrderError(index, previous=previous.timestamp, current=current.timestamp)

    expected_hash = compute_next_hash(previous)
    if current.hash != expected_hash:
        raise HashRecomputationError(index, expected=expected_hash, actual=current.hash)


def validate_chain(blocks: Sequence[Block]) -> None:
    """
    Validate every adjacent pair of blocks, from the tip back to genesis.

    Chains with zero or one block are trivially valid.

    Raises:
        IntegrityError: The first violation found, scanning from the tip.
    """
    with chain_validation_time.time():
        for index in range(len(blocks) - 1, 0, -1):
            check_link(blocks[index - 1], blocks[index], index)

    logger.debug("Validated chain of %d blocks", len(blocks))
