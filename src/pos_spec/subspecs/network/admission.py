"""
Candidate block checks against the current head.

These are the same three rules the integrity checker applies to every
stored pair, but applied to one not-yet-stored block, and reported as a
rejection reason rather than an integrity violation.
"""

from __future__ import annotations

from pos_spec.subspecs.containers import Block
from pos_spec.types import CandidateRejectedError, RejectionReason


def build_candidate(head: Block, validator_address: str, timestamp: int) -> Block:
    """Construct a block that extends `head`."""
    return Block(
        timestamp=timestamp,
        previous_hash=head.hash,
        hash=head.next_hash(),
        validator_address=validator_address,
    )


def validate_candidate(head: Block, candidate: Block) -> None:
    """
    Check that `candidate` extends `head`.

    Raises:
        CandidateRejectedError: With the first rule that failed, checked in
            the order linkage, timestamp, hash.
    """
    if head.hash != candidate.previous_hash:
        raise CandidateRejectedError(RejectionReason.PREVIOUS_HASH_MISMATCH)

    if head.timestamp >= candidate.timestamp:
        raise CandidateRejectedError(RejectionReason.TIMESTAMP_NOT_AFTER_HEAD)

    if head.next_hash() != candidate.hash:
        raise CandidateRejectedError(RejectionReason.HASH_MISMATCH)
