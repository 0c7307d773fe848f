"""
Block container for the proof-of-stake specification.

A block extends the chain by pointing at the hash of the block before it.
The genesis block is the only block without a predecessor or producer.

The hash of a block is derived from its predecessor alone: the predecessor's
timestamp, previous hash, own hash and producer address are concatenated and
hashed. The new block's timestamp and producer do not feed into its own hash.
Every verifier in the package relies on this, so it must not be changed
without changing all of them together.
"""

from __future__ import annotations

from pydantic import Field

from pos_spec.types import HexDigest, StrictBaseModel, sha256_hex


class Block(StrictBaseModel):
    """An immutable link in the chain."""

    timestamp: int = Field(ge=0)
    """Creation time in nanoseconds since the Unix epoch."""

    previous_hash: HexDigest
    """Hash of the predecessor block. Empty for genesis."""

    hash: HexDigest
    """Hash derived from the predecessor block (see `compute_next_hash`)."""

    validator_address: str = ""
    """Address of the validator that produced the block. Empty for genesis."""

    @classmethod
    def genesis(cls, timestamp: int) -> Block:
        """
        Synthesize the genesis block.

        The genesis hash covers the timestamp only.
        """
        return cls(
            timestamp=timestamp,
            previous_hash="",
            hash=sha256_hex(str(timestamp)),
            validator_address="",
        )

    @property
    def is_genesis(self) -> bool:
        """Whether this block has no predecessor."""
        return self.previous_hash == ""

    def next_hash(self) -> str:
        """Hash that any block built on top of this one must carry."""
        return compute_next_hash(self)

    def describe(self) -> str:
        """Multi-line human readable summary of the block fields."""
        return (
            f"\tTimestamp: {self.timestamp}\n"
            f"\tPrevious Hash: {self.previous_hash}\n"
            f"\tHash: {self.hash}\n"
            f"\tValidator Address: {self.validator_address}"
        )


def compute_next_hash(predecessor: Block) -> str:
    """
    Compute the hash of the block that follows `predecessor`.

    Args:
        predecessor: The block being extended.

    Returns:
        Hex SHA-256 over the predecessor's timestamp, previous hash, hash and
        validator address, concatenated in that order.
    """
    return sha256_hex(
        f"{predecessor.timestamp}"
        f"{predecessor.previous_hash}"
        f"{predecessor.hash}"
        f"{predecessor.validator_address}"
    )
