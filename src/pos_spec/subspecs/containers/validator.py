"""Validator container for the proof-of-stake specification."""

from __future__ import annotations

import random

from pydantic import Field

from pos_spec.types import MutableModel


class Validator(MutableModel):
    """
    A block producer weighted by its stake.

    Stake is the only field that changes after creation. It is signed and can
    drop below zero after repeated penalties.
    """

    stake: int
    """Current stake balance."""

    address: str = Field(pattern=r"^[0-9a-f]+$", frozen=True)
    """Hex identifier generated once at creation."""

    @classmethod
    def generate(cls, stake: int, rng: random.Random, address_bytes: int = 16) -> Validator:
        """
        Create a validator with a fresh random address.

        Args:
            stake: Starting stake balance.
            rng: Random source the address bytes are drawn from.
            address_bytes: Number of random bytes in the address.
        """
        return cls(stake=stake, address=rng.randbytes(address_bytes).hex())

    @property
    def is_eligible(self) -> bool:
        """Whether the validator can win leader selection."""
        return self.stake > 0
