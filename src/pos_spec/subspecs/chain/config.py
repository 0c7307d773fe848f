"""
Chain Configuration Specification

Defines the incentive and identity parameters of the proof-of-stake chain.
"""

from pydantic import Field
from typing_extensions import Final

from pos_spec.types import StrictBaseModel

# --- Incentive Parameters ---

STAKE_PENALTY: Final = 10
"""Stake removed from a validator whose block admission fails."""

BLOCK_REWARD: Final = 10
"""Stake credited by the caller to a selected leader each round."""

# --- Identity Parameters ---

ADDRESS_BYTES: Final = 16
"""Number of random bytes in a validator address (hex encoded: 32 characters)."""


class ChainConfig(StrictBaseModel):
    """
    A model holding the immutable configuration constants for the chain.
    """

    stake_penalty: int = Field(ge=0)
    block_reward: int = Field(ge=0)
    address_bytes: int = Field(gt=0)


DEFAULT_CONFIG: Final = ChainConfig(
    stake_penalty=STAKE_PENALTY,
    block_reward=BLOCK_REWARD,
    address_bytes=ADDRESS_BYTES,
)
