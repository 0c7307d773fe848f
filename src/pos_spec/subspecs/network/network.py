"""
Proof-of-stake network: the aggregate root.

The network owns the chain, the head pointer, the validator registry, the
random source, and the timestamp source. Every operation on the chain goes
through it.

Block admission is a single critical section. The integrity check, the
head read, and the append all happen under one lock, so two validators can
never both extend the same head.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable
from dataclasses import dataclass, field
from threading import RLock
from typing import Any

from pos_spec.subspecs.chain import (
    DEFAULT_CONFIG,
    BlockClock,
    ChainConfig,
    TimeSource,
    validate_chain,
)
from pos_spec.subspecs.containers import Block, Validator
from pos_spec.subspecs.metrics import (
    admission_failures,
    blocks_admitted,
    chain_length,
    stake_penalties,
    validators_count,
)
from pos_spec.subspecs.validator import ValidatorRegistry, select_leader
from pos_spec.types import (
    CandidateRejectedError,
    ChainCorruptedError,
    IntegrityError,
    UnknownValidatorError,
)

from .admission import build_candidate, validate_candidate

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PoSNetwork:
    """
    A single proof-of-stake chain with its validators.

    Use `initialize` to create one with a genesis block.
    """

    blocks: list[Block]
    """The chain, genesis first. Append-only."""

    head: Block
    """Most recently appended block. Always `blocks[-1]` after an append."""

    validators: ValidatorRegistry
    """Registered validators and their stakes."""

    rng: random.Random
    """Random source for leader selection and address generation."""

    clock: TimeSource
    """Timestamp source for new blocks, in nanoseconds."""

    config: ChainConfig = DEFAULT_CONFIG
    """Penalty, reward and address parameters."""

    _lock: RLock = field(default_factory=RLock, repr=False)

    @classmethod
    def initialize(
        cls,
        genesis_timestamp: int,
        *,
        rng: random.Random | None = None,
        clock: TimeSource | None = None,
        config: ChainConfig = DEFAULT_CONFIG,
    ) -> PoSNetwork:
        """
        Create a network whose chain holds only the genesis block.

        Args:
            genesis_timestamp: Genesis time in nanoseconds.
            rng: Random source. Defaults to an OS-seeded `random.Random`.
            clock: Timestamp source. Defaults to a monotonic wall clock. A
                `BlockClock` is advanced past the genesis timestamp.
            config: Chain parameters.
        """
        genesis = Block.genesis(genesis_timestamp)
        if clock is None:
            clock = BlockClock()
        if isinstance(clock, BlockClock):
            clock.advance_past(genesis_timestamp)
        network = cls(
            blocks=[genesis],
            head=genesis,
            validators=ValidatorRegistry(),
            rng=rng if rng is not None else random.Random(),
            clock=clock,
            config=config,
        )
        logger.info("Initialized chain with genesis %s", genesis.hash)
        return network

    def add_validator(self, initial_stake: int) -> Validator:
        """Create and register a validator with a fresh random address."""
        with self._lock:
            validator = self.validators.create(
                initial_stake, self.rng, self.config.address_bytes
            )
        return validator

    def add_validators(self, stakes: Iterable[int]) -> list[Validator]:
        """Register one validator per starting stake, in order."""
        return [self.add_validator(stake) for stake in stakes]

    def select_leader(self) -> Validator:
        """
        Pick the next block producer in proportion to stake.

        Raises:
            SelectionError: See `select_leader` in the validator module.
        """
        with self._lock:
            return select_leader(list(self.validators), self.rng)

    def validate_chain(self) -> None:
        """
        Check the integrity of the whole stored chain.

        Raises:
            IntegrityError: On the first violation found.
        """
        with self._lock:
            validate_chain(self.blocks)

    def reward(self, validator: Validator, amount: int | None = None) -> int:
        """
        Credit stake to a validator. Defaults to the configured block reward.

        Returns:
            The new stake.

        Raises:
            UnknownValidatorError: If the validator is not registered.
        """
        self._require_registered(validator)
        if amount is None:
            amount = self.config.block_reward
        return self.validators.adjust_stake(validator.address, amount)

    def penalize(self, validator: Validator) -> int:
        """
        Remove the configured penalty from a validator's stake.

        Returns:
            The new stake.

        Raises:
            UnknownValidatorError: If the validator is not registered.
        """
        self._require_registered(validator)
        stake = self.validators.adjust_stake(validator.address, -self.config.stake_penalty)
        stake_penalties.inc()
        logger.warning(
            "Penalized validator %s by %d, stake now %d",
            validator.address,
            self.config.stake_penalty,
            stake,
        )
        return stake

    def generate_new_block(self, validator: Validator) -> Block:
        """
        Build a block produced by `validator` and append it to the chain.

        The stored chain is validated first. The candidate is then checked
        against the head and appended. Any failure costs the validator the
        configured stake penalty. No reward is applied here.

        Args:
            validator: The producer, normally the result of `select_leader`.

        Returns:
            The appended block, which is now the head.

        Raises:
            ChainCorruptedError: If the stored chain fails integrity checks.
            CandidateRejectedError: If the candidate does not extend the head.
            UnknownValidatorError: If the validator is not registered.
        """
        self._require_registered(validator)

        with self._lock:
            try:
                validate_chain(self.blocks)
            except IntegrityError as e:
                self.penalize(validator)
                admission_failures.labels(reason="chain_corrupted").inc()
                raise ChainCorruptedError(e) from e

            head = self.head
            candidate = build_candidate(head, validator.address, self.clock())

            try:
                validate_candidate(head, candidate)
            except CandidateRejectedError as e:
                self.penalize(validator)
                admission_failures.labels(reason=e.reason.name.lower()).inc()
                raise

            self.blocks.append(candidate)
            self.head = candidate

        blocks_admitted.inc()
        logger.debug(
            "Appended block %d by %s: %s", len(self.blocks) - 1, validator.address, candidate.hash
        )
        return candidate

    def _require_registered(self, validator: Validator) -> None:
        if not self.validators.has(validator.address):
            raise UnknownValidatorError(validator.address)

    def record_metrics(self) -> None:
        """Publish this network's chain length and validator count to the gauges."""
        chain_length.set(len(self.blocks))
        validators_count.set(len(self.validators))

    def __len__(self) -> int:
        """Number of blocks in the chain, genesis included."""
        return len(self.blocks)

    def describe(self) -> str:
        """Human readable listing of every block."""
        return "\n".join(
            f"Block {index} Info:\n{block.describe()}" for index, block in enumerate(self.blocks)
        )


def initialize_network(genesis_timestamp: int, **kwargs: Any) -> PoSNetwork:
    """Create a network with a genesis block. See `PoSNetwork.initialize`."""
    return PoSNetwork.initialize(genesis_timestamp, **kwargs)
