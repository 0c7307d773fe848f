"""Validator registry holding every block producer and its stake.

Validators keep their registration order. Leader selection walks the
registry in that order, so the order is part of the observable behavior.

Stake changes go through the registry by address. Each adjustment is
applied under the registry lock, so concurrent rewards and penalties on
the same validator are never lost.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from threading import Lock

from pos_spec.subspecs.containers import Validator

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ValidatorRegistry:
    """
    Ordered registry of validators.

    Owns every Validator record. Callers look validators up by address and
    change stake through `adjust_stake`.
    """

    _validators: list[Validator] = field(default_factory=list)
    """Validators in registration order."""

    _by_address: dict[str, Validator] = field(default_factory=dict)
    """Map from address to validator."""

    _lock: Lock = field(default_factory=Lock, repr=False)

    def add(self, validator: Validator) -> None:
        """
        Add a validator to the end of the registry.

        Raises:
            ValueError: If a validator with the same address is registered.
        """
        with self._lock:
            if validator.address in self._by_address:
                raise ValueError(f"Validator {validator.address} is already registered")
            self._validators.append(validator)
            self._by_address[validator.address] = validator
        logger.debug("Registered validator %s with stake %d", validator.address, validator.stake)

    def create(self, stake: int, rng: random.Random, address_bytes: int = 16) -> Validator:
        """
        Create a validator with a random address and register it.

        An address collision draws a new address.
        """
        while True:
            validator = Validator.generate(stake, rng, address_bytes)
            if validator.address not in self._by_address:
                break
        self.add(validator)
        return validator

    def get(self, address: str) -> Validator | None:
        """
        Get a validator by address.

        Returns:
            The validator if registered, None otherwise.
        """
        return self._by_address.get(address)

    def has(self, address: str) -> bool:
        """Check if a validator with this address is registered."""
        return address in self._by_address

    def addresses(self) -> list[str]:
        """All addresses in registration order."""
        return [validator.address for validator in self._validators]

    def eligible(self) -> list[Validator]:
        """Validators with a positive stake, in registration order."""
        return [validator for validator in self._validators if validator.is_eligible]

    def total_stake(self) -> int:
        """Sum of all stakes, non-positive stakes included."""
        return sum(validator.stake for validator in self._validators)

    def adjust_stake(self, address: str, delta: int) -> int:
        """
        Add `delta` to a validator's stake.

        Args:
            address: Address of the validator.
            delta: Signed stake change.

        Returns:
            The new stake.

        Raises:
            KeyError: If no validator has this address.
        """
        with self._lock:
            validator = self._by_address[address]
            validator.stake += delta
            return validator.stake

    def __len__(self) -> int:
        """Number of validators in the registry."""
        return len(self._validators)

    def __iter__(self) -> Iterator[Validator]:
        return iter(list(self._validators))

    def __getitem__(self, index: int) -> Validator:
        return self._validators[index]

    @classmethod
    def from_stakes(
        cls,
        stakes: Iterable[int],
        rng: random.Random,
        address_bytes: int = 16,
    ) -> ValidatorRegistry:
        """
        Create a registry with one fresh validator per starting stake.

        Convenience method for genesis configuration and tests.
        """
        registry = cls()
        for stake in stakes:
            registry.create(stake, rng, address_bytes)
        return registry
