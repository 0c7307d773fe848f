"""Exception hierarchy for chain integrity, leader selection and block admission."""

from __future__ import annotations

from enum import Enum


class PoSError(Exception):
    """
    Base exception for all proof-of-stake errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


# -----------------------------------------------------------------------------
# Chain integrity
# -----------------------------------------------------------------------------


class IntegrityError(PoSError):
    """
    Base class for violations found while scanning the stored chain.

    Attributes:
        index: Position of the block that failed against its predecessor.
    """

    def __init__(self, index: int, detail: str) -> None:
        self.index = index
        self.detail = detail
        super().__init__(f"Block {index}: {detail}")


class LinkageMismatchError(IntegrityError):
    """Raised when a block's previous hash differs from its predecessor's hash."""

    def __init__(self, index: int, *, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            index,
            f"previous hash {actual[:16]!r} does not match predecessor hash {expected[:16]!r}",
        )


class TimestampOrderError(IntegrityError):
    """Raised when a block is not strictly newer than its predecessor."""

    def __init__(self, index: int, *, previous: int, current: int) -> None:
        self.previous = previous
        self.current = current
        super().__init__(
            index,
            f"timestamp {current} is not after predecessor timestamp {previous}",
        )


class HashRecomputationError(IntegrityError):
    """Raised when a block's hash differs from the hash derived from its predecessor."""

    def __init__(self, index: int, *, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            index,
            f"hash {actual[:16]!r} does not match recomputed hash {expected[:16]!r}",
        )


# -----------------------------------------------------------------------------
# Leader selection
# -----------------------------------------------------------------------------


class SelectionError(PoSError):
    """Base class for failures to pick a block producer."""


class NoEligibleValidatorsError(SelectionError):
    """Raised when no validator holds a positive stake."""

    def __init__(self, num_validators: int) -> None:
        self.num_validators = num_validators
        super().__init__(f"None of the {num_validators} validators holds a positive stake")


class SelectionInvariantError(SelectionError):
    """
    Raised when the stake walk ends without reaching the random draw.

    Attributes:
        draw: The random value that was never covered.
        total_stake: Sum of the positive stakes the draw was taken from.
    """

    def __init__(self, draw: int, total_stake: int) -> None:
        self.draw = draw
        self.total_stake = total_stake
        super().__init__(
            f"No validator was picked for draw {draw} out of total stake {total_stake}"
        )


# -----------------------------------------------------------------------------
# Block admission
# -----------------------------------------------------------------------------


class AdmissionError(PoSError):
    """Base class for failures to extend the chain with a new block."""


class UnknownValidatorError(AdmissionError):
    """Raised when the block producer is not in the validator registry."""

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"Validator {address} is not registered")


class ChainCorruptedError(AdmissionError):
    """
    Raised when the stored chain fails integrity checks before a block is built.

    Attributes:
        cause: The integrity violation that was found.
    """

    def __init__(self, cause: IntegrityError) -> None:
        self.cause = cause
        super().__init__(f"Chain is corrupted: {cause.message}")


class RejectionReason(Enum):
    """Why a candidate block was refused against the current head."""

    PREVIOUS_HASH_MISMATCH = "head hash is not equal to candidate previous hash"
    TIMESTAMP_NOT_AFTER_HEAD = "head timestamp is greater than or equal to candidate timestamp"
    HASH_MISMATCH = "hash derived from head is not equal to candidate hash"


class CandidateRejectedError(AdmissionError):
    """
    Raised when a candidate block does not extend the current head.

    Attributes:
        reason: The specific linkage rule that was broken.
    """

    def __init__(self, reason: RejectionReason) -> None:
        self.reason = reason
        super().__init__(f"Candidate rejected: {reason.value}")
