"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from pos_spec.types import (
    AdmissionError,
    CandidateRejectedError,
    ChainCorruptedError,
    HashRecomputationError,
    IntegrityError,
    LinkageMismatchError,
    NoEligibleValidatorsError,
    PoSError,
    RejectionReason,
    SelectionError,
    SelectionInvariantError,
    TimestampOrderError,
    UnknownValidatorError,
)


class TestHierarchy:
    """Every error kind sits under the right family."""

    @pytest.mark.parametrize(
        ("error", "family"),
        [
            (LinkageMismatchError(1, expected="a", actual="b"), IntegrityError),
            (TimestampOrderError(1, previous=2, current=1), IntegrityError),
            (HashRecomputationError(1, expected="a", actual="b"), IntegrityError),
            (NoEligibleValidatorsError(0), SelectionError),
            (SelectionInvariantError(5, 10), SelectionError),
            (CandidateRejectedError(RejectionReason.HASH_MISMATCH), AdmissionError),
            (UnknownValidatorError("ab" * 16), AdmissionError),
        ],
    )
    def test_family(self, error: PoSError, family: type[PoSError]) -> None:
        """Errors are instances of their family and of PoSError."""
        assert isinstance(error, family)
        assert isinstance(error, PoSError)

    def test_chain_corrupted_wraps_cause(self) -> None:
        """ChainCorruptedError keeps the integrity violation it wraps."""
        cause = TimestampOrderError(3, previous=10, current=10)
        error = ChainCorruptedError(cause)

        assert isinstance(error, AdmissionError)
        assert error.cause is cause
        assert cause.message in error.message


class TestMessages:
    """Error messages carry the offending values."""

    def test_integrity_error_reports_index(self) -> None:
        """The block index is part of the message and kept as an attribute."""
        error = TimestampOrderError(4, previous=20, current=15)
        assert error.index == 4
        assert error.message.startswith("Block 4:")
        assert "15" in error.message and "20" in error.message

    def test_selection_invariant_attributes(self) -> None:
        """The uncovered draw and total are kept for diagnosis."""
        error = SelectionInvariantError(draw=95, total_stake=100)
        assert (error.draw, error.total_stake) == (95, 100)

    def test_candidate_rejected_reason(self) -> None:
        """The rejection reason text appears in the message."""
        error = CandidateRejectedError(RejectionReason.TIMESTAMP_NOT_AFTER_HEAD)
        assert error.reason is RejectionReason.TIMESTAMP_NOT_AFTER_HEAD
        assert RejectionReason.TIMESTAMP_NOT_AFTER_HEAD.value in error.message

    def test_unknown_validator_address(self) -> None:
        """The unregistered address is kept and reported."""
        error = UnknownValidatorError("cd" * 16)
        assert error.address == "cd" * 16
        assert "cd" * 16 in error.message

    def test_repr(self) -> None:
        """repr shows the class name and message."""
        error = NoEligibleValidatorsError(2)
        assert repr(error) == f"NoEligibleValidatorsError({error.message!r})"
