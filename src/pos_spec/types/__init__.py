"""Reusable type definitions for the proof-of-stake specification."""

from .base import CamelModel, MutableModel, StrictBaseModel
from .exceptions import (
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
from .hash import HASH_HEX_LENGTH, HexDigest, sha256_hex

__all__ = [
    # Core types
    "CamelModel",
    "MutableModel",
    "StrictBaseModel",
    "HexDigest",
    "HASH_HEX_LENGTH",
    "sha256_hex",
    # Exceptions
    "PoSError",
    "IntegrityError",
    "LinkageMismatchError",
    "TimestampOrderError",
    "HashRecomputationError",
    "SelectionError",
    "NoEligibleValidatorsError",
    "SelectionInvariantError",
    "AdmissionError",
    "ChainCorruptedError",
    "CandidateRejectedError",
    "UnknownValidatorError",
    "RejectionReason",
]
