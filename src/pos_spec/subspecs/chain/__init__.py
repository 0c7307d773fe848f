"""Chain parameters, timestamps and integrity checks."""

from .clock import BlockClock, TimeSource
from .config import DEFAULT_CONFIG, ChainConfig
from .integrity import check_link, validate_chain

__all__ = [
    "BlockClock",
    "ChainConfig",
    "DEFAULT_CONFIG",
    "TimeSource",
    "check_link",
    "validate_chain",
]
