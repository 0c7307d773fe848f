"""
Stake-weighted leader selection.

A random draw `r` is taken in `[0, total)` where `total` is the sum of the
positive stakes. The registry is then walked in order, accumulating every
stake, and the first validator whose running sum exceeds `r` wins.

The walk accumulates non-positive stakes as well. A validator with zero
stake occupies an empty slot and can never win. A validator with negative
stake shrinks the running sum for everyone after it, so the walk can end
without covering the draw. That case is reported as a
`SelectionInvariantError` instead of silently picking someone.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from pos_spec.subspecs.containers import Validator
from pos_spec.subspecs.metrics import leader_selections
from pos_spec.types import NoEligibleValidatorsError, SelectionInvariantError

logger = logging.getLogger(__name__)


def select_leader(validators: Sequence[Validator], rng: random.Random) -> Validator:
    """
    Pick the next block producer in proportion to stake.

    Args:
        validators: All validators, in registry order.
        rng: Random source for the draw.

    Returns:
        The selected validator. Always one with a positive stake.

    Raises:
        NoEligibleValidatorsError: If no validator has a positive stake.
        SelectionInvariantError: If the walk ends without covering the draw.
    """
    total_stake = sum(v.stake for v in validators if v.stake > 0)
    if total_stake == 0:
        raise NoEligibleValidatorsError(len(validators))

    draw = rng.randrange(total_stake)

    running_sum = 0
    for validator in validators:
        running_sum += validator.stake
        if draw < running_sum:
            leader_selections.inc()
            logger.debug(
                "Selected leader %s (draw %d of %d)", validator.address, draw, total_stake
            )
            return validator

    raise SelectionInvariantError(draw, total_stake)
