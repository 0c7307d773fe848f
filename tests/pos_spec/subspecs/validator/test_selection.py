"""Tests for stake-weighted leader selection."""

from __future__ import annotations

import random
from collections import Counter
from unittest.mock import MagicMock

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pos_spec.subspecs.containers import Validator
from pos_spec.subspecs.validator import select_leader
from pos_spec.types import NoEligibleValidatorsError, SelectionInvariantError


def make_validators(*stakes: int) -> list[Validator]:
    """One validator per stake, with distinct addresses."""
    return [Validator(stake=stake, address=f"{i:032x}") for i, stake in enumerate(stakes)]


def fixed_draw(value: int) -> MagicMock:
    """Random source whose randrange always returns `value`."""
    rng = MagicMock(spec=random.Random)
    rng.randrange.return_value = value
    return rng


class TestFixedDraws:
    """Selection for known draws."""

    def test_draw_below_first_boundary(self) -> None:
        """With stakes [60, 40], draw 59 picks the first validator."""
        validators = make_validators(60, 40)
        rng = fixed_draw(59)

        assert select_leader(validators, rng) is validators[0]
        rng.randrange.assert_called_once_with(100)

    def test_draw_at_first_boundary(self) -> None:
        """With stakes [60, 40], draw 60 picks the second validator."""
        validators = make_validators(60, 40)
        assert select_leader(validators, fixed_draw(60)) is validators[1]

    def test_extremes(self) -> None:
        """Draws 0 and total-1 hit the first and last validator."""
        validators = make_validators(60, 40)
        assert select_leader(validators, fixed_draw(0)) is validators[0]
        assert select_leader(validators, fixed_draw(99)) is validators[1]

    def test_zero_stake_never_wins(self) -> None:
        """A zero stake is an empty slot in the walk."""
        validators = make_validators(0, 50)
        rng = fixed_draw(0)

        assert select_leader(validators, rng) is validators[1]
        rng.randrange.assert_called_once_with(50)

    def test_total_excludes_negative_stakes(self) -> None:
        """The draw range covers positive stakes only."""
        validators = make_validators(60, -20, 40)
        rng = fixed_draw(10)

        select_leader(validators, rng)
        rng.randrange.assert_called_once_with(100)


class TestNegativeStakeWalk:
    """Negative stakes still shift the running sum."""

    def test_earlier_negative_shifts_boundaries(self) -> None:
        """A leading -10 moves the second validator's window down by 10."""
        validators = make_validators(-10, 60, 40)
        # Running sums: -10, 50, 90.
        assert select_leader(validators, fixed_draw(49)) is validators[1]
        assert select_leader(validators, fixed_draw(50)) is validators[2]

    def test_uncovered_draw_raises(self) -> None:
        """Draws past the shrunken running sum hit no validator."""
        validators = make_validators(-10, 60, 40)

        with pytest.raises(SelectionInvariantError) as exc_info:
            select_leader(validators, fixed_draw(95))
        assert exc_info.value.draw == 95
        assert exc_info.value.total_stake == 100


class TestNoEligible:
    """Selection fails when nobody holds stake."""

    @pytest.mark.parametrize("stakes", [(), (0,), (0, 0), (-10, 0, -5)])
    def test_raises(self, stakes: tuple[int, ...]) -> None:
        """Only non-positive stakes means no eligible validator."""
        validators = make_validators(*stakes)
        rng = fixed_draw(0)

        with pytest.raises(NoEligibleValidatorsError) as exc_info:
            select_leader(validators, rng)
        assert exc_info.value.num_validators == len(stakes)
        rng.randrange.assert_not_called()


class TestDistribution:
    """Selection frequency follows stake."""

    def test_converges_to_stake_share(self) -> None:
        """Over many draws, [60, 40] wins close to 60% / 40%."""
        validators = make_validators(60, 40)
        rng = random.Random(42)
        trials = 20_000

        wins = Counter(select_leader(validators, rng).address for _ in range(trials))

        share = wins[validators[0].address] / trials
        assert share == pytest.approx(0.6, abs=0.02)

    def test_seeded_selection_reproducible(self) -> None:
        """The same seed produces the same sequence of leaders."""
        validators = make_validators(30, 30, 40)
        first = [select_leader(validators, random.Random(5)).address for _ in range(3)]
        second = [select_leader(validators, random.Random(5)).address for _ in range(3)]
        assert first == second


@given(
    stakes=st.lists(st.integers(min_value=0, max_value=1_000), min_size=1, max_size=8),
    seed=st.integers(min_value=0, max_value=2**32),
)
def test_winner_always_has_positive_stake(stakes: list[int], seed: int) -> None:
    """Without negative stakes, the winner is always eligible."""
    validators = make_validators(*stakes)

    if not any(stake > 0 for stake in stakes):
        with pytest.raises(NoEligibleValidatorsError):
            select_leader(validators, random.Random(seed))
        return

    assert select_leader(validators, random.Random(seed)).stake > 0
