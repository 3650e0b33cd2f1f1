"""Tests for sequential rounding."""

import pytest

from sequential_rounding import SequentialRounder, round_half_away_from_zero


class TestRoundHalfAwayFromZero:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.5, 1),
            (-0.5, -1),
            (2.5, 3),
            (-2.5, -3),
            (1.4999, 1),
            (-1.4999, -1),
            (17362.6, 17363),
            (-0.0, 0),
        ],
    )
    def test_rounds_to_nearest(self, value, expected):
        assert round_half_away_from_zero(value) == expected

    def test_returns_int(self):
        assert isinstance(round_half_away_from_zero(3.2), int)


class TestSequentialRounder:
    def test_starts_with_no_balance(self):
        assert SequentialRounder().balance == 0.0

    def test_first_value_rounds_plainly(self):
        rounder = SequentialRounder()
        assert rounder.round(20.0) == 20
        assert rounder.balance == 0.0

    def test_remainder_is_kept(self):
        rounder = SequentialRounder()
        assert rounder.round(1.3) == 1
        assert rounder.balance == pytest.approx(0.3)

    def test_remainder_is_carried_into_next_value(self):
        rounder = SequentialRounder()
        v1, v2 = 1.3, 1.3
        first = rounder.round(v1)
        second = rounder.round(v2)

        carry = v1 - round_half_away_from_zero(v1)
        assert first == 1
        assert second == round_half_away_from_zero(v2 + carry)
        assert second == 2
        assert rounder.balance == pytest.approx(-0.4)

    def test_ties_alternate_instead_of_drifting(self):
        rounder = SequentialRounder()
        outputs = [rounder.round(0.5) for _ in range(10)]

        assert outputs == [1, 0] * 5
        assert sum(outputs) == 5

    def test_drift_bounded_by_half(self):
        values = [0.4, 0.4, 0.4, -1.7, 2.25, 0.6, 0.6, -0.35, 10.45, 0.2]
        rounder = SequentialRounder()
        total = 0
        for i, v in enumerate(values, start=1):
            total += rounder.round(v)
            assert abs(total - sum(values[:i])) <= 0.5 + 1e-9

    def test_instances_do_not_share_balance(self):
        a = SequentialRounder()
        b = SequentialRounder()
        a.round(0.4)
        assert b.balance == 0.0


class TestLargeValues:
    def test_rounds_beyond_decimal_context_precision(self):
        assert round_half_away_from_zero(1e30) == 1000000000000000019884624838656
        assert round_half_away_from_zero(-1e30) == -1000000000000000019884624838656

    def test_rounder_accepts_huge_value(self):
        rounder = SequentialRounder()
        assert rounder.round(1e30) == int(1e30)
        assert rounder.balance == 0.0


class TestBalanceInterval:
    @pytest.mark.parametrize("value, expected_balance", [(0.5, -0.5), (-0.5, 0.5)])
    def test_ties_reach_both_ends(self, value, expected_balance):
        rounder = SequentialRounder()
        rounder.round(value)
        assert rounder.balance == expected_balance

    def test_balance_stays_within_closed_half(self):
        rounder = SequentialRounder()
        for v in [0.5, -0.5, -0.5, 0.3, 2.7, -1.25, 0.5, 0.5, -3.5]:
            rounder.round(v)
            assert -0.5 <= rounder.balance <= 0.5
