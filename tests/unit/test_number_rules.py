"""Tests for the pure number rules: primality, draws, arithmetic, report."""

from __future__ import annotations

import random

import pytest
from pydantic import ValidationError

from fancy_numbers.domain.number_rules import (
    calculate,
    draw_random_number,
    format_report,
    is_prime,
)


def _naive_is_prime(n: int) -> bool:
    return n >= 2 and all(n % d for d in range(2, n))


class TestIsPrime:
    @pytest.mark.parametrize(
        "n, expected",
        [(0, False), (1, False), (2, True), (3, True), (10, False), (11, True), (25, False), (49, False), (200, False), (199, True)],
    )
    def test_known_values(self, n, expected):
        assert is_prime(n) is expected

    def test_negative_numbers_are_not_prime(self):
        assert is_prime(-7) is False

    def test_matches_naive_division_over_sum_range(self):
        for n in range(2, 201):
            assert is_prime(n) == _naive_is_prime(n), n


class TestDrawRandomNumber:
    def test_draws_stay_in_range(self):
        rng = random.Random(1234)
        draws = [draw_random_number(rng) for _ in range(1000)]
        assert all(1 <= d <= 100 for d in draws)

    def test_seeded_source_is_deterministic(self):
        first = [draw_random_number(random.Random(7)) for _ in range(3)]
        second = [draw_random_number(random.Random(7)) for _ in range(3)]
        assert first == second


class TestCalculate:
    def test_invariants_hold_for_all_pairs(self):
        for a in range(1, 101):
            for b in range(1, 101):
                result = calculate(a, b)
                assert result.sum == a + b
                assert result.product == a * b
                assert result.average == (a + b) / 2.0
                assert result.is_prime == is_prime(a + b)

    def test_average_is_not_truncated(self):
        assert calculate(5, 6).average == 5.5

    def test_result_is_immutable(self):
        result = calculate(1, 2)
        with pytest.raises(ValidationError):
            result.sum = 4


class TestFormatReport:
    def test_full_report(self):
        assert format_report(calculate(10, 20)) == (
            "Fancy Calculation Results:\n"
            "Numbers: 10 and 20\n"
            "Sum: 30 (not prime)\n"
            "Product: 200\n"
            "Average: 15.00\n"
        )

    def test_prime_sum(self):
        assert "Sum: 11 (prime)" in format_report(calculate(5, 6))

    def test_half_average_uses_decimal_point(self):
        assert "Average: 5.50" in format_report(calculate(5, 6))
