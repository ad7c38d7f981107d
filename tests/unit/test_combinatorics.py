from __future__ import annotations

import math

import pytest

from MASANIELLO.server.staking.combinatorics import (
    binomial_pmf,
    binomial_pmf_stable,
    combinations,
    factorial,
    log_combinations,
    prob_at_least,
)


def test_factorial_matches_small_values() -> None:
    assert factorial(0) == 1.0
    assert factorial(1) == 1.0
    assert factorial(5) == 120.0
    assert factorial(10) == 3628800.0


def test_factorial_negative_returns_zero() -> None:
    assert factorial(-1) == 0.0
    assert factorial(-10) == 0.0


def test_factorial_overflows_to_infinity() -> None:
    assert math.isfinite(factorial(170))
    assert factorial(171) == math.inf


def test_combinations_guards_and_edges() -> None:
    assert combinations(5, -1) == 0.0
    assert combinations(5, 6) == 0.0
    assert combinations(5, 0) == 1.0
    assert combinations(5, 5) == 1.0
    assert combinations(0, 0) == 1.0


def test_combinations_known_values() -> None:
    assert combinations(5, 2) == 10.0
    assert combinations(10, 3) == 120.0
    assert combinations(52, 5) == 2598960.0


@pytest.mark.parametrize("n", [1, 7, 20, 63])
def test_combinations_are_symmetric(n: int) -> None:
    for r in range(n + 1):
        assert combinations(n, r) == combinations(n, n - r)


def test_binomial_pmf_out_of_range_is_zero() -> None:
    assert binomial_pmf(-1, 10, 0.4) == 0.0
    assert binomial_pmf(11, 10, 0.4) == 0.0


@pytest.mark.parametrize("n,p", [(1, 0.5), (10, 0.3), (25, 1 / 1.82), (80, 0.9)])
def test_binomial_pmf_sums_to_one(n: int, p: float) -> None:
    total = sum(binomial_pmf(k, n, p) for k in range(n + 1))
    assert total == pytest.approx(1.0, abs=1e-12)


@pytest.mark.parametrize("n,p", [(1, 0.5), (10, 0.3), (40, 1 / 1.82)])
def test_prob_at_least_bounds(n: int, p: float) -> None:
    assert prob_at_least(0, n, p) == pytest.approx(1.0, abs=1e-12)
    assert prob_at_least(n + 1, n, p) == 0.0


def test_prob_at_least_all_successes_is_power() -> None:
    p = 1 / 1.82
    assert prob_at_least(5, 5, p) == pytest.approx(p**5, rel=1e-15)


def test_prob_at_least_underflows_to_exact_zero() -> None:
    p = 1 / 101
    assert prob_at_least(200, 200, p) == 0.0
    assert prob_at_least(200, 200, p, pmf=binomial_pmf_stable) == 0.0


def test_log_combinations_matches_direct_count() -> None:
    assert math.exp(log_combinations(52, 5)) == pytest.approx(2598960.0, rel=1e-12)
    assert log_combinations(5, 6) == -math.inf


def test_stable_pmf_handles_degenerate_probabilities() -> None:
    assert binomial_pmf_stable(0, 4, 0.0) == 1.0
    assert binomial_pmf_stable(2, 4, 0.0) == 0.0
    assert binomial_pmf_stable(4, 4, 1.0) == 1.0
    assert binomial_pmf_stable(3, 4, 1.0) == 0.0
    assert binomial_pmf_stable(5, 4, 0.5) == 0.0


@pytest.mark.parametrize("n", [10, 50, 120, 200])
def test_stable_and_direct_methods_agree(n: int) -> None:
    p = 1 / 1.82
    for k in (0, n // 4, n // 2, (3 * n) // 4, n):
        direct = prob_at_least(k, n, p)
        stable = prob_at_least(k, n, p, pmf=binomial_pmf_stable)
        assert stable == pytest.approx(direct, rel=1e-9)
