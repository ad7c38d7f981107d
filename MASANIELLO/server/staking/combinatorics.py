from __future__ import annotations

"""Binomial primitives used to derive the Masaniello schedule.

The direct functions accumulate in plain floating point, so they overflow to
``inf`` or underflow to ``0.0`` once trade counts grow large. The ``*_stable`` variants work in log space through
``math.lgamma`` and stay finite for large trade counts.
"""

import math
from collections.abc import Callable

PMFFunction = Callable[[int, int, float], float]


# -----------------------------------------------------------------------------
def factorial(n: int) -> float:
    if n < 0:
        return 0.0
    result = 1.0
    for i in range(2, n + 1):
        result *= i
    return result


# -----------------------------------------------------------------------------
def combinations(n: int, r: int) -> float:
    if r < 0 or r > n:
        return 0.0
    if r == 0 or r == n:
        return 1.0
    if r > n / 2:
        r = n - r
    result = 1.0
    # multiply first, then divide, to keep intermediate values small
    for i in range(1, r + 1):
        result = result * (n - i + 1) / i
    return result


# -----------------------------------------------------------------------------
def binomial_pmf(k: int, n: int, p: float) -> float:
    return combinations(n, k) * math.pow(p, k) * math.pow(1.0 - p, n - k)


# -----------------------------------------------------------------------------
def log_combinations(n: int, r: int) -> float:
    if r < 0 or r > n:
        return -math.inf
    return math.lgamma(n + 1) - math.lgamma(r + 1) - math.lgamma(n - r + 1)


# -----------------------------------------------------------------------------
def binomial_pmf_stable(k: int, n: int, p: float) -> float:
    if k < 0 or k > n:
        return 0.0
    if p <= 0.0:
        return 1.0 if k == 0 else 0.0
    if p >= 1.0:
        return 1.0 if k == n else 0.0
    log_mass = log_combinations(n, k) + k * math.log(p) + (n - k) * math.log1p(-p)
    return math.exp(log_mass)


# -----------------------------------------------------------------------------
def prob_at_least(k: int, n: int, p: float, pmf: PMFFunction = binomial_pmf) -> float:
    total = 0.0
    for i in range(k, n + 1):
        total += pmf(i, n, p)
    return total
