from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from MASANIELLO.server.common.utils.types import coerce_finite_float, coerce_finite_int
from MASANIELLO.server.staking.combinatorics import (
    PMFFunction,
    binomial_pmf,
    binomial_pmf_stable,
    prob_at_least,
)
from MASANIELLO.server.staking.errors import StrategyConfigurationError
from MASANIELLO.server.staking.types import (
    PROBABILITY_METHOD_DIRECT,
    PROBABILITY_METHOD_STABLE,
    PROBABILITY_METHODS,
    ConfigError,
)


###############################################################################
@dataclass(frozen=True)
class StrategyConfig:
    capital: float
    payout_percent: float
    total_trades: int
    target_wins: int
    target_capital: float
    probability_method: str = PROBABILITY_METHOD_DIRECT

    # -------------------------------------------------------------------------
    @property
    def odds(self) -> float:
        return 1 + (self.payout_percent / 100)

    # -------------------------------------------------------------------------
    @property
    def implied_probability(self) -> float:
        return 1 / self.odds

    # -------------------------------------------------------------------------
    @property
    def pmf(self) -> PMFFunction:
        return resolve_pmf(self.probability_method)


# -----------------------------------------------------------------------------
def resolve_pmf(method: str) -> PMFFunction:
    if method == PROBABILITY_METHOD_STABLE:
        return binomial_pmf_stable
    return binomial_pmf


# -----------------------------------------------------------------------------
def _parse_positive_float(value: Any) -> float:
    candidate = coerce_finite_float(value)
    if candidate is None or candidate <= 0:
        raise StrategyConfigurationError(ConfigError.INVALID_INPUT)
    return candidate


# -----------------------------------------------------------------------------
def _parse_count(value: Any, minimum: int) -> int:
    candidate = coerce_finite_int(value)
    if candidate is None or candidate < minimum:
        raise StrategyConfigurationError(ConfigError.INVALID_INPUT)
    return candidate


# -----------------------------------------------------------------------------
def build_strategy_config(
    capital: Any,
    payout_percent: Any,
    total_trades: Any,
    target_wins: Any,
    probability_method: str = PROBABILITY_METHOD_DIRECT,
) -> StrategyConfig:
    """Validate raw inputs and derive the target capital of a run.

    Raises ``StrategyConfigurationError`` with ``INVALID_INPUT`` for missing,
    non-numeric or out of range values, ``TARGET_EXCEEDS_TRADES`` when more
    wins are requested than trades, and ``IMPOSSIBLE_TARGET`` when the
    probability of reaching the target evaluates to exactly zero or to a
    non-finite value, or the derived target capital is not a positive real.
    """
    if probability_method not in PROBABILITY_METHODS:
        raise StrategyConfigurationError(
            ConfigError.INVALID_INPUT,
            f"Unknown probability method: {probability_method}",
        )

    resolved_capital = _parse_positive_float(capital)
    resolved_payout = _parse_positive_float(payout_percent)
    resolved_trades = _parse_count(total_trades, minimum=1)
    resolved_wins = _parse_count(target_wins, minimum=0)
    if resolved_wins > resolved_trades:
        raise StrategyConfigurationError(ConfigError.TARGET_EXCEEDS_TRADES)

    odds = 1 + (resolved_payout / 100)
    success_probability = prob_at_least(
        resolved_wins, resolved_trades, 1 / odds, pmf=resolve_pmf(probability_method)
    )
    # direct accumulation overflows to inf or nan for large trade counts
    if not math.isfinite(success_probability) or success_probability <= 0:
        raise StrategyConfigurationError(ConfigError.IMPOSSIBLE_TARGET)

    target_capital = resolved_capital / success_probability
    if not math.isfinite(target_capital) or target_capital <= 0:
        raise StrategyConfigurationError(ConfigError.IMPOSSIBLE_TARGET)

    return StrategyConfig(
        capital=resolved_capital,
        payout_percent=resolved_payout,
        total_trades=resolved_trades,
        target_wins=resolved_wins,
        target_capital=target_capital,
        probability_method=probability_method,
    )
