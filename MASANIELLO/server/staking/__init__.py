from __future__ import annotations

from MASANIELLO.server.staking.combinatorics import (
    binomial_pmf,
    binomial_pmf_stable,
    combinations,
    factorial,
    prob_at_least,
)
from MASANIELLO.server.staking.config import StrategyConfig, build_strategy_config
from MASANIELLO.server.staking.engine import (
    StakingEngine,
    compute_next_stake,
    configure,
)
from MASANIELLO.server.staking.errors import StrategyConfigurationError
from MASANIELLO.server.staking.state import StrategyState, TradeRecord
from MASANIELLO.server.staking.types import (
    OUTCOME_LOSS,
    OUTCOME_WIN,
    PROBABILITY_METHOD_DIRECT,
    PROBABILITY_METHOD_STABLE,
    ConfigError,
    RunStatus,
)

__all__ = [
    "factorial",
    "combinations",
    "binomial_pmf",
    "binomial_pmf_stable",
    "prob_at_least",
    "StrategyConfig",
    "build_strategy_config",
    "StrategyState",
    "TradeRecord",
    "StakingEngine",
    "compute_next_stake",
    "configure",
    "StrategyConfigurationError",
    "OUTCOME_WIN",
    "OUTCOME_LOSS",
    "PROBABILITY_METHOD_DIRECT",
    "PROBABILITY_METHOD_STABLE",
    "ConfigError",
    "RunStatus",
]
