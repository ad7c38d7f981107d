from __future__ import annotations

"""Masaniello staking engine.

A run is built with `configure(capital, payout_percent, total_trades,
target_wins)`, which derives the target capital once. Callers then alternate
`next_stake()` (read only) and `apply_outcome(is_win)` for each realized
trade until the run leaves the ACTIVE status. Terminal runs ignore further
outcomes. Starting over means building a new engine with `configure` or
`StakingEngine.restart`.
"""

import math
from typing import Any

from MASANIELLO.server.common.utils.logger import logger
from MASANIELLO.server.staking.config import StrategyConfig, build_strategy_config
from MASANIELLO.server.staking.errors import StrategyConfigurationError
from MASANIELLO.server.staking.state import StrategyState, TradeRecord
from MASANIELLO.server.staking.types import (
    PROBABILITY_METHOD_DIRECT,
    RunStatus,
    outcome_label,
    status_message,
)


# -----------------------------------------------------------------------------
def remaining_trades(config: StrategyConfig, state: StrategyState) -> int:
    return config.total_trades - state.trades_taken


# -----------------------------------------------------------------------------
def wins_needed(config: StrategyConfig, state: StrategyState) -> int:
    return config.target_wins - state.wins_achieved


# -----------------------------------------------------------------------------
def compute_next_stake(config: StrategyConfig, state: StrategyState) -> float:
    if not state.active:
        return 0.0

    remaining = remaining_trades(config, state)
    needed = wins_needed(config, state)
    if remaining == 0 or needed <= 0:
        return 0.0
    # target can no longer be reached
    if needed > remaining:
        return 0.0

    pivot_probability = config.pmf(
        needed - 1, remaining - 1, config.implied_probability
    )
    stake = (config.target_capital / config.odds) * pivot_probability
    if not math.isfinite(stake):
        return 0.0

    # a clamped stake keeps the configured target capital
    if stake > state.current_balance:
        stake = state.current_balance
    if stake < 0:
        stake = 0.0

    return stake


# -----------------------------------------------------------------------------
def evaluate_status(config: StrategyConfig, state: StrategyState) -> RunStatus:
    remaining = remaining_trades(config, state)
    needed = wins_needed(config, state)
    if needed <= 0:
        return RunStatus.SUCCESS
    if needed > remaining:
        return RunStatus.STOP_LOSS
    if remaining == 0:
        return RunStatus.EXHAUSTED
    return RunStatus.ACTIVE


###############################################################################
class StakingEngine:
    def __init__(self, config: StrategyConfig, state: StrategyState | None = None) -> None:
        self.config = config
        self.state = state if state is not None else StrategyState.initial(config.capital)

    # -------------------------------------------------------------------------
    @classmethod
    def configure(
        cls,
        capital: Any,
        payout_percent: Any,
        total_trades: Any,
        target_wins: Any,
        probability_method: str = PROBABILITY_METHOD_DIRECT,
    ) -> StakingEngine:
        try:
            config = build_strategy_config(
                capital,
                payout_percent,
                total_trades,
                target_wins,
                probability_method=probability_method,
            )
        except StrategyConfigurationError as exc:
            logger.warning("Rejected staking configuration: %s", exc.code.value)
            raise

        logger.info(
            "Configured Masaniello run: capital=%.2f payout=%.2f%% trades=%d wins=%d target=%.2f",
            config.capital,
            config.payout_percent,
            config.total_trades,
            config.target_wins,
            config.target_capital,
        )
        engine = cls(config)
        engine.check_completion()
        return engine

    # -------------------------------------------------------------------------
    def restart(self) -> StakingEngine:
        return StakingEngine.configure(
            self.config.capital,
            self.config.payout_percent,
            self.config.total_trades,
            self.config.target_wins,
            probability_method=self.config.probability_method,
        )

    # -------------------------------------------------------------------------
    @property
    def status(self) -> RunStatus:
        return self.state.status

    # -------------------------------------------------------------------------
    @property
    def active(self) -> bool:
        return self.state.active

    # -------------------------------------------------------------------------
    @property
    def remaining_trades(self) -> int:
        return remaining_trades(self.config, self.state)

    # -------------------------------------------------------------------------
    @property
    def wins_needed(self) -> int:
        return wins_needed(self.config, self.state)

    # -------------------------------------------------------------------------
    def next_stake(self) -> float:
        return compute_next_stake(self.config, self.state)

    # -------------------------------------------------------------------------
    def apply_outcome(self, is_win: bool) -> tuple[StrategyState, RunStatus]:
        if not self.state.active:
            return self.state, self.state.status

        stake = self.next_stake()
        if stake <= 0:
            return self.state, self.state.status

        if is_win:
            profit_or_loss = stake * (self.config.payout_percent / 100)
            self.state.wins_achieved += 1
        else:
            profit_or_loss = -stake

        self.state.current_balance += profit_or_loss
        self.state.trades_taken += 1
        self.state.history.append(
            TradeRecord(
                index=self.state.trades_taken,
                outcome=outcome_label(is_win),
                stake=stake,
                profit_or_loss=profit_or_loss,
                balance_after=self.state.current_balance,
            )
        )
        logger.debug(
            "Trade %d %s: stake=%.4f pl=%.4f balance=%.4f",
            self.state.trades_taken,
            outcome_label(is_win),
            stake,
            profit_or_loss,
            self.state.current_balance,
        )

        return self.state, self.check_completion()

    # -------------------------------------------------------------------------
    def check_completion(self) -> RunStatus:
        if not self.state.active:
            return self.state.status

        status = evaluate_status(self.config, self.state)
        if status is not RunStatus.ACTIVE:
            self.state.active = False
            self.state.status = status
            logger.info(
                "Masaniello run finished with %s after %d trades (balance %.2f)",
                status.value,
                self.state.trades_taken,
                self.state.current_balance,
            )
        return status

    # -------------------------------------------------------------------------
    def snapshot(self) -> dict[str, Any]:
        config = self.config
        state = self.state
        return {
            "capital": config.capital,
            "current_balance": state.current_balance,
            "trades_taken": state.trades_taken,
            "total_trades": config.total_trades,
            "progress": f"{state.trades_taken} / {config.total_trades}",
            "wins_achieved": state.wins_achieved,
            "target_wins": config.target_wins,
            "wins_needed": max(0, self.wins_needed),
            "payout_percent": config.payout_percent,
            "odds": config.odds,
            "implied_probability": config.implied_probability,
            "target_capital": config.target_capital,
            "next_stake": self.next_stake(),
            "active": state.active,
            "status": state.status.value,
            "status_message": status_message(state.status),
            "history": [record.to_dict() for record in state.history],
        }


# -----------------------------------------------------------------------------
def configure(
    capital: Any,
    payout_percent: Any,
    total_trades: Any,
    target_wins: Any,
    *,
    probability_method: str = PROBABILITY_METHOD_DIRECT,
) -> StakingEngine:
    return StakingEngine.configure(
        capital,
        payout_percent,
        total_trades,
        target_wins,
        probability_method=probability_method,
    )
