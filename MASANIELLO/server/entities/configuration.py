from __future__ import annotations

from dataclasses import dataclass


###############################################################################
@dataclass(frozen=True)
class FastAPISettings:
    title: str
    description: str
    version: str


###############################################################################
@dataclass(frozen=True)
class SessionSettings:
    max_sessions: int


###############################################################################
@dataclass(frozen=True)
class StakingSettings:
    default_capital: float
    default_payout_percent: float
    default_total_trades: int
    default_target_wins: int
    probability_method: str


###############################################################################
@dataclass(frozen=True)
class ServerSettings:
    fastapi: FastAPISettings
    sessions: SessionSettings
    staking: StakingSettings
