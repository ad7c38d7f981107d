from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


###############################################################################
class StakingStartRequest(BaseModel):
    capital: float | None = None
    payout_percent: float | None = None
    total_trades: int | None = None
    target_wins: int | None = None


###############################################################################
class StakingDefaultsResponse(BaseModel):
    capital: float
    payout_percent: float
    total_trades: int
    target_wins: int
    probability_method: str


###############################################################################
class TradeRecordResponse(BaseModel):
    index: int
    outcome: str
    stake: float
    profit_or_loss: float
    balance_after: float


###############################################################################
class StakingSnapshotResponse(BaseModel):
    capital: float
    current_balance: float
    trades_taken: int
    total_trades: int
    progress: str
    wins_achieved: int
    target_wins: int
    wins_needed: int
    payout_percent: float
    odds: float
    implied_probability: float
    target_capital: float
    next_stake: float
    active: bool
    status: str
    status_message: str
    history: list[TradeRecordResponse] = Field(default_factory=list)


###############################################################################
class StakingSessionResponse(BaseModel):
    session_id: str
    snapshot: StakingSnapshotResponse


###############################################################################
class TradeOutcomeRequest(BaseModel):
    outcome: Literal["WIN", "LOSS"]


###############################################################################
class TradeOutcomeResponse(BaseModel):
    session_id: str
    applied: bool
    status: str
    snapshot: StakingSnapshotResponse


###############################################################################
class StakingShutdownResponse(BaseModel):
    session_id: str
    status: str
