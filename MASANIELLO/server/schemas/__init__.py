from __future__ import annotations

from MASANIELLO.server.schemas.staking import (
    StakingDefaultsResponse,
    StakingSessionResponse,
    StakingShutdownResponse,
    StakingSnapshotResponse,
    StakingStartRequest,
    TradeOutcomeRequest,
    TradeOutcomeResponse,
    TradeRecordResponse,
)

__all__ = [
    "StakingStartRequest",
    "StakingDefaultsResponse",
    "StakingSnapshotResponse",
    "StakingSessionResponse",
    "TradeRecordResponse",
    "TradeOutcomeRequest",
    "TradeOutcomeResponse",
    "StakingShutdownResponse",
]
