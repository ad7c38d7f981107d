from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from MASANIELLO.server.staking.types import RunStatus


###############################################################################
@dataclass(frozen=True)
class TradeRecord:
    index: int
    outcome: str
    stake: float
    profit_or_loss: float
    balance_after: float

    # -------------------------------------------------------------------------
    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


###############################################################################
@dataclass
class StrategyState:
    current_balance: float
    trades_taken: int = 0
    wins_achieved: int = 0
    active: bool = True
    status: RunStatus = RunStatus.ACTIVE
    history: list[TradeRecord] = field(default_factory=list)

    # -------------------------------------------------------------------------
    @classmethod
    def initial(cls, capital: float) -> StrategyState:
        return cls(current_balance=float(capital))

    # -------------------------------------------------------------------------
    def total_profit_or_loss(self) -> float:
        return sum(record.profit_or_loss for record in self.history)
