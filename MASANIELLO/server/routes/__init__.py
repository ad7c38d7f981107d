from __future__ import annotations

from MASANIELLO.server.routes.staking import router as staking_router

__all__ = ["staking_router"]
