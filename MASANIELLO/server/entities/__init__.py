from __future__ import annotations

from MASANIELLO.server.entities.configuration import (
    FastAPISettings,
    ServerSettings,
    SessionSettings,
    StakingSettings,
)

__all__ = [
    "FastAPISettings",
    "SessionSettings",
    "StakingSettings",
    "ServerSettings",
]
