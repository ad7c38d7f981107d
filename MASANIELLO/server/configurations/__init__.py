from __future__ import annotations

from MASANIELLO.server.configurations.base import (
    ensure_mapping,
    load_configuration_data,
)
from MASANIELLO.server.entities.configuration import (
    FastAPISettings,
    ServerSettings,
    SessionSettings,
    StakingSettings,
)

from MASANIELLO.server.configurations.server import (
    server_settings,
    get_server_settings,
)

__all__ = [
    "ensure_mapping",
    "load_configuration_data",
    "FastAPISettings",
    "SessionSettings",
    "StakingSettings",
    "ServerSettings",
    "server_settings",
    "get_server_settings",
]
