from __future__ import annotations

import os
from typing import Any

from MASANIELLO.server.configurations.base import ensure_mapping, load_configuration_data
from MASANIELLO.server.entities.configuration import (
    FastAPISettings,
    ServerSettings,
    SessionSettings,
    StakingSettings,
)

from MASANIELLO.server.common.constants import (
    CONFIGURATIONS_FILE,
    DEFAULT_CAPITAL,
    DEFAULT_MAX_SESSIONS,
    DEFAULT_PAYOUT_PERCENT,
    DEFAULT_TARGET_WINS,
    DEFAULT_TOTAL_TRADES,
    FASTAPI_DESCRIPTION,
    FASTAPI_TITLE,
    FASTAPI_VERSION,
)

from MASANIELLO.server.common.utils.types import (
    coerce_float,
    coerce_int,
    coerce_str,
)
from MASANIELLO.server.staking.types import (
    PROBABILITY_METHOD_DIRECT,
    normalize_probability_method,
)


# [BUILDER FUNCTIONS]
###############################################################################
def _read_env_value(env_key: str, payload: dict[str, Any], payload_key: str) -> Any:
    env_value = os.getenv(env_key)
    if env_value is not None:
        return env_value
    return payload.get(payload_key)


# -----------------------------------------------------------------------------
def build_fastapi_settings(payload: dict[str, Any] | Any) -> FastAPISettings:
    data = ensure_mapping(payload)
    return FastAPISettings(
        title=coerce_str(data.get("title"), FASTAPI_TITLE),
        description=coerce_str(data.get("description"), FASTAPI_DESCRIPTION),
        version=coerce_str(data.get("version"), FASTAPI_VERSION),
    )


# -----------------------------------------------------------------------------
def build_session_settings(payload: dict[str, Any] | Any) -> SessionSettings:
    data = ensure_mapping(payload)
    return SessionSettings(
        max_sessions=coerce_int(
            _read_env_value("STAKING_MAX_SESSIONS", data, "max_sessions"),
            DEFAULT_MAX_SESSIONS,
            minimum=1,
            maximum=1024,
        ),
    )


# -----------------------------------------------------------------------------
def build_staking_settings(payload: dict[str, Any] | Any) -> StakingSettings:
    data = ensure_mapping(payload)
    total_trades = coerce_int(
        data.get("default_total_trades"), DEFAULT_TOTAL_TRADES, minimum=1
    )
    method = coerce_str(
        _read_env_value("STAKING_PROBABILITY_METHOD", data, "probability_method"),
        PROBABILITY_METHOD_DIRECT,
    )
    return StakingSettings(
        default_capital=coerce_float(
            data.get("default_capital"), DEFAULT_CAPITAL, minimum=0.01
        ),
        default_payout_percent=coerce_float(
            data.get("default_payout_percent"), DEFAULT_PAYOUT_PERCENT, minimum=0.01
        ),
        default_total_trades=total_trades,
        default_target_wins=coerce_int(
            data.get("default_target_wins"),
            min(DEFAULT_TARGET_WINS, total_trades),
            minimum=0,
            maximum=total_trades,
        ),
        probability_method=normalize_probability_method(method),
    )


# -----------------------------------------------------------------------------
def build_server_settings(data: dict[str, Any] | Any) -> ServerSettings:
    payload = ensure_mapping(data)
    fastapi_payload = ensure_mapping(payload.get("fastapi"))
    sessions_payload = ensure_mapping(payload.get("sessions"))
    staking_payload = ensure_mapping(payload.get("staking"))

    return ServerSettings(
        fastapi=build_fastapi_settings(fastapi_payload),
        sessions=build_session_settings(sessions_payload),
        staking=build_staking_settings(staking_payload),
    )


# [SERVER CONFIGURATION LOADER]
###############################################################################
def get_server_settings(config_path: str | None = None) -> ServerSettings:
    path = config_path or CONFIGURATIONS_FILE
    payload = load_configuration_data(path)

    return build_server_settings(payload)


server_settings = get_server_settings()
