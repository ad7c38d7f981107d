from __future__ import annotations

import json

from MASANIELLO.server.configurations.base import ensure_mapping, load_configuration_data
from MASANIELLO.server.configurations.server import (
    build_server_settings,
    build_session_settings,
    build_staking_settings,
    get_server_settings,
)
from MASANIELLO.server.staking.types import (
    PROBABILITY_METHOD_DIRECT,
    PROBABILITY_METHOD_STABLE,
)


def test_empty_payload_falls_back_to_defaults(monkeypatch) -> None:
    monkeypatch.delenv("STAKING_PROBABILITY_METHOD", raising=False)
    monkeypatch.delenv("STAKING_MAX_SESSIONS", raising=False)

    settings = build_server_settings({})

    assert settings.fastapi.title == "Masaniello Staking Backend"
    assert settings.sessions.max_sessions == 16
    assert settings.staking.default_capital == 100.0
    assert settings.staking.default_payout_percent == 82.0
    assert settings.staking.default_total_trades == 10
    assert settings.staking.default_target_wins == 6
    assert settings.staking.probability_method == PROBABILITY_METHOD_DIRECT


def test_staking_values_are_coerced_and_bounded(monkeypatch) -> None:
    monkeypatch.delenv("STAKING_PROBABILITY_METHOD", raising=False)
    payload = {
        "default_capital": "250.5",
        "default_payout_percent": -3,
        "default_total_trades": "8",
        "default_target_wins": 12,
        "probability_method": "unknown",
    }

    settings = build_staking_settings(payload)

    assert settings.default_capital == 250.5
    assert settings.default_payout_percent == 0.01
    assert settings.default_total_trades == 8
    assert settings.default_target_wins == 8
    assert settings.probability_method == PROBABILITY_METHOD_DIRECT


def test_probability_method_env_overrides_json(monkeypatch) -> None:
    monkeypatch.setenv("STAKING_PROBABILITY_METHOD", "Stable")

    settings = build_staking_settings({"probability_method": "direct"})

    assert settings.probability_method == PROBABILITY_METHOD_STABLE


def test_max_sessions_env_overrides_json(monkeypatch) -> None:
    monkeypatch.setenv("STAKING_MAX_SESSIONS", "4")

    settings = build_session_settings({"max_sessions": 32})

    assert settings.max_sessions == 4


def test_ensure_mapping_rejects_non_mappings() -> None:
    assert ensure_mapping(None) == {}
    assert ensure_mapping(["a"]) == {}
    assert ensure_mapping({"a": 1}) == {"a": 1}


def test_missing_configuration_file_returns_empty_payload(tmp_path) -> None:
    assert load_configuration_data(str(tmp_path / "missing.json")) == {}


def test_server_settings_loaded_from_file(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("STAKING_PROBABILITY_METHOD", raising=False)
    monkeypatch.delenv("STAKING_MAX_SESSIONS", raising=False)
    path = tmp_path / "configurations.json"
    path.write_text(
        json.dumps(
            {
                "fastapi": {"title": "Custom"},
                "sessions": {"max_sessions": 2},
                "staking": {"default_total_trades": 20, "default_target_wins": 9},
            }
        ),
        encoding="utf-8",
    )

    settings = get_server_settings(str(path))

    assert settings.fastapi.title == "Custom"
    assert settings.sessions.max_sessions == 2
    assert settings.staking.default_total_trades == 20
    assert settings.staking.default_target_wins == 9
