from __future__ import annotations

from enum import Enum

OUTCOME_WIN = "WIN"
OUTCOME_LOSS = "LOSS"

PROBABILITY_METHOD_DIRECT = "direct"
PROBABILITY_METHOD_STABLE = "stable"
PROBABILITY_METHODS = (PROBABILITY_METHOD_DIRECT, PROBABILITY_METHOD_STABLE)


###############################################################################
class RunStatus(str, Enum):
    ACTIVE = "ACTIVE"
    SUCCESS = "SUCCESS"
    STOP_LOSS = "STOP_LOSS"
    EXHAUSTED = "EXHAUSTED"


###############################################################################
class ConfigError(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    TARGET_EXCEEDS_TRADES = "TARGET_EXCEEDS_TRADES"
    IMPOSSIBLE_TARGET = "IMPOSSIBLE_TARGET"


STATUS_MESSAGES = {
    RunStatus.ACTIVE: "Strategy in progress.",
    RunStatus.SUCCESS: "Target achieved. Strategy completed successfully.",
    RunStatus.STOP_LOSS: "Stop loss hit. Not enough trades left to reach target.",
    RunStatus.EXHAUSTED: "Strategy ended.",
}

CONFIG_ERROR_MESSAGES = {
    ConfigError.INVALID_INPUT: "Please enter valid positive numbers.",
    ConfigError.TARGET_EXCEEDS_TRADES: "Target wins cannot be higher than total trades.",
    ConfigError.IMPOSSIBLE_TARGET: "Target impossible (probability 0%). Adjust inputs.",
}


# -----------------------------------------------------------------------------
def outcome_label(is_win: bool) -> str:
    return OUTCOME_WIN if is_win else OUTCOME_LOSS


# -----------------------------------------------------------------------------
def normalize_probability_method(
    method: str | None, default: str = PROBABILITY_METHOD_DIRECT
) -> str:
    if method is None:
        return default
    candidate = str(method).strip().lower()
    if candidate in PROBABILITY_METHODS:
        return candidate
    return default


# -----------------------------------------------------------------------------
def status_message(status: RunStatus) -> str:
    return STATUS_MESSAGES.get(status, STATUS_MESSAGES[RunStatus.ACTIVE])
