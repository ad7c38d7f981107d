from __future__ import annotations

import math
from typing import Any


# -----------------------------------------------------------------------------
def coerce_finite_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        candidate = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isfinite(candidate):
        return candidate
    return None


# -----------------------------------------------------------------------------
def coerce_finite_int(value: Any) -> int | None:
    candidate = coerce_finite_float(value)
    if candidate is None or not candidate.is_integer():
        return None
    return int(candidate)


# -----------------------------------------------------------------------------
def coerce_float(
    value: Any,
    default: float,
    minimum: float | None = None,
    maximum: float | None = None,
) -> float:
    candidate = coerce_finite_float(value)
    if candidate is None:
        return default
    if minimum is not None:
        candidate = max(minimum, candidate)
    if maximum is not None:
        candidate = min(maximum, candidate)
    return candidate


# -----------------------------------------------------------------------------
def coerce_int(
    value: Any,
    default: int,
    minimum: int | None = None,
    maximum: int | None = None,
) -> int:
    candidate = coerce_finite_int(value)
    if candidate is None:
        return default
    if minimum is not None:
        candidate = max(minimum, candidate)
    if maximum is not None:
        candidate = min(maximum, candidate)
    return candidate


# -----------------------------------------------------------------------------
def coerce_str(value: Any, default: str) -> str:
    if value is None:
        return default
    candidate = str(value).strip()
    return candidate or default
