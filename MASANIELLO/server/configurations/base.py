from __future__ import annotations

import json
import os
from collections.abc import Mapping
from typing import Any

from MASANIELLO.server.common.utils.logger import logger


# -----------------------------------------------------------------------------
def ensure_mapping(payload: Any) -> dict[str, Any]:
    if isinstance(payload, Mapping):
        return dict(payload)
    return {}


# -----------------------------------------------------------------------------
def load_configuration_data(path: str) -> dict[str, Any]:
    if not os.path.exists(path):
        logger.warning("Configuration file %s not found, using defaults", path)
        return {}
    with open(path, "r", encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise RuntimeError(f"Unable to parse configuration file {path}") from exc

    return ensure_mapping(payload)
