from __future__ import annotations

from MASANIELLO.server.staking.types import CONFIG_ERROR_MESSAGES, ConfigError


###############################################################################
class StrategyConfigurationError(ValueError):
    """Raised when a run cannot be configured from the supplied parameters.

    The ``code`` attribute identifies the rejection reason so callers can react
    to it without parsing the message. No run is created when this is raised.
    """

    def __init__(self, code: ConfigError, message: str | None = None) -> None:
        self.code = code
        self.message = message or CONFIG_ERROR_MESSAGES[code]
        super().__init__(self.message)

    # -------------------------------------------------------------------------
    def to_payload(self) -> dict[str, str]:
        return {"code": self.code.value, "message": self.message}
