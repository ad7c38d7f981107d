from __future__ import annotations

from os.path import abspath, join

# [PATHS]
###############################################################################
ROOT_DIR = abspath(join(__file__, "../../../.."))
PROJECT_DIR = join(ROOT_DIR, "MASANIELLO")
SETTING_PATH = join(PROJECT_DIR, "settings")
RESOURCES_PATH = join(PROJECT_DIR, "resources")
LOGS_PATH = join(RESOURCES_PATH, "logs")
ENV_FILE_PATH = join(SETTING_PATH, ".env")
LOG_FILENAME = "masaniello.log"

###############################################################################
CONFIGURATIONS_FILE = join(SETTING_PATH, "configurations.json")

# [FASTAPI]
###############################################################################
FASTAPI_TITLE = "Masaniello Staking Backend"
FASTAPI_DESCRIPTION = "FastAPI backend for Masaniello staking schedules"
FASTAPI_VERSION = "1.0.0"

# [STAKING DEFAULTS]
###############################################################################
DEFAULT_CAPITAL: float = 100.0
DEFAULT_PAYOUT_PERCENT: float = 82.0
DEFAULT_TOTAL_TRADES: int = 10
DEFAULT_TARGET_WINS: int = 6
DEFAULT_MAX_SESSIONS: int = 16
