from __future__ import annotations

import os

from dotenv import load_dotenv

from MASANIELLO.server.common.constants import ENV_FILE_PATH
from MASANIELLO.server.common.utils.logger import logger


###############################################################################
class EnvironmentVariables:
    def __init__(self, env_path: str = ENV_FILE_PATH) -> None:
        self.env_path = env_path
        self.loaded = False
        if os.path.exists(self.env_path):
            self.loaded = load_dotenv(dotenv_path=self.env_path, override=False)
        else:
            logger.debug("No .env file found at %s", self.env_path)


env_variables = EnvironmentVariables()
