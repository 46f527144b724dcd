import os

from config.config import *  # noqa: F401,F403

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DRY_RUN = os.getenv("DRY_RUN", "0")

# Production talks to two remote APIs once per run; retry dropped connections
HTTP_MAX_RETRIES = os.getenv("HTTP_MAX_RETRIES", "2")
