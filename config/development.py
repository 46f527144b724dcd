import os

from config.config import *  # noqa: F401,F403

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Dev runs only compute and log the write-set unless DRY_RUN=0
DRY_RUN = os.getenv("DRY_RUN", "1")
