import os


class Config:
    # Raw strings; SyncConfig.from_settings parses and validates them

    # Time Doctor
    TD_USER_EMAIL = os.environ.get("TD_USER_EMAIL", "")
    TD_USER_PASSWORD = os.environ.get("TD_USER_PASSWORD", "")
    TD_COMPANY_ID = os.environ.get("TD_COMPANY_ID", "")
    TD_API_URL = os.environ.get("TD_API_URL", "https://api2.timedoctor.com/api/1.0")
    TOKEN_CACHE_PATH = os.environ.get("TOKEN_CACHE_PATH", ".td_token_cache.json")
    TOKEN_TTL_DAYS = os.environ.get("TOKEN_TTL_DAYS", "180")

    # monday.com
    MONDAY_API_KEY = os.environ.get("MONDAY_API_KEY", "")
    MONDAY_API_URL = os.environ.get("MONDAY_API_URL", "https://api.monday.com/v2")
    BOARD_LIST_LIMIT = os.environ.get("BOARD_LIST_LIMIT", "100")
    ITEM_PAGE_LIMIT = os.environ.get("ITEM_PAGE_LIMIT", "500")

    # Mapping (JSON strings, validated at startup)
    USER_GROUP_MAP = os.environ.get("USER_GROUP_MAP", "{}")
    COLUMN_TITLES = os.environ.get("COLUMN_TITLES", "")

    # Reconciliation rules
    TIMEZONE = os.environ.get("TIMEZONE", "America/Chicago")
    IDLE_THRESHOLD_MINUTES = os.environ.get("IDLE_THRESHOLD_MINUTES", "180")
    PERIOD_YEAR_ROLLOVER = os.environ.get("PERIOD_YEAR_ROLLOVER", "1")

    # Transport
    HTTP_TIMEOUT_SECONDS = os.environ.get("HTTP_TIMEOUT_SECONDS", "30")
    HTTP_MAX_RETRIES = os.environ.get("HTTP_MAX_RETRIES", "0")


# Flat names read by SyncConfig.from_settings
TD_USER_EMAIL = Config.TD_USER_EMAIL
TD_USER_PASSWORD = Config.TD_USER_PASSWORD
TD_COMPANY_ID = Config.TD_COMPANY_ID
TD_API_URL = Config.TD_API_URL
TOKEN_CACHE_PATH = Config.TOKEN_CACHE_PATH
TOKEN_TTL_DAYS = Config.TOKEN_TTL_DAYS
MONDAY_API_KEY = Config.MONDAY_API_KEY
MONDAY_API_URL = Config.MONDAY_API_URL
BOARD_LIST_LIMIT = Config.BOARD_LIST_LIMIT
ITEM_PAGE_LIMIT = Config.ITEM_PAGE_LIMIT
USER_GROUP_MAP = Config.USER_GROUP_MAP
COLUMN_TITLES = Config.COLUMN_TITLES
TIMEZONE = Config.TIMEZONE
IDLE_THRESHOLD_MINUTES = Config.IDLE_THRESHOLD_MINUTES
PERIOD_YEAR_ROLLOVER = Config.PERIOD_YEAR_ROLLOVER
HTTP_TIMEOUT_SECONDS = Config.HTTP_TIMEOUT_SECONDS
HTTP_MAX_RETRIES = Config.HTTP_MAX_RETRIES
