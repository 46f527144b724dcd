TD_USER_EMAIL = "tester@example.com"
TD_USER_PASSWORD = "test-password"
TD_COMPANY_ID = "test-company"
TD_API_URL = "https://td.invalid/api/1.0"
TOKEN_CACHE_PATH = ".td_token_cache.test.json"
TOKEN_TTL_DAYS = 180

MONDAY_API_KEY = "test-monday-key"
MONDAY_API_URL = "https://monday.invalid/v2"
BOARD_LIST_LIMIT = 100
ITEM_PAGE_LIMIT = 500

USER_GROUP_MAP = '{"ana@example.com": "Support"}'
COLUMN_TITLES = ""

TIMEZONE = "America/Chicago"
IDLE_THRESHOLD_MINUTES = 180
PERIOD_YEAR_ROLLOVER = True

HTTP_TIMEOUT_SECONDS = 5
HTTP_MAX_RETRIES = 0

LOG_LEVEL = "DEBUG"
DRY_RUN = True
