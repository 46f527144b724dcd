"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TIMEZONE = "America/Chicago"
DEFAULT_IDLE_THRESHOLD_MINUTES = 180
DEFAULT_TOKEN_TTL_DAYS = 180
DEFAULT_TOKEN_CACHE_PATH = ".td_token_cache.json"
DEFAULT_HTTP_TIMEOUT_SECONDS = 30
DEFAULT_BOARD_LIST_LIMIT = 100
DEFAULT_ITEM_PAGE_LIMIT = 500

TD_API_URL = "https://api2.timedoctor.com/api/1.0"
MONDAY_API_URL = "https://api.monday.com/v2"

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DEFAULT_COLUMN_TITLES = {
    "clock_in": "Clock In",
    "clock_out": "Clock Out",
    "date": "Date",
    "total_worked_hours": "Total Worked Hours",
}
