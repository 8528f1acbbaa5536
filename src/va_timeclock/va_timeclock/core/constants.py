"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SECONDS_PER_HOUR = 3600
HOURS_DISPLAY_PRECISION = 2

DEFAULT_API_BASE_URL = "http://localhost:5000/api"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_EXPORT_FILENAME = "time-logs.csv"

ISO_DATE_FORMAT = "%Y-%m-%d"
DISPLAY_TIME_FORMAT = "%H:%M:%S"
