API_CONFIG = {
    "base_url": "http://testserver/api",
    "timeout": 2.0,
}

API_USERNAME = "test-va"
API_PASSWORD = "test-password"

EXPORT_FILENAME = "time-logs.csv"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
