import os

API_CONFIG = {
    "base_url": os.getenv("API_BASE_URL", "http://localhost:5000/api"),
    "timeout": float(os.getenv("API_TIMEOUT_SECONDS", "10")),
}

API_USERNAME = os.getenv("API_USERNAME", "")
API_PASSWORD = os.getenv("API_PASSWORD", "")

EXPORT_FILENAME = os.getenv("EXPORT_FILENAME", "time-logs.csv")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
