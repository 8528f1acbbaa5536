import os

API_CONFIG = {
    "base_url": os.getenv("API_BASE_URL", "http://localhost:5000/api"),
    "timeout": float(os.getenv("API_TIMEOUT_SECONDS", "10")),
}

# Credentials used by the CLI to open a session for one command
API_USERNAME = os.getenv("API_USERNAME", "")
API_PASSWORD = os.getenv("API_PASSWORD", "")

EXPORT_FILENAME = os.getenv("EXPORT_FILENAME", "time-logs.csv")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
