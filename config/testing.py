import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "interpreting_agency_test"),
}

DEBUG = False
TESTING = True

AUTO_INIT_DB = False

DEFAULT_MINIMUM_HOURS = 2.0

LOG_LEVEL = "WARNING"
