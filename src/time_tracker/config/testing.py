import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "time_tracker_test"),
}

ADMIN_EMAIL = "admin@test.local"
ADMIN_PASSWORD = "admin-pass"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

CHANGE_FEED_HISTORY = 50

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
