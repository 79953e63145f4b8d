import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "time_tracker"),
}

# Static admin credential pair checked on the login screen
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@timetracker.local")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "tracker@admin")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

CHANGE_FEED_HISTORY = int(os.getenv("CHANGE_FEED_HISTORY", "500"))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo employees on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
