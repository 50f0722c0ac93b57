import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker"),
    "connect_timeout": int(os.getenv("DB_CONNECT_TIMEOUT", "10")),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Use scripts/init_db.py in production instead of applying the schema on boot.
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

RECENT_RECORDS_LIMIT = int(os.getenv("RECENT_RECORDS_LIMIT", "5"))
SESSION_COOKIE_SECURE = True
# Relative values are taken from the repository root, not the working directory.
UPLOAD_DIR = os.getenv("UPLOAD_DIR", "static/uploads/profile_images")
