"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_RECENT_LIMIT = 5
WEEK_WINDOW_DAYS = 7
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400

MIN_PASSWORD_LENGTH = 6
MAX_PROFILE_IMAGE_BYTES = 1 * 1024 * 1024
# Relative to the repository root.
DEFAULT_UPLOAD_DIR = "static/uploads/profile_images"
ALLOWED_PROFILE_IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".pdf"})

MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
# Indexed by date.weekday() (Monday == 0).
DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
