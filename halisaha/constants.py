"""Global constants for the halisaha application."""

# Storage
USERS_FILE = "users.json"
MATCHES_FILE = "matches.json"

# Session keys
SESSION_USER_ID = "user_id"
SESSION_USERNAME = "username"

# Reliability
DEFAULT_RELIABILITY_SCORE = 100
LEAVE_PENALTY = -10

# Match vocabulary
SKILL_LEVELS = ("Başlangıç", "Orta Seviye", "İleri Seviye")
POSITIONS = ("Kaleci", "Defans", "Orta Saha", "Forvet")

MIN_MATCH_PLAYERS = 2
MIN_RATING = 1
MAX_RATING = 5

# Password hashing method passed to werkzeug
PASSWORD_HASH_METHOD = "pbkdf2:sha256"  # nosec B105
