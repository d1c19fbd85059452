"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PORT = 3001
DEFAULT_TOKEN_TTL_SECONDS = 24 * 60 * 60

# Fallback signing key kept for parity with existing clients; only used when
# ALLOW_INSECURE_SECRET is enabled.
INSECURE_DEFAULT_SECRET = "snaptrack-secret-key"
TOKEN_SALT = "snaptrack-session"

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"
CLASS_NOT_FOUND_MESSAGE = "Class not found or not authorized"
