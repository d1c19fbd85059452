import os

from ..core.constants import DEFAULT_PORT, DEFAULT_TOKEN_TTL_SECONDS
from . import env_flag, env_list

PORT = int(os.getenv("PORT", str(DEFAULT_PORT)))

JWT_SECRET = os.getenv("JWT_SECRET")
# Falls back to the built-in key (with a warning) when JWT_SECRET is missing.
ALLOW_INSECURE_SECRET = env_flag("ALLOW_INSECURE_SECRET", True)
TOKEN_TTL_SECONDS = int(os.getenv("TOKEN_TTL_SECONDS", str(DEFAULT_TOKEN_TTL_SECONDS)))

# "memory" keeps everything in process; "mysql" uses DB_CONFIG.
STORE_BACKEND = os.getenv("STORE_BACKEND", "memory").lower()

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "snaptrack"),
}

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", True)
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", True)

CORS_ORIGINS = env_list("CORS_ORIGINS", "*")
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

DEBUG = env_flag("DEBUG", True)
