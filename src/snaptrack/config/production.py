import os

from ..core.constants import DEFAULT_PORT, DEFAULT_TOKEN_TTL_SECONDS
from . import env_flag, env_list

PORT = int(os.getenv("PORT", str(DEFAULT_PORT)))

# Production requires an externally supplied signing key.
JWT_SECRET = os.getenv("JWT_SECRET")
ALLOW_INSECURE_SECRET = False
TOKEN_TTL_SECONDS = int(os.getenv("TOKEN_TTL_SECONDS", str(DEFAULT_TOKEN_TTL_SECONDS)))

STORE_BACKEND = os.getenv("STORE_BACKEND", "mysql").lower()

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "snaptrack"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "snaptrack"),
}

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", False)
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", False)

CORS_ORIGINS = env_list("CORS_ORIGINS", "")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DEBUG = False
