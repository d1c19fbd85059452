PORT = 3001

JWT_SECRET = "test-secret"
ALLOW_INSECURE_SECRET = False
TOKEN_TTL_SECONDS = 24 * 60 * 60

STORE_BACKEND = "memory"
DB_CONFIG: dict = {}

AUTO_INIT_DB = False
AUTO_SEED_DB = True

CORS_ORIGINS = ["*"]
LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
