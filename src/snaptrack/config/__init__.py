import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module, development by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "snaptrack.config.production"

    if env in {"test", "testing"}:
        return "snaptrack.config.testing"

    return "snaptrack.config.development"


def env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def env_list(name: str, default: str) -> list[str]:
    # "a,b , c" -> ["a", "b", "c"]
    return [s.strip() for s in os.getenv(name, default).split(",") if s.strip()]
