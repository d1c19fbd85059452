from __future__ import annotations

import importlib

from dotenv import load_dotenv

from snaptrack.config import get_settings_module
from snaptrack.container import build_container
from snaptrack.database.connection import DBConfig
from snaptrack.database.seed import seed_demo_data
from snaptrack.users.tokens import resolve_signing_key


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    container = build_container(
        signing_key=resolve_signing_key(settings.JWT_SECRET, allow_insecure=settings.ALLOW_INSECURE_SECRET),
        backend="mysql",
        db_config=db_config,
    )
    seed_demo_data(container)
    print(f"OK: Seeded database -> {DBConfig.from_dict(db_config).describe()}")


if __name__ == "__main__":
    main()
