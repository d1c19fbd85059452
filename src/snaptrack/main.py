from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS

from .attendance.controller import register as register_attendance
from .classes.controller import register as register_classes
from .common.http import register_error_handlers
from .config import get_settings_module
from .container import build_container
from .core.constants import DEFAULT_PORT, DEFAULT_TOKEN_TTL_SECONDS
from .database.seed import seed_demo_data
from .users.controller import register as register_users
from .users.tokens import resolve_signing_key

logger = logging.getLogger("snaptrack")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger("snaptrack").setLevel(getattr(logging, level, logging.INFO))


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    _configure_logging(str(getattr(settings, "LOG_LEVEL", "INFO")).upper())

    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PORT"] = int(getattr(settings, "PORT", DEFAULT_PORT))
    app.json.sort_keys = False

    backend = str(getattr(settings, "STORE_BACKEND", "memory"))
    db_config = dict(getattr(settings, "DB_CONFIG", {}) or {})
    logger.info("settings=%s backend=%s", settings_module, backend)

    signing_key = resolve_signing_key(
        getattr(settings, "JWT_SECRET", None),
        allow_insecure=bool(getattr(settings, "ALLOW_INSECURE_SECRET", False)),
    )

    if backend == "mysql" and getattr(settings, "AUTO_INIT_DB", False):
        from .database.bootstrap import apply_schema

        apply_schema(db_config)

    container = build_container(
        signing_key=signing_key,
        backend=backend,
        db_config=db_config,
        token_ttl_seconds=int(getattr(settings, "TOKEN_TTL_SECONDS", DEFAULT_TOKEN_TTL_SECONDS)),
    )
    app.extensions["snaptrack.container"] = container

    if getattr(settings, "AUTO_SEED_DB", False):
        seed_demo_data(container)

    CORS(app, resources={r"/api/*": {"origins": list(getattr(settings, "CORS_ORIGINS", ["*"]))}})
    register_error_handlers(app)

    register_users(app, container)
    register_classes(app, container)
    register_attendance(app, container)

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    return app


def run() -> None:
    app = create_app()
    port = app.config["PORT"]
    logger.info("Server running on port %s", port)
    app.run(host="0.0.0.0", port=port, threaded=True)
