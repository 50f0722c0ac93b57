from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .common.datetime_utils import format_date, format_duration, format_time
from .core.constants import DEFAULT_UPLOAD_DIR, MAX_PROFILE_IMAGE_BYTES
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .calendar_grid.controller import register as register_calendar
from .punches.controller import register as register_punches
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(*, settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder=str(REPO_ROOT / "templates"), static_folder=str(REPO_ROOT / "static"))

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = int(getattr(settings, "MAX_CONTENT_LENGTH", MAX_PROFILE_IMAGE_BYTES))
    app.config["UPLOAD_DIR"] = str(REPO_ROOT / getattr(settings, "UPLOAD_DIR", DEFAULT_UPLOAD_DIR))
    app.config["UPLOAD_URL_PREFIX"] = str(getattr(settings, "UPLOAD_URL_PREFIX", "/static/uploads/profile_images"))
    app.config["SESSION_COOKIE_HTTPONLY"] = True
    app.config["SESSION_COOKIE_SAMESITE"] = "Lax"
    app.config["SESSION_COOKIE_SECURE"] = bool(getattr(settings, "SESSION_COOKIE_SECURE", False))

    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        container = build_container(
            db_config=db_config,
            recent_limit=int(getattr(settings, "RECENT_RECORDS_LIMIT", 5)),
        )

    app.add_template_filter(format_duration, "duration")
    app.add_template_filter(format_date, "fmt_date")
    app.add_template_filter(format_time, "fmt_time")

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"ok": True})

    register_users(app, container)
    register_punches(app, container)
    register_calendar(app, container)

    return app
