from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_default_settings, list_tables
from .salary.controller import register as register_salary
from .settings.controller import register as register_settings
from .settings.service import BUILTIN_DEFAULTS
from .settlement.controller import register as register_settlement
from .suspensions.controller import register as register_suspensions

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

REPO_ROOT = Path(__file__).resolve().parents[3]

logger = logging.getLogger(__name__)


def load_settings():
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def configure_logging(settings) -> None:
    level = getattr(logging, str(getattr(settings, "LOG_LEVEL", "INFO")).upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def container_from_settings(settings) -> Container:
    db_config = getattr(settings, "DB_CONFIG")
    defaults = {**BUILTIN_DEFAULTS, **dict(getattr(settings, "SETTLEMENT_DEFAULTS", {}))}

    if getattr(settings, "AUTO_INIT_DB", False):
        apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
        ensure_default_settings(db_config, defaults)
        logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
    if getattr(settings, "AUTO_SEED_DB", False):
        apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
        logger.info("Demo seed ready")

    return build_container(
        db_config=db_config,
        settlement_defaults=defaults,
        work_start=getattr(settings, "WORK_START", "09:00"),
        grace_minutes=int(getattr(settings, "LATE_GRACE_MINUTES", 15)),
    )


def create_app(container: Optional[Container] = None, *, settings=None) -> Flask:
    settings = settings or load_settings()
    configure_logging(settings)

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["API_TOKEN"] = getattr(settings, "API_TOKEN", "")

    if app.config["DEBUG"]:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings.__name__, db_config.get("user"), db_config.get("host"),
            db_config.get("port", 3306), db_config.get("database"),
        )

    container = container or container_from_settings(settings)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_attendance(app, container)
    register_salary(app, container)
    register_settings(app, container)
    register_settlement(app, container)
    register_suspensions(app, container)

    return app
