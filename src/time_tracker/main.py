from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .core.constants import DEFAULT_CHANGE_FEED_HISTORY
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_employees, list_tables

from .container import Container, build_container
from .auth.controller import register as register_auth
from .employees.controller import register as register_employees
from .realtime.controller import register as register_realtime
from .reports.controller import register as register_reports
from .time_logs.controller import register as register_time_logs

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[2] / "database"


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            ensure_demo_employees(db_config)
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
            logger.info("demo seed ready")

        container = build_container(
            db_config=db_config,
            admin_email=getattr(settings, "ADMIN_EMAIL"),
            admin_password=getattr(settings, "ADMIN_PASSWORD"),
            change_feed_history=int(getattr(settings, "CHANGE_FEED_HISTORY", DEFAULT_CHANGE_FEED_HISTORY)),
        )

    app.extensions["time_tracker"] = container

    register_auth(app, container)
    register_time_logs(app, container)
    register_employees(app, container)
    register_reports(app, container)
    register_realtime(app, container)

    return app
