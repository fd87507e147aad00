from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from werkzeug.exceptions import HTTPException

from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .common.http import error_response
from .config import get_settings_module
from .container import Container, build_container
from .core.logging import configure_logging
from .database.bootstrap import apply_schema, ensure_admin_account, ensure_default_roles, list_tables
from .departments.controller import register as register_departments
from .employees.controller import register as register_employees
from .roles.controller import register as register_roles

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    db_config = getattr(settings, "DB_CONFIG")

    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if getattr(settings, "AUTO_SEED_DB", False):
            ensure_default_roles(db_config)
            ensure_admin_account(
                db_config,
                email=getattr(settings, "ADMIN_EMAIL"),
                password=getattr(settings, "ADMIN_PASSWORD"),
            )
            logger.info("default roles and admin account ready")
        container = build_container(settings)

    register_auth(app, container)
    register_roles(app, container)
    register_departments(app, container)
    register_employees(app, container)
    register_attendance(app, container)

    @app.errorhandler(404)
    @app.errorhandler(405)
    def http_error(e: HTTPException):
        return error_response(e.description or e.name, e.code)

    return app


if __name__ == "__main__":
    # Each request gets its own thread and DB connection.
    create_app().run(threaded=True)
