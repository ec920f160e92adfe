from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .billing.controller import register as register_billing
from .container import Container, build_container
from .core.constants import DEFAULT_MINIMUM_HOURS
from .core.log import configure_logging
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig
from .jobs.controller import register as register_jobs

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    db_config = getattr(settings, "DB_CONFIG")
    minimum_hours = float(getattr(settings, "DEFAULT_MINIMUM_HOURS", DEFAULT_MINIMUM_HOURS))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).label())

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        container = build_container(db_config=db_config, default_minimum_hours=minimum_hours)

    register_jobs(app, container)
    register_billing(app, container)

    return app
