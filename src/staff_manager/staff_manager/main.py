from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import MEMORY_BACKEND, Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .store.sample_data import seed_sample_data

from .attendance.controller import register as register_attendance
from .credits.controller import register as register_credits
from .employees.controller import register as register_employees
from .history.controller import register as register_history
from .payroll.controller import register as register_payroll
from .settings.controller import register as register_settings
from .tasks.controller import register as register_tasks

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["BACKUP_DIR"] = str(REPO_ROOT / getattr(settings, "BACKUP_DIR", "backups"))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if container is None:
        backend = getattr(settings, "STORE_BACKEND", MEMORY_BACKEND)
        container = build_container(backend=backend, db_config=getattr(settings, "DB_CONFIG", None))

        if container.conn is not None:
            # Startup info avoids "connected but no tables" confusion.
            logger.info("settings=%s db=%s", settings_module, container.conn.config.describe())
            if bool(getattr(settings, "AUTO_INIT_DB", False)):
                apply_schema(container.conn)
                logger.info("Schema ready (tables=%d)", len(list_tables(container.conn)))
        else:
            logger.info("settings=%s backend=%s", settings_module, container.backend)

        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            seed_sample_data(container.store)

    app.extensions["staff_manager"] = container

    register_employees(app, container)
    register_attendance(app, container)
    register_credits(app, container)
    register_tasks(app, container)
    register_history(app, container)
    register_settings(app, container)
    register_payroll(app, container)

    return app
